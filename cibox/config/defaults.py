"""Per-language defaults for Travis CI configurations.

These tables are plain data so other CI dialects can provide their own
defaults without touching matrix logic. ``TravisDefaults`` is injected into
the Travis CI strategy; ``DEFAULT_TRAVIS_DEFAULTS`` is used when nothing is
injected.
"""

from pydantic import Field

from cibox.models.base import CiboxBaseModel


class LanguageDefaults(CiboxBaseModel):
    """Commands used for a language when the configuration omits a phase."""

    before_install: list[str] = Field(default_factory=list)
    install: list[str] = Field(default_factory=list)
    before_script: list[str] = Field(default_factory=list)
    script: list[str] = Field(default_factory=list)
    env: list[str] = Field(default_factory=list)

    def get(self, key: str) -> list[str]:
        """Return the default list for a phase or ``env``."""
        return list(getattr(self, key, []))


class TravisDefaults(CiboxBaseModel):
    """Language defaults and version-key aliases for Travis CI."""

    default_language: str = "ruby"
    version_key_aliases: dict[str, str] = Field(default_factory=dict)
    languages: dict[str, LanguageDefaults] = Field(default_factory=dict)

    def version_key(self, language: str) -> str:
        """Name of the configuration field holding the versions of a language."""
        return self.version_key_aliases.get(language, language)

    def get_default(self, language: str, key: str) -> list[str]:
        """Default list for a language phase, empty for unknown languages."""
        defaults = self.languages.get(language)
        if defaults is None:
            return []
        return defaults.get(key)


DEFAULT_TRAVIS_DEFAULTS = TravisDefaults(
    default_language="ruby",
    version_key_aliases={"ruby": "rvm"},
    languages={
        "php": LanguageDefaults(
            install=["composer install"],
            script=["phpunit"],
        ),
        "ruby": LanguageDefaults(
            install=["bundle install"],
            script=["bundle exec rake"],
        ),
        "node_js": LanguageDefaults(
            install=["npm install"],
            script=["npm test"],
        ),
    },
)
