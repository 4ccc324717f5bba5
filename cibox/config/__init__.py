"""Configuration for cibox."""

from .defaults import DEFAULT_TRAVIS_DEFAULTS, LanguageDefaults, TravisDefaults
from .settings import CiboxSettings, load_settings


__all__ = [
    "DEFAULT_TRAVIS_DEFAULTS",
    "CiboxSettings",
    "LanguageDefaults",
    "TravisDefaults",
    "load_settings",
]
