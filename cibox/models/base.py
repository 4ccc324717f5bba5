"""Base model for cibox Pydantic models."""

from typing import Any

from pydantic import BaseModel, ConfigDict


class CiboxBaseModel(BaseModel):
    """Base model class for cibox Pydantic models.

    Models are strict about unknown fields and validate on assignment.
    """

    model_config = ConfigDict(
        extra="forbid",
        str_strip_whitespace=True,
        validate_assignment=True,
    )

    def to_dict(self) -> dict[str, Any]:
        """Convert model to dictionary using JSON-compatible serialization."""
        return self.model_dump(by_alias=True, exclude_unset=False, mode="json")
