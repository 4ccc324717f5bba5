"""Data models for cibox."""

from .base import CiboxBaseModel
from .build import Build


__all__ = ["Build", "CiboxBaseModel"]
