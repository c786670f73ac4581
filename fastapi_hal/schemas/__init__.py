"""Pydantic schemas for HAL."""

from .resource import HALLink, VndError, VndErrorDocument

__all__ = [
    "HALLink",
    "VndError",
    "VndErrorDocument",
]
