"""Viewset helpers for HAL resources."""

from .base import HALViewSet

__all__ = ["HALViewSet"]
