"""Pagination for HAL collections."""

from .base import Pagination, PaginationBase
from .standard import PagePagination

__all__ = ["PagePagination", "Pagination", "PaginationBase"]
