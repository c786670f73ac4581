"""Pagination value object and strategy base class."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class Pagination(BaseModel):
    """Page position within a result set.

    Previous and next pages are clamped to the first and last pages, so a
    single-page result reports page 1 for every navigation target.
    """

    model_config = ConfigDict(frozen=True)

    current_page: int = Field(default=1, ge=1)
    results_per_page: int = Field(default=10, ge=1)
    total_results: int = Field(default=0, ge=0)

    @property
    def total_pages(self) -> int:
        return max(1, -(-self.total_results // self.results_per_page))

    @property
    def previous_page(self) -> int:
        return max(1, self.current_page - 1)

    @property
    def next_page(self) -> int:
        return min(self.total_pages, self.current_page + 1)

    @property
    def first_result(self) -> int:
        """Zero-based offset of the first item on the current page."""
        return (self.current_page - 1) * self.results_per_page


class PaginationBase:
    """Define the pagination API used by viewsets."""

    def paginate_queryset(self, items: list[Any], params: dict[str, Any]) -> list[Any]:
        """Return a paginated slice of items."""
        raise NotImplementedError

    def get_pagination(self, *, total: int, params: dict[str, Any]) -> Pagination:
        """Return the pagination descriptor for the requested page."""
        raise NotImplementedError
