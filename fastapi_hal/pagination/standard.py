"""Page-number pagination strategy."""

from __future__ import annotations

from typing import Any

from fastapi_hal.utils.query_params import normalize_page_values

from .base import Pagination, PaginationBase


class PagePagination(PaginationBase):
    """Paginate with the ``page_number``/``page_size`` values of parse_page_params.

    Missing or invalid values fall back to page 1 and the configured default
    page size.
    """

    def paginate_queryset(self, items: list[Any], params: dict[str, Any]) -> list[Any]:
        """Return the items of the requested page."""
        pagination = self.get_pagination(total=len(items), params=params)
        offset = pagination.first_result
        return items[offset : offset + pagination.results_per_page]

    def get_pagination(self, *, total: int, params: dict[str, Any]) -> Pagination:
        """Build the descriptor for the requested page out of ``total`` results."""
        page = normalize_page_values(params.get("page_number"), params.get("page_size"))
        return Pagination(
            current_page=page["page_number"],
            results_per_page=page["page_size"],
            total_results=total,
        )
