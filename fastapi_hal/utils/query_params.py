"""Helpers for page-number query parameter parsing."""

from __future__ import annotations

from typing import Any, Mapping

from fastapi_hal.config import HALSettings, get_settings


def _to_positive_int(value: Any, default: int) -> int:
    try:
        number = int(str(value).strip())
    except (TypeError, ValueError):
        return default
    return number if number >= 1 else default


def normalize_page_values(
    page_number: Any, page_size: Any, *, settings: HALSettings | None = None
) -> dict[str, int]:
    """Return a valid page number and page size.

    Missing or invalid values fall back to page 1 and the default page size.
    The page size is capped at ``max_page_size``.
    """
    settings = settings or get_settings()
    page_size = _to_positive_int(page_size, settings.default_page_size)
    return {
        "page_number": _to_positive_int(page_number, 1),
        "page_size": min(page_size, settings.max_page_size),
    }


def parse_page_params(
    params: Mapping[str, Any], *, settings: HALSettings | None = None
) -> dict[str, int]:
    """Normalize page number and page size query parameters."""
    settings = settings or get_settings()
    return normalize_page_values(
        params.get(settings.page_number_param),
        params.get(settings.page_size_param),
        settings=settings,
    )
