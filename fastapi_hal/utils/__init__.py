"""Utility helpers for URIs and query parameters."""

from .query_params import normalize_page_values, parse_page_params
from .uri import UriBuilder, is_template

__all__ = ["UriBuilder", "is_template", "normalize_page_values", "parse_page_params"]
