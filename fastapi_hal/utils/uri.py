"""URI building helpers for links and URI templates."""

from __future__ import annotations

import re
from typing import Any
from urllib.parse import quote, urlencode, urlsplit, urlunsplit

_TEMPLATE_VARIABLE = re.compile(r"\{([^{}]+)\}")


def is_template(uri: str) -> bool:
    """Return True if the URI contains a ``{variable}`` expression."""
    return bool(_TEMPLATE_VARIABLE.search(uri))


class UriBuilder:
    """Build a URI from a base URI plus query parameters.

    Query parameters are appended after any query the base URI already
    carries, in the order they were added::

        UriBuilder.from_uri("http://x/items").query_param("pn", 2).build()
        # 'http://x/items?pn=2'
    """

    def __init__(self, uri: str) -> None:
        self._uri = str(uri)
        self._query: list[tuple[str, str]] = []

    @classmethod
    def from_uri(cls, uri: Any) -> UriBuilder:
        """Return a new builder seeded with ``uri``."""
        return cls(str(uri))

    def query_param(self, name: str, *values: Any) -> UriBuilder:
        """Append one query parameter per value."""
        for value in values:
            self._query.append((name, str(value)))
        return self

    def build(self, **variables: Any) -> str:
        """Return the URI, expanding ``{name}`` template variables if given."""
        uri = self._uri
        if variables:
            uri = self._expand(uri, variables)
        if not self._query:
            return uri
        split = urlsplit(uri)
        query = urlencode(self._query)
        if split.query:
            query = f"{split.query}&{query}"
        return urlunsplit((split.scheme, split.netloc, split.path, query, split.fragment))

    @staticmethod
    def _expand(uri: str, variables: dict[str, Any]) -> str:
        def replace(match: re.Match[str]) -> str:
            name = match.group(1)
            if name not in variables:
                return match.group(0)
            return quote(str(variables[name]), safe="")

        return _TEMPLATE_VARIABLE.sub(replace, uri)
