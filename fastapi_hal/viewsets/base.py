"""Base viewset helpers for HAL resources."""

import logging
from typing import Any

from fastapi import Request

from fastapi_hal.core.builder import RepresentationBuilder
from fastapi_hal.core.representation import Representation
from fastapi_hal.pagination.standard import PagePagination
from fastapi_hal.utils.query_params import parse_page_params

logger = logging.getLogger(__name__)


class HALViewSet:
    """Base class turning request data into HAL representations.

    Subclasses set ``serializer_class``; handlers call ``build_item`` or
    ``build_collection`` and return the result in a ``HALResponse``.
    """

    serializer_class: type | None = None
    pagination_class: type | None = PagePagination
    builder_class: type = RepresentationBuilder

    def get_serializer(self) -> Any:
        """Instantiate the serializer."""
        if not self.serializer_class:
            raise ValueError("serializer_class must be set.")
        return self.serializer_class()

    def get_self_uri(self, request: Request) -> str:
        """Return the request URL without its query string."""
        return str(request.url.replace(query=""))

    def get_page_params(self, request: Request) -> dict[str, int]:
        """Parse page number and page size from the query string."""
        return parse_page_params(request.query_params)

    def get_builder(self, request: Request, bean: Any = None) -> RepresentationBuilder:
        """Return a builder anchored at the request URL."""
        return self.builder_class.new_instance(self.get_self_uri(request), bean)

    def build_item(
        self,
        request: Request,
        instance: Any,
        *,
        links: dict[str, str] | None = None,
        embedded: dict[str, list[Representation]] | None = None,
    ) -> Representation:
        """Build the representation of a single resource."""
        serializer = self.get_serializer()
        builder = self.get_builder(request, serializer.get_properties(instance))
        if links:
            builder.with_links(links)
        if embedded:
            builder.with_embedded(embedded)
        return builder.build()

    def build_collection(
        self,
        request: Request,
        items: list[Any],
        *,
        links: dict[str, str] | None = None,
        bean: Any = None,
    ) -> Representation:
        """Build a paginated collection with items embedded under ``Meta.rel``."""
        serializer = self.get_serializer()
        self_uri = self.get_self_uri(request)
        builder = self.get_builder(request, bean)

        page_items = items
        if self.pagination_class:
            paginator = self.pagination_class()
            params = self.get_page_params(request)
            page_items = paginator.paginate_queryset(items, params)
            builder.with_pagination(paginator.get_pagination(total=len(items), params=params))

        children = serializer.to_many(page_items, base_uri=self_uri)
        logger.debug("Embedding %d of %d items at %s", len(children), len(items), self_uri)
        if links:
            builder.with_links(links)
        builder.with_embedded({serializer.Meta.rel: children})
        return builder.build()
