"""One-shot builder for HAL representations."""

from __future__ import annotations

import logging
from typing import Any, Mapping, Sequence

from fastapi_hal.config import get_settings
from fastapi_hal.core.errors import BuilderStateError
from fastapi_hal.core.representation import Representation, RepresentationFactory
from fastapi_hal.utils.uri import UriBuilder

logger = logging.getLogger(__name__)


class RepresentationBuilder:
    """Assemble a representation from a self URI, links, a bean and embedded resources.

    The builder is mutable until ``build()`` runs, after which every call
    raises ``BuilderStateError``. It is not safe to share between threads.

    Pagination descriptors are read through ``current_page``,
    ``previous_page``, ``next_page``, ``total_pages`` and
    ``results_per_page``.
    """

    representation_factory_class: type = RepresentationFactory

    def __init__(self, self_uri: Any, bean: Any = None) -> None:
        # Mandatory configuration
        self.self_uri = self_uri
        self.bean = bean

        # Optional configuration
        self._pagination: Any = None
        self._links: dict[str, str] = {}
        self._embedded: dict[str, list[Representation]] = {}

        self._is_built = False

    @classmethod
    def new_instance(cls, self_uri: Any, bean: Any = None) -> RepresentationBuilder:
        """Return a new builder for the resource at ``self_uri``."""
        return cls(self_uri, bean)

    @property
    def is_built(self) -> bool:
        return self._is_built

    def with_pagination(self, pagination: Any) -> RepresentationBuilder:
        """Add standard pagination links; ``None`` removes them."""
        self._validate_state()
        self._pagination = pagination
        return self

    def with_links(self, links: Mapping[str, str]) -> RepresentationBuilder:
        """Replace the links. Values may be URI templates."""
        self._validate_state()
        self._links = dict(links)
        return self

    def with_embedded(self, embedded: Mapping[str, Sequence[Representation]]) -> RepresentationBuilder:
        """Replace the embedded representations, keyed by relation."""
        self._validate_state()
        self._embedded = {rel: list(children) for rel, children in embedded.items()}
        return self

    def build(self) -> Representation:
        """Build the representation. No further configuration is possible after this."""
        self._validate_state()

        factory = self.representation_factory_class()
        pagination = self._pagination

        if pagination is not None:
            paginated_self = self._page_uri(pagination.current_page, pagination.results_per_page)
            representation = factory.new_representation(paginated_self)
            # "current" points at the previous page, matching the established link set
            (
                representation.with_link("first", self._page_uri(1, pagination.results_per_page))
                .with_link("previous", self._page_uri(pagination.previous_page, pagination.results_per_page))
                .with_link("current", self._page_uri(pagination.previous_page, pagination.results_per_page))
                .with_link("next", self._page_uri(pagination.next_page, pagination.results_per_page))
                .with_link("last", self._page_uri(pagination.total_pages, pagination.results_per_page))
            )
        else:
            representation = factory.new_representation(self.self_uri)

        for rel, href in self._links.items():
            representation.with_link(rel, href)

        if self.bean is not None:
            representation.with_bean(self.bean)

        # Relations with several entries render as an array
        for rel, children in self._embedded.items():
            for child in children:
                representation.with_representation(rel, child)

        self._is_built = True
        logger.debug(
            "Built representation for %s (paginated=%s, links=%d, embedded=%d)",
            self.self_uri,
            pagination is not None,
            len(self._links),
            sum(len(children) for children in self._embedded.values()),
        )
        return representation

    def _page_uri(self, page_number: Any, page_size: Any) -> str:
        settings = get_settings()
        return (
            UriBuilder.from_uri(self.self_uri)
            .query_param(settings.page_number_param, page_number)
            .query_param(settings.page_size_param, page_size)
            .build()
        )

    def _validate_state(self) -> None:
        if self._is_built:
            logger.warning("Rejected change to finished builder for %s", self.self_uri)
            raise BuilderStateError()
