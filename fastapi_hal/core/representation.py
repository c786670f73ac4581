"""HAL representation model and factory."""

from __future__ import annotations

from typing import Any

from fastapi_hal.schemas.resource import HALLink
from fastapi_hal.serializers.beans import bean_properties
from fastapi_hal.utils.uri import is_template

# Property names that would collide with the HAL link and embedded blocks
RESERVED_KEYS = frozenset({"_links", "_embedded"})


class Representation:
    """A HAL resource: links, properties and embedded representations.

    Mutators return the representation so calls can be chained. Links and
    embedded children keep their insertion order; a relation used more than
    once is rendered as an array.
    """

    def __init__(self, href: str | None = None) -> None:
        self._links: list[tuple[str, HALLink]] = []
        self._properties: dict[str, Any] = {}
        self._embedded: dict[str, list[Representation]] = {}
        self._bean: Any = None
        if href is not None:
            self.with_link("self", href)

    def with_link(
        self,
        rel: str,
        href: Any,
        *,
        title: str | None = None,
        name: str | None = None,
    ) -> Representation:
        """Attach a link under ``rel``."""
        href = str(href)
        link = HALLink(
            href=href,
            templated=True if is_template(href) else None,
            title=title,
            name=name,
        )
        self._links.append((rel, link))
        return self

    def with_property(self, name: str, value: Any) -> Representation:
        """Set a single named property."""
        self._properties[name] = value
        return self

    def with_bean(self, bean: Any) -> Representation:
        """Attach ``bean`` as primary data and merge its properties."""
        self._bean = bean
        self._properties.update(bean_properties(bean))
        return self

    def with_representation(self, rel: str, representation: Representation) -> Representation:
        """Embed ``representation`` under ``rel``."""
        self._embedded.setdefault(rel, []).append(representation)
        return self

    @property
    def self_link(self) -> HALLink | None:
        return self.get_link("self")

    @property
    def links(self) -> list[tuple[str, HALLink]]:
        return list(self._links)

    def get_link(self, rel: str) -> HALLink | None:
        """Return the first link under ``rel``, if any."""
        for link_rel, link in self._links:
            if link_rel == rel:
                return link
        return None

    def get_links_by_rel(self, rel: str) -> list[HALLink]:
        return [link for link_rel, link in self._links if link_rel == rel]

    @property
    def properties(self) -> dict[str, Any]:
        return dict(self._properties)

    @property
    def bean(self) -> Any:
        return self._bean

    @property
    def embedded(self) -> dict[str, list[Representation]]:
        return {rel: list(children) for rel, children in self._embedded.items()}

    def get_embedded(self, rel: str) -> list[Representation]:
        return list(self._embedded.get(rel, []))

    def to_dict(self) -> dict[str, Any]:
        """Return the HAL document as plain Python data."""
        links: dict[str, Any] = {}
        for rel, link in self._links:
            rendered = link.model_dump(exclude_none=True)
            if rel not in links:
                links[rel] = rendered
            elif isinstance(links[rel], list):
                links[rel].append(rendered)
            else:
                links[rel] = [links[rel], rendered]

        document: dict[str, Any] = {}
        if links:
            document["_links"] = links
        document.update(
            (name, value) for name, value in self._properties.items() if name not in RESERVED_KEYS
        )
        if self._embedded:
            document["_embedded"] = {
                rel: children[0].to_dict() if len(children) == 1 else [child.to_dict() for child in children]
                for rel, children in self._embedded.items()
            }
        return document

    def __repr__(self) -> str:
        href = self.self_link.href if self.self_link else None
        return f"Representation(href={href!r})"


class RepresentationFactory:
    """Create HAL representations."""

    def new_representation(self, uri: Any = None) -> Representation:
        """Return an empty representation anchored at ``uri``."""
        return Representation(None if uri is None else str(uri))
