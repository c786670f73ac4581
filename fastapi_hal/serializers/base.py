"""Base serializer for HAL item representations."""

from __future__ import annotations

from typing import Any, Iterable

from fastapi_hal.core.builder import RepresentationBuilder
from fastapi_hal.core.representation import Representation
from fastapi_hal.serializers.beans import bean_properties


class HALSerializer:
    """Serialize domain objects (SQLAlchemy models included) into HAL representations."""

    class Meta:
        """Serializer metadata (collection relation, fields)."""

        rel: str = ""
        fields: list[str] = []

    def to_representation(
        self,
        instance: Any,
        *,
        base_uri: str | None = None,
        links: dict[str, str] | None = None,
    ) -> Representation:
        """Build the representation of a single instance."""
        self_uri = self.item_uri(base_uri, self.get_id(instance)) if base_uri else None
        builder = RepresentationBuilder.new_instance(self_uri, self.get_properties(instance))
        if links:
            builder.with_links(links)
        return builder.build()

    def to_many(
        self, instances: Iterable[Any], *, base_uri: str | None = None
    ) -> list[Representation]:
        """Serialize a collection of instances."""
        return [self.to_representation(instance, base_uri=base_uri) for instance in instances]

    def get_id(self, instance: Any) -> str:
        """Return the resource id as a string."""
        value = getattr(instance, "id", None)
        if value is None and isinstance(instance, dict):
            value = instance.get("id")
        return "" if value is None else str(value)

    def get_properties(self, instance: Any) -> dict[str, Any]:
        """Return the bean properties, restricted to ``Meta.fields`` when set."""
        properties = bean_properties(instance)
        if self.Meta.fields:
            return {field: properties.get(field) for field in self.Meta.fields}
        return properties

    def item_uri(self, base_uri: str, resource_id: str) -> str:
        base = base_uri.rstrip("/")
        return f"{base}/{resource_id}"
