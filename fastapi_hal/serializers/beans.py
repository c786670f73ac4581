"""Extract HAL properties from bean objects."""

from __future__ import annotations

import dataclasses
from typing import Any, Mapping

from pydantic import BaseModel
from sqlalchemy import inspect
from sqlalchemy.exc import NoInspectionAvailable


def _column_properties(instance: Any) -> dict[str, Any] | None:
    try:
        state = inspect(instance)
    except NoInspectionAvailable:
        return None
    mapper = getattr(state, "mapper", None)
    if mapper is None:
        return None
    return {attr.key: getattr(instance, attr.key) for attr in mapper.column_attrs}


def bean_properties(bean: Any) -> dict[str, Any]:
    """Return the properties a bean contributes to a representation.

    Supports mappings, pydantic models, SQLAlchemy mapped instances,
    dataclasses and plain objects (public instance attributes).
    """
    if bean is None:
        return {}
    if isinstance(bean, Mapping):
        return dict(bean)
    if isinstance(bean, BaseModel):
        return bean.model_dump()
    columns = _column_properties(bean)
    if columns is not None:
        return columns
    if dataclasses.is_dataclass(bean) and not isinstance(bean, type):
        return dataclasses.asdict(bean)
    if hasattr(bean, "__dict__"):
        return {key: value for key, value in vars(bean).items() if not key.startswith("_")}
    raise TypeError(f"Cannot extract properties from {type(bean).__name__}")
