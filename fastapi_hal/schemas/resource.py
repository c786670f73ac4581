"""Pydantic schemas for HAL links and vnd.error documents."""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class HALLink(BaseModel):
    """Link object: href plus optional template flag and labels."""

    href: str
    templated: Optional[bool] = None
    title: Optional[str] = None
    name: Optional[str] = None


class VndError(BaseModel):
    """Single vnd.error object."""

    message: str
    logref: Optional[str] = None
    path: Optional[str] = None


class VndErrorDocument(BaseModel):
    """Collection of vnd.error objects embedded under ``errors``."""

    model_config = ConfigDict(populate_by_name=True)

    total: int
    embedded: Dict[str, List[VndError]] = Field(alias="_embedded")
    links: Optional[Dict[str, Any]] = Field(default=None, alias="_links")
