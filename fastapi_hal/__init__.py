"""HAL representation building for FastAPI services."""

from .core.builder import RepresentationBuilder
from .core.errors import BuilderStateError, HALErrorBuilder
from .core.representation import Representation, RepresentationFactory
from .pagination import Pagination
from .responses import HALResponse
from .utils.uri import UriBuilder
from .viewsets.base import HALViewSet

__all__ = [
    "BuilderStateError",
    "HALErrorBuilder",
    "HALResponse",
    "HALViewSet",
    "Pagination",
    "Representation",
    "RepresentationBuilder",
    "RepresentationFactory",
    "UriBuilder",
]
