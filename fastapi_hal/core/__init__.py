"""Core HAL representation, builder and error helpers."""

from .builder import RepresentationBuilder
from .errors import BuilderStateError, HALErrorBuilder
from .representation import Representation, RepresentationFactory

__all__ = [
    "BuilderStateError",
    "HALErrorBuilder",
    "Representation",
    "RepresentationBuilder",
    "RepresentationFactory",
]
