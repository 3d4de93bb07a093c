"""Cliente Python para la API REST de Starling Bank."""

from starling.client import StarlingClient
from starling.core.config import StarlingSettings
from starling.core.errors import (
    DuplicateFieldTypeError,
    SchemaDefinitionError,
    StarlingError,
    TransportError,
    UnknownFieldTypeError,
    UnknownShapeError,
    ValidationError,
)

__all__ = [
    "DuplicateFieldTypeError",
    "SchemaDefinitionError",
    "StarlingClient",
    "StarlingError",
    "StarlingSettings",
    "TransportError",
    "UnknownFieldTypeError",
    "UnknownShapeError",
    "ValidationError",
]

__version__ = "0.1.0"
