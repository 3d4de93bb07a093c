"""Capa de validación de parámetros.

Tres piezas:
- `field_types`: registro global (append-only) de predicados con nombre.
- `shapes`: composición declarativa de shapes, uniones, enums y literales.
- `validator`: `validate(shape, data)` previo a cualquier llamada de red.
"""

from starling.core.validation.field_types import (
    OPTIONAL_MARKER,
    FieldType,
    FieldTypeRegistry,
    register,
    registry,
    resolve,
)
from starling.core.validation.shapes import (
    MIN_API_PARAMETERS,
    EnumRule,
    LiteralRule,
    OptionalRule,
    Shape,
    ShapeRule,
    TypeRule,
    UnionShape,
    enum,
    interface,
    literal,
    optional,
    union,
)
from starling.core.validation.validator import check, matching_alternative, validate

__all__ = [
    "MIN_API_PARAMETERS",
    "OPTIONAL_MARKER",
    "EnumRule",
    "FieldType",
    "FieldTypeRegistry",
    "LiteralRule",
    "OptionalRule",
    "Shape",
    "ShapeRule",
    "TypeRule",
    "UnionShape",
    "check",
    "enum",
    "interface",
    "literal",
    "matching_alternative",
    "optional",
    "register",
    "registry",
    "resolve",
    "union",
    "validate",
]
