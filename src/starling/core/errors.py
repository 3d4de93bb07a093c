"""Jerarquía de errores del SDK.

Por qué aquí:
- Todo error propio lleva un `code` estable para que los callers puedan
  ramificar sin parsear mensajes en inglés.
- Los errores del transporte NO se envuelven: `TransportError` es solo un
  alias de `httpx.HTTPError` para que el caller sepa qué capturar.
"""

from __future__ import annotations

from typing import Any

import httpx

from starling.core.domain.models import Issue

TransportError = httpx.HTTPError


class StarlingError(Exception):
    """Base class for all SDK-level errors."""

    code: str = "STARLING_ERROR"

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"code": self.code, "message": self.message}
        if self.details:
            payload["details"] = self.details
        return payload


class ValidationError(StarlingError, ValueError):
    """Input rejected before any network call was attempted."""

    code = "VALIDATION_ERROR"

    def __init__(self, issues: list[Issue] | tuple[Issue, ...]) -> None:
        self.issues: tuple[Issue, ...] = tuple(issues)
        summary = "; ".join(issue.message for issue in self.issues) or "invalid input"
        super().__init__(
            message=f"Invalid parameters: {summary}",
            details={"issues": [issue.model_dump() for issue in self.issues]},
        )

    @property
    def fields(self) -> list[str]:
        return [issue.field for issue in self.issues]


class SchemaDefinitionError(StarlingError):
    """Programming-time defect in a schema declaration (never caused by user input)."""

    code = "SCHEMA_DEFINITION_ERROR"


class UnknownFieldTypeError(SchemaDefinitionError):
    code = "UNKNOWN_FIELD_TYPE"

    def __init__(self, name: str) -> None:
        super().__init__(
            message=f"unknown field type: {name!r}",
            details={"name": name},
        )


class DuplicateFieldTypeError(SchemaDefinitionError):
    code = "DUPLICATE_FIELD_TYPE"

    def __init__(self, name: str) -> None:
        super().__init__(
            message=f"field type {name!r} is already registered",
            details={"name": name},
        )


class UnknownShapeError(SchemaDefinitionError):
    code = "UNKNOWN_SHAPE"

    def __init__(self, value: object) -> None:
        super().__init__(
            message=f"expected a Shape or UnionShape, got {type(value).__name__}",
            details={"received": type(value).__name__},
        )
