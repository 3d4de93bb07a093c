"""Registro de tipos de campo (predicados con nombre).

Por qué un registro:
- Las shapes referencian reglas por nombre ("uuid", "date?", ...) y el nombre
  se resuelve al declarar la shape, así un typo falla en import y no en runtime.
- Es el único registro global del proceso y solo admite altas (append-only):
  `register` nunca sobrescribe.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from datetime import date
from typing import Any, Callable, Iterator

from starling.core.errors import DuplicateFieldTypeError, UnknownFieldTypeError

OPTIONAL_MARKER = "?"

Predicate = Callable[[Any], bool]


@dataclass(frozen=True)
class FieldType:
    name: str
    predicate: Predicate
    description: str

    def __call__(self, value: Any) -> bool:
        return bool(self.predicate(value))


class FieldTypeRegistry:
    """Named primitive validators, looked up by name."""

    def __init__(self) -> None:
        self._types: dict[str, FieldType] = {}

    def register(self, name: str, predicate: Predicate, description: str) -> FieldType:
        if not name or name.endswith(OPTIONAL_MARKER):
            raise ValueError(f"invalid field type name: {name!r}")
        if name in self._types:
            raise DuplicateFieldTypeError(name)
        field_type = FieldType(name=name, predicate=predicate, description=description)
        self._types[name] = field_type
        return field_type

    def resolve(self, name: str) -> FieldType:
        try:
            return self._types[name]
        except KeyError:
            raise UnknownFieldTypeError(name) from None

    def names(self) -> list[str]:
        return list(self._types)

    def __contains__(self, name: object) -> bool:
        return name in self._types

    def __iter__(self) -> Iterator[FieldType]:
        return iter(self._types.values())


def split_optional(spec: str) -> tuple[str, bool]:
    """`"date?"` -> `("date", True)`; `"date"` -> `("date", False)`."""

    if spec.endswith(OPTIONAL_MARKER):
        return spec[: -len(OPTIONAL_MARKER)], True
    return spec, False


# --- Predicados built-in -------------------------------------------------

_UUID_RE = re.compile(
    r"[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}",
    re.IGNORECASE,
)
_DATE_RE = re.compile(r"(\d{4})-(\d{2})-(\d{2})", re.ASCII)
_YEAR_MONTH_RE = re.compile(r"(\d{4})-(\d{2})", re.ASCII)
_TIMESTAMP_RE = re.compile(
    r"(\d{4}-\d{2}-\d{2})T(\d{2}):(\d{2})(?::(\d{2})(?:\.\d+)?)?"
    r"(Z|[+-](\d{2}):(\d{2}))?",
    re.IGNORECASE | re.ASCII,
)


def is_string(value: Any) -> bool:
    return isinstance(value, str) and bool(value.strip())


def is_number(value: Any) -> bool:
    # bool es subclase de int en Python: no cuenta como número.
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    # Un int enorme no cabe en float; sigue siendo un número finito.
    return isinstance(value, int) or math.isfinite(value)


def is_boolean(value: Any) -> bool:
    return isinstance(value, bool)


def is_uuid(value: Any) -> bool:
    return isinstance(value, str) and _UUID_RE.fullmatch(value) is not None


def _is_calendar_date(text: str) -> bool:
    match = _DATE_RE.fullmatch(text)
    if match is None:
        return False
    year, month, day = (int(part) for part in match.groups())
    try:
        date(year, month, day)
    except ValueError:
        return False
    return True


def is_date(value: Any) -> bool:
    return isinstance(value, str) and _is_calendar_date(value)


def is_timestamp(value: Any) -> bool:
    if not isinstance(value, str):
        return False
    match = _TIMESTAMP_RE.fullmatch(value)
    if match is None:
        return False
    day, hour, minute, second, _zone, offset_hours, offset_minutes = match.groups()
    if not _is_calendar_date(day):
        return False
    if int(hour) > 23 or int(minute) > 59:
        return False
    if second is not None and int(second) > 59:
        return False
    if offset_hours is not None and (int(offset_hours) > 23 or int(offset_minutes) > 59):
        return False
    return True


def is_year_month(value: Any) -> bool:
    if not isinstance(value, str):
        return False
    match = _YEAR_MONTH_RE.fullmatch(value)
    return match is not None and 1 <= int(match.group(2)) <= 12


BUILTIN_TYPES: tuple[tuple[str, Predicate, str], ...] = (
    ("string", is_string, "a non-empty string"),
    ("number", is_number, "a finite number"),
    ("boolean", is_boolean, "a boolean"),
    ("uuid", is_uuid, "a canonical UUID (xxxxxxxx-xxxx-xxxx-xxxx-xxxxxxxxxxxx)"),
    ("date", is_date, "an ISO-8601 calendar date (yyyy-MM-dd)"),
    ("timestamp", is_timestamp, "an ISO-8601 date-time (yyyy-MM-ddTHH:mm:ss[.SSS][Z|±HH:MM])"),
    ("yearMonth", is_year_month, "a year and month (yyyy-MM)"),
)


def build_default_registry() -> FieldTypeRegistry:
    reg = FieldTypeRegistry()
    for name, predicate, description in BUILTIN_TYPES:
        reg.register(name, predicate, description)
    return reg


registry = build_default_registry()


def register(name: str, predicate: Predicate, description: str) -> FieldType:
    return registry.register(name, predicate, description)


def resolve(name: str) -> FieldType:
    return registry.resolve(name)
