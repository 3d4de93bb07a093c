"""Composición de shapes (qué campos espera cada operación).

Por qué variantes etiquetadas y no closures:
- Una shape es *dato*: se puede inspeccionar, extender y testear.
- Uniones y literales son de primera clase (la rama OAuth las necesita).

Uso:

    ACCOUNT = interface({**MIN_API_PARAMETERS.fields, "account_uid": "uuid"})
    RANGE = ACCOUNT.extend(start="date", end="date?")
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Any, Iterable, Iterator, Mapping, Union

from starling.core.errors import SchemaDefinitionError
from starling.core.validation.field_types import (
    FieldType,
    FieldTypeRegistry,
    registry as default_registry,
    split_optional,
)


def _show(value: Any) -> str:
    if isinstance(value, Enum):
        value = value.value
    return repr(value)


@dataclass(frozen=True)
class TypeRule:
    field_type: FieldType

    @property
    def name(self) -> str:
        return self.field_type.name

    def describe(self) -> str:
        return self.field_type.description


@dataclass(frozen=True)
class EnumRule:
    values: tuple[Any, ...]

    def describe(self) -> str:
        return "one of " + ", ".join(_show(v) for v in self.values)


@dataclass(frozen=True)
class LiteralRule:
    value: Any

    def describe(self) -> str:
        return f"exactly {_show(self.value)}"


@dataclass(frozen=True)
class OptionalRule:
    inner: "Rule"

    def describe(self) -> str:
        return f"{self.inner.describe()} (optional)"


@dataclass(frozen=True)
class ShapeRule:
    shape: "Shape | UnionShape"

    def describe(self) -> str:
        return "an object"


Rule = Union[TypeRule, EnumRule, LiteralRule, OptionalRule, ShapeRule]
RuleSpec = Union[str, TypeRule, EnumRule, LiteralRule, OptionalRule, ShapeRule, "Shape", "UnionShape"]

_RULE_TYPES = (TypeRule, EnumRule, LiteralRule, OptionalRule, ShapeRule)


@dataclass(frozen=True, eq=False)
class Shape:
    """Mapping inmutable campo -> regla. El orden de declaración se conserva."""

    fields: Mapping[str, Rule]
    name: str | None = None

    def __iter__(self) -> Iterator[str]:
        return iter(self.fields)

    def __len__(self) -> int:
        return len(self.fields)

    def __contains__(self, key: object) -> bool:
        return key in self.fields

    @property
    def required(self) -> tuple[str, ...]:
        return tuple(k for k, rule in self.fields.items() if not isinstance(rule, OptionalRule))

    @property
    def optional(self) -> tuple[str, ...]:
        return tuple(k for k, rule in self.fields.items() if isinstance(rule, OptionalRule))

    def extend(
        self,
        fields: Mapping[str, RuleSpec] | None = None,
        *,
        name: str | None = None,
        registry: FieldTypeRegistry | None = None,
        **more: RuleSpec,
    ) -> "Shape":
        """Nueva shape = esta + campos extra (los nuevos pisan a los existentes)."""

        return interface({**self.fields, **(fields or {}), **more}, name=name, registry=registry)


@dataclass(frozen=True, eq=False)
class UnionShape:
    """Satisfecha si la entrada cumple *alguna* alternativa completa."""

    alternatives: tuple[Shape, ...]
    name: str | None = None


def to_rule(spec: RuleSpec, *, registry: FieldTypeRegistry | None = None, field_name: str = "?") -> Rule:
    reg = registry or default_registry
    if isinstance(spec, _RULE_TYPES):
        return spec
    if isinstance(spec, (Shape, UnionShape)):
        return ShapeRule(spec)
    if isinstance(spec, str):
        type_name, is_optional = split_optional(spec)
        rule: Rule = TypeRule(reg.resolve(type_name))
        return OptionalRule(rule) if is_optional else rule
    raise SchemaDefinitionError(
        message=f"invalid rule for field {field_name!r}: {type(spec).__name__}",
        details={"field": field_name},
    )


def interface(
    fields: Mapping[str, RuleSpec],
    *,
    name: str | None = None,
    registry: FieldTypeRegistry | None = None,
) -> Shape:
    resolved: dict[str, Rule] = {}
    for key, spec in fields.items():
        if not isinstance(key, str) or not key:
            raise SchemaDefinitionError(message=f"invalid field name: {key!r}")
        resolved[key] = to_rule(spec, registry=registry, field_name=key)
    return Shape(fields=MappingProxyType(resolved), name=name)


def union(shapes: Iterable[Shape], *, name: str | None = None) -> UnionShape:
    alternatives = tuple(shapes)
    if len(alternatives) < 2:
        raise SchemaDefinitionError(message="union() needs at least two alternative shapes")
    for alt in alternatives:
        if not isinstance(alt, Shape):
            raise SchemaDefinitionError(
                message=f"union() alternatives must be Shape, got {type(alt).__name__}",
            )
    return UnionShape(alternatives=alternatives, name=name)


def enum(values: Iterable[Any]) -> EnumRule:
    items = tuple(v.value if isinstance(v, Enum) else v for v in values)
    if not items:
        raise SchemaDefinitionError(message="enum() needs at least one value")
    return EnumRule(values=items)


def literal(value: Any) -> LiteralRule:
    return LiteralRule(value=value.value if isinstance(value, Enum) else value)


def optional(spec: RuleSpec, *, registry: FieldTypeRegistry | None = None) -> OptionalRule:
    rule = to_rule(spec, registry=registry)
    if isinstance(rule, OptionalRule):
        return rule
    return OptionalRule(rule)


# Base compartida por todas las operaciones autenticadas.
MIN_API_PARAMETERS = interface(
    {"api_url": "string", "access_token": "string"},
    name="min_api_parameters",
)
