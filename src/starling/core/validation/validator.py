"""Validador de parámetros.

Contrato:
- `validate(shape, data)` no devuelve nada si la entrada es válida y lanza
  `ValidationError` (con todas las violaciones de la shape) si no lo es.
- Es una función pura: no guarda estado entre llamadas, así que validar dos
  veces la misma entrada produce el mismo resultado.
- Por defecto es permisivo con claves no declaradas (la config completa del
  cliente se mezcla con shapes más estrechas). `strict=True` las rechaza.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from starling.core.domain.models import Issue
from starling.core.errors import UnknownShapeError, ValidationError
from starling.core.validation.shapes import (
    EnumRule,
    LiteralRule,
    OptionalRule,
    Rule,
    Shape,
    ShapeRule,
    TypeRule,
    UnionShape,
)

_MISSING = object()

# Nunca se reflejan valores de estos campos en los mensajes de error.
SENSITIVE_FIELDS = frozenset(
    {"access_token", "client_secret", "refresh_token", "code", "authorization_code"}
)

_MAX_REPR = 40


def _describe_value(field: str, value: Any) -> str:
    kind = type(value).__name__
    if field.rsplit(".", 1)[-1] in SENSITIVE_FIELDS:
        return f"{kind} (redacted)"
    text = repr(value)
    if len(text) > _MAX_REPR:
        text = text[: _MAX_REPR - 3] + "..."
    return f"{kind} {text}"


def _required(path: str, rule: Rule) -> Issue:
    return Issue(
        field=path,
        code="required",
        message=f"{path} is required",
        expected=rule.describe(),
        received="missing",
    )


def _invalid(path: str, rule: Rule, value: Any) -> Issue:
    received = _describe_value(path, value)
    expected = rule.describe()
    return Issue(
        field=path,
        code="invalid",
        message=f"{path} must be {expected} (received {received})",
        expected=expected,
        received=received,
    )


def _matches_literal(rule: LiteralRule, value: Any) -> bool:
    if isinstance(rule.value, str) and not isinstance(value, str):
        return False
    if isinstance(rule.value, bool) != isinstance(value, bool):
        return False
    return value == rule.value


def _check_rule(rule: Rule, value: Any, path: str, strict: bool) -> list[Issue]:
    if isinstance(rule, OptionalRule):
        if value is _MISSING or value is None:
            return []
        return _check_rule(rule.inner, value, path, strict)

    if value is _MISSING or value is None:
        return [_required(path, rule)]

    if isinstance(rule, TypeRule):
        return [] if rule.field_type(value) else [_invalid(path, rule, value)]
    if isinstance(rule, EnumRule):
        return [] if value in rule.values else [_invalid(path, rule, value)]
    if isinstance(rule, LiteralRule):
        return [] if _matches_literal(rule, value) else [_invalid(path, rule, value)]
    if isinstance(rule, ShapeRule):
        if not isinstance(value, Mapping):
            return [_invalid(path, rule, value)]
        return _check_any(rule.shape, value, prefix=f"{path}.", strict=strict)

    raise UnknownShapeError(rule)


def _field_issues(shape: Shape, data: Mapping[str, Any], prefix: str, strict: bool) -> dict[str, list[Issue]]:
    out: dict[str, list[Issue]] = {}
    for name, rule in shape.fields.items():
        out[name] = _check_rule(rule, data.get(name, _MISSING), f"{prefix}{name}", strict)
    return out


def _unknown_issues(shape: Shape, data: Mapping[str, Any], prefix: str) -> list[Issue]:
    issues: list[Issue] = []
    for key in data:
        if key not in shape.fields:
            path = f"{prefix}{key}"
            issues.append(
                Issue(
                    field=path,
                    code="unknown",
                    message=f"{path} is not an accepted parameter",
                    expected="no such field",
                    received=type(data[key]).__name__,
                )
            )
    return issues


def _collect(shape: Shape, data: Mapping[str, Any], per_field: dict[str, list[Issue]], prefix: str, strict: bool) -> list[Issue]:
    issues = [issue for found in per_field.values() for issue in found]
    if strict:
        issues.extend(_unknown_issues(shape, data, prefix))
    return issues


def _check_shape(shape: Shape, data: Mapping[str, Any], prefix: str, strict: bool) -> list[Issue]:
    return _collect(shape, data, _field_issues(shape, data, prefix, strict), prefix, strict)


def _check_union(union: UnionShape, data: Mapping[str, Any], prefix: str, strict: bool) -> list[Issue]:
    best: list[Issue] | None = None
    best_score = -1
    for alternative in union.alternatives:
        per_field = _field_issues(alternative, data, prefix, strict)
        issues = _collect(alternative, data, per_field, prefix, strict)
        if not issues:
            return []
        # La alternativa con más campos válidos da el diagnóstico más útil.
        score = sum(1 for found in per_field.values() if not found)
        if score > best_score:
            best, best_score = issues, score
    return best or []


def _check_any(shape: Shape | UnionShape, data: Mapping[str, Any], prefix: str, strict: bool) -> list[Issue]:
    if isinstance(shape, UnionShape):
        return _check_union(shape, data, prefix, strict)
    if isinstance(shape, Shape):
        return _check_shape(shape, data, prefix, strict)
    raise UnknownShapeError(shape)


def matching_alternative(union: UnionShape, data: Mapping[str, Any], *, strict: bool = False) -> Shape | None:
    """Primera alternativa de la unión que valida completa (o None)."""

    for alternative in union.alternatives:
        if not _check_shape(alternative, data, prefix="", strict=strict):
            return alternative
    return None


def check(shape: Shape | UnionShape, data: Any, *, strict: bool = False) -> tuple[Issue, ...]:
    """Devuelve las violaciones sin lanzar (tupla vacía = válido)."""

    if not isinstance(shape, (Shape, UnionShape)):
        raise UnknownShapeError(shape)
    if not isinstance(data, Mapping):
        return (
            Issue(
                field="$",
                code="invalid",
                message=f"parameters must be a mapping (received {type(data).__name__})",
                expected="a mapping",
                received=type(data).__name__,
            ),
        )
    return tuple(_check_any(shape, data, prefix="", strict=strict))


def validate(shape: Shape | UnionShape, data: Any, *, strict: bool = False) -> None:
    issues = check(shape, data, strict=strict)
    if issues:
        raise ValidationError(issues)
