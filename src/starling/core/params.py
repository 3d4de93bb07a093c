"""Merge de defaults + parámetros de llamada."""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Mapping


def freeze(values: Mapping[str, Any]) -> Mapping[str, Any]:
    """Copia de solo lectura (la config base no se toca tras construir)."""

    return MappingProxyType(dict(values))


def merge_params(*layers: Mapping[str, Any] | None) -> dict[str, Any]:
    """Merge superficial: las capas posteriores ganan.

    `None` significa "no indicado" y nunca borra un valor anterior. Siempre
    devuelve un dict nuevo.
    """

    merged: dict[str, Any] = {}
    for layer in layers:
        if not layer:
            continue
        for key, value in layer.items():
            if value is not None:
                merged[key] = value
    return merged
