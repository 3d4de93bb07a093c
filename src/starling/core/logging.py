"""Logging del SDK (structlog sobre `logging` estándar).

Por qué no `structlog.get_logger` a secas:
- Un SDK no debe imprimir nada salvo que la aplicación lo pida. Envolviendo
  `logging.getLogger("starling.<servicio>")` el nivel y los handlers los
  decide el host; sin configuración, los `debug` se descartan.
- La CLI llama a `configure_logging` para ver cada request con `-v`.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

_json_output = False

_key_value = structlog.processors.KeyValueRenderer(key_order=["event"], drop_missing=True)
_json = structlog.processors.JSONRenderer()


def _render(logger: Any, method_name: str, event_dict: dict[str, Any]) -> str:
    if _json_output:
        return _json(logger, method_name, event_dict)
    return _key_value(logger, method_name, event_dict)


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    return structlog.wrap_logger(
        logging.getLogger(name),
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            _render,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
    )


def configure_logging(level: str | int = "WARNING", *, json: bool = False) -> None:
    """Activa la salida de los loggers `starling.*` por stderr."""

    global _json_output
    _json_output = json

    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(message)s"))

    root = logging.getLogger("starling")
    root.handlers[:] = [handler]
    root.setLevel(level)
    root.propagate = False
