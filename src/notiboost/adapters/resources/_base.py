"""Utilidades compartidas por los wrappers de recursos."""

from __future__ import annotations

from typing import Any, Mapping
from urllib.parse import quote, urlencode

from notiboost.core.interfaces.dispatcher import Dispatcher

IDEMPOTENCY_HEADER = "Idempotency-Key"


def path_segment(value: Any) -> str:
    """Codifica un identificador como un único segmento de path."""

    return quote(str(value), safe="")


def build_query(options: Mapping[str, Any] | None) -> str:
    """Serializa opciones de listado a query string (sin `None`, booleanos en minúscula)."""

    if not options:
        return ""
    pairs: list[tuple[str, str]] = []
    for key, value in options.items():
        if value is None:
            continue
        if isinstance(value, bool):
            value = "true" if value else "false"
        pairs.append((str(key), str(value)))
    return urlencode(pairs)


def idempotency_headers(key: str | None) -> dict[str, str] | None:
    if not key:
        return None
    return {IDEMPOTENCY_HEADER: key}


class Resource:
    """Base de los wrappers: solo guarda el dispatcher."""

    def __init__(self, dispatcher: Dispatcher) -> None:
        self._dispatcher = dispatcher
