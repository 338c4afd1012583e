"""Política de reintentos (funciones puras).

El estado de reintento nunca vive fuera de la llamada: todo se deriva del
índice de intento y de la configuración.
"""

from __future__ import annotations

import math

DEFAULT_RETRY_AFTER_SECONDS = 1.0


def should_retry(attempt: int, max_retries: int) -> bool:
    """Misma frontera para rate limit y transporte: reintenta si `attempt < max_retries`."""

    return attempt < max_retries


def backoff_delay(attempt: int) -> float:
    """Backoff exponencial: 1s, 2s, 4s, ... (`2 ** attempt`, attempt desde 0)."""

    return float(2**attempt)


def parse_retry_after(value: str | None) -> float:
    """Segundos de `retry-after`; 1s si falta, no es numérico o es negativo."""

    if value is None:
        return DEFAULT_RETRY_AFTER_SECONDS
    try:
        seconds = float(value.strip())
    except ValueError:
        return DEFAULT_RETRY_AFTER_SECONDS
    if not math.isfinite(seconds) or seconds < 0:
        return DEFAULT_RETRY_AFTER_SECONDS
    return seconds
