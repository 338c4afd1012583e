"""Jerarquía de errores del cliente.

Se distinguen errores de configuración local y respuestas no-2xx de la API.
Los fallos de transporte (conexión, timeout) se propagan tal cual como
excepciones de `httpx` una vez agotados los reintentos.
"""

from __future__ import annotations

from typing import Any, Mapping


class NotiBoostError(Exception):
    """Error base del cliente."""


class ConfigurationError(NotiBoostError):
    """Configuración inválida o incompleta (p.ej. falta la API key)."""


class APIError(NotiBoostError):
    """La API respondió con un status no-2xx que no se reintenta."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        response: Any = None,
        headers: Mapping[str, str] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.response = response
        self.headers: dict[str, str] = dict(headers or {})

    def __repr__(self) -> str:
        return f"{type(self).__name__}(status_code={self.status_code!r}, message={self.message!r})"


class RateLimitError(APIError):
    """HTTP 429 que se entrega al caller tras agotar los reintentos."""
