"""Wrapper de httpx.

Por qué un wrapper:
- Estandariza timeout, autenticación Bearer y cabeceras JSON en un único sitio.
- Facilita testeo: se puede inyectar un transport (p.ej. `httpx.MockTransport`).
"""

from __future__ import annotations

import json
from typing import Any, Mapping

import httpx

from notiboost.core.config import ClientSettings
from notiboost.core.domain.models import ApiResponse


def build_headers(
    settings: ClientSettings,
    overrides: Mapping[str, str] | None = None,
) -> httpx.Headers:
    """Cabeceras por defecto + overrides del caller (el caller gana en conflicto)."""

    headers = httpx.Headers(
        {
            "Authorization": f"Bearer {settings.api_key}",
            "Content-Type": "application/json",
            "Accept": "application/json",
            "User-Agent": settings.user_agent,
        }
    )
    if overrides:
        headers.update(overrides)
    return headers


def build_async_client(
    settings: ClientSettings,
    *,
    extra_headers: Mapping[str, str] | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Crea un `httpx.AsyncClient` con los defaults del cliente.

    El timeout es por request: al vencer, httpx aborta la llamada con
    `httpx.TimeoutException` (un fallo de transporte).
    """

    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.timeout_seconds),
        headers=build_headers(settings, extra_headers),
        transport=transport,
    )


def encode_json_body(data: Any) -> bytes:
    return json.dumps(data, ensure_ascii=False).encode("utf-8")


def parse_response(response: httpx.Response) -> ApiResponse:
    """Normaliza una respuesta httpx.

    - Body vacío => `{}`.
    - Body que no es JSON (p.ej. una página de error HTML o `OK`) =>
      `{"message": <texto crudo>}` en lugar de fallar.
    """

    data: Any
    if not response.content:
        data = {}
    else:
        text = response.text
        try:
            data = json.loads(text)
        except ValueError:
            data = {"message": text}

    return ApiResponse(
        status_code=response.status_code,
        headers={k.lower(): v for k, v in response.headers.items()},
        data=data,
    )
