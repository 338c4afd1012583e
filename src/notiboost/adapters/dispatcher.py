"""Dispatcher de requests con reintentos.

Responsabilidad:
- Convertir (method, path, payload) en una respuesta JSON completada.
- Reintentar fallos de transporte con backoff exponencial.
- Respetar `retry-after` ante HTTP 429 mientras quede presupuesto.

Cualquier otro status no-2xx se considera permanente y no se reintenta.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Awaitable, Callable, Mapping

import httpx

from notiboost.adapters.backoff import backoff_delay, parse_retry_after, should_retry
from notiboost.adapters.http_client import build_async_client, encode_json_body, parse_response
from notiboost.core.config import ClientSettings
from notiboost.core.domain.models import (
    ApiResponse,
    AttemptOutcome,
    RateLimited,
    Rejected,
    Success,
    TransportFailure,
)
from notiboost.core.errors import APIError, NotiBoostError, RateLimitError

logger = logging.getLogger(__name__)

PAYLOAD_METHODS = frozenset({"POST", "PUT", "PATCH"})

SleepFunc = Callable[[float], Awaitable[Any]]


def to_api_error(response: ApiResponse) -> APIError:
    error_cls = RateLimitError if response.status_code == 429 else APIError
    return error_cls(
        response.message,
        status_code=response.status_code,
        response=response.data,
        headers=response.headers,
    )


class RequestDispatcher:
    """Implementación httpx del contrato `Dispatcher`."""

    def __init__(
        self,
        settings: ClientSettings,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
        sleep: SleepFunc | None = None,
    ) -> None:
        self._settings = settings
        self._transport = transport
        self._sleep = sleep or asyncio.sleep

    async def request(
        self,
        method: str,
        path: str,
        data: Any = None,
        *,
        headers: Mapping[str, str] | None = None,
    ) -> Any:
        response = await self.send(method, path, data, headers=headers)
        return response.data

    async def send(
        self,
        method: str,
        path: str,
        data: Any = None,
        *,
        headers: Mapping[str, str] | None = None,
    ) -> ApiResponse:
        """Como `request`, pero devuelve la `ApiResponse` completa (status, headers, body)."""

        method = method.upper()
        url = f"{self._settings.base_url}{path}"

        body: bytes | None = None
        request_headers: dict[str, str] = {}
        if data is not None and method in PAYLOAD_METHODS:
            body = encode_json_body(data)
            request_headers["Content-Length"] = str(len(body))

        max_retries = self._settings.max_retries
        last_error: BaseException | None = None

        async with build_async_client(
            self._settings, extra_headers=headers, transport=self._transport
        ) as client:
            for attempt in range(max_retries + 1):
                logger.debug("%s %s (attempt %d/%d)", method, path, attempt + 1, max_retries + 1)
                outcome = await self._attempt(client, method, url, body, request_headers)

                if isinstance(outcome, Success):
                    return outcome.response

                if isinstance(outcome, RateLimited):
                    last_error = to_api_error(outcome.response)
                    if not should_retry(attempt, max_retries):
                        raise last_error
                    logger.warning(
                        "Rate limited on %s %s, retrying in %.2fs", method, path, outcome.retry_after
                    )
                    await self._sleep(outcome.retry_after)
                    continue

                if isinstance(outcome, Rejected):
                    raise to_api_error(outcome.response)

                last_error = outcome.error
                if not should_retry(attempt, max_retries):
                    raise outcome.error
                delay = backoff_delay(attempt)
                logger.warning(
                    "Transport error on %s %s (%s), retrying in %.0fs",
                    method,
                    path,
                    type(outcome.error).__name__,
                    delay,
                )
                await self._sleep(delay)

        if last_error is not None:
            raise last_error
        raise NotiBoostError(f"{method} {path} finished without a response")

    async def _attempt(
        self,
        client: httpx.AsyncClient,
        method: str,
        url: str,
        body: bytes | None,
        headers: Mapping[str, str],
    ) -> AttemptOutcome:
        try:
            raw = await client.request(method, url, content=body, headers=headers)
        except httpx.TransportError as exc:
            return TransportFailure(error=exc)

        response = parse_response(raw)
        if response.ok:
            return Success(response=response)
        if response.status_code == 429:
            return RateLimited(
                response=response,
                retry_after=parse_retry_after(response.headers.get("retry-after")),
            )
        return Rejected(response=response)
