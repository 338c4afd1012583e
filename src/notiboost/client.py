"""Cliente NotiBoost.

Punto de entrada público: une configuración, dispatcher y wrappers de
recursos. No guarda estado entre llamadas más allá de la configuración
(inmutable).
"""

from __future__ import annotations

from typing import Any, Mapping

import httpx
from pydantic import ValidationError

from notiboost.adapters.dispatcher import RequestDispatcher, SleepFunc
from notiboost.adapters.resources import (
    EventsResource,
    FlowsResource,
    TemplatesResource,
    UsersResource,
    WebhooksResource,
)
from notiboost.core.config import ClientSettings
from notiboost.core.domain.models import ApiResponse
from notiboost.core.errors import ConfigurationError


class NotiBoost:
    """Cliente asíncrono de la API de NotiBoost.

    Ejemplo::

        client = NotiBoost("nb_live_...")
        await client.events.ingest({"event_name": "order_paid", "user_id": "u1"})
    """

    def __init__(
        self,
        api_key: str | None = None,
        *,
        base_url: str | None = None,
        timeout: float | None = None,
        max_retries: int | None = None,
        settings: ClientSettings | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        sleep: SleepFunc | None = None,
    ) -> None:
        if settings is None:
            try:
                settings = ClientSettings.from_options(
                    api_key=api_key,
                    base_url=base_url,
                    timeout_seconds=timeout,
                    max_retries=max_retries,
                )
            except ValidationError as exc:
                raise ConfigurationError(str(exc)) from exc
        if not settings.api_key:
            raise ConfigurationError("API key is required")

        self._settings = settings
        self._dispatcher = RequestDispatcher(settings, transport=transport, sleep=sleep)

        self.events = EventsResource(self._dispatcher)
        self.users = UsersResource(self._dispatcher)
        self.flows = FlowsResource(self._dispatcher)
        self.templates = TemplatesResource(self._dispatcher)
        self.webhooks = WebhooksResource(self._dispatcher)

    @property
    def settings(self) -> ClientSettings:
        return self._settings

    async def request(
        self,
        method: str,
        path: str,
        data: Any = None,
        *,
        headers: Mapping[str, str] | None = None,
    ) -> Any:
        """Llamada directa a cualquier endpoint; devuelve el body JSON parseado."""

        return await self._dispatcher.request(method, path, data, headers=headers)

    async def send(
        self,
        method: str,
        path: str,
        data: Any = None,
        *,
        headers: Mapping[str, str] | None = None,
    ) -> ApiResponse:
        """Como `request`, pero expone status y cabeceras (p.ej. `X-RateLimit-*`)."""

        return await self._dispatcher.send(method, path, data, headers=headers)

    def __repr__(self) -> str:
        return f"NotiBoost(base_url={self._settings.base_url!r})"
