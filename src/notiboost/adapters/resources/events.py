"""Eventos: ingesta individual y por lotes."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Iterable, Mapping

from notiboost.adapters.resources._base import Resource, idempotency_headers

EVENTS_PATH = "/api/v1/events"


def utc_timestamp() -> str:
    """Instante actual en ISO 8601 UTC con milisegundos y sufijo `Z`."""

    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class EventsResource(Resource):
    async def ingest(self, event: Mapping[str, Any], *, idempotency_key: str | None = None) -> Any:
        """Ingesta un evento; rellena `occurred_at` con la hora actual si falta.

        El mapping del caller no se modifica.
        """

        payload = dict(event)
        if not payload.get("occurred_at"):
            payload["occurred_at"] = utc_timestamp()
        return await self._dispatcher.request(
            "POST", EVENTS_PATH, payload, headers=idempotency_headers(idempotency_key)
        )

    async def ingest_batch(
        self,
        events: Iterable[Mapping[str, Any]],
        *,
        idempotency_key: str | None = None,
    ) -> Any:
        # Resultado por item: lo decide el servicio remoto.
        return await self._dispatcher.request(
            "POST",
            f"{EVENTS_PATH}/batch",
            {"events": list(events)},
            headers=idempotency_headers(idempotency_key),
        )
