"""Webhooks salientes (suscripciones a eventos de entrega)."""

from __future__ import annotations

from typing import Any, Mapping

from notiboost.adapters.resources._base import Resource, idempotency_headers

WEBHOOKS_PATH = "/api/v1/webhooks"


class WebhooksResource(Resource):
    async def create(self, webhook: Mapping[str, Any], *, idempotency_key: str | None = None) -> Any:
        return await self._dispatcher.request(
            "POST", WEBHOOKS_PATH, dict(webhook), headers=idempotency_headers(idempotency_key)
        )
