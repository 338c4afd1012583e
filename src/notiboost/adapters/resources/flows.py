"""Flows de notificación."""

from __future__ import annotations

from typing import Any, Mapping

from notiboost.adapters.resources._base import Resource, idempotency_headers

FLOWS_PATH = "/api/v1/flows"


class FlowsResource(Resource):
    async def create(self, flow: Mapping[str, Any], *, idempotency_key: str | None = None) -> Any:
        return await self._dispatcher.request(
            "POST", FLOWS_PATH, dict(flow), headers=idempotency_headers(idempotency_key)
        )
