"""Templates de mensajes (por canal: email, sms, zns, ...)."""

from __future__ import annotations

from typing import Any, Mapping

from notiboost.adapters.resources._base import Resource, build_query, idempotency_headers, path_segment

TEMPLATES_PATH = "/api/v1/templates"


class TemplatesResource(Resource):
    async def create(self, template: Mapping[str, Any], *, idempotency_key: str | None = None) -> Any:
        return await self._dispatcher.request(
            "POST", TEMPLATES_PATH, dict(template), headers=idempotency_headers(idempotency_key)
        )

    async def list(self, options: Mapping[str, Any] | None = None) -> Any:
        """Lista templates; `options` se envía como query string (p.ej. `{"channel": "zns"}`)."""

        query = build_query(options)
        path = f"{TEMPLATES_PATH}?{query}" if query else TEMPLATES_PATH
        return await self._dispatcher.request("GET", path)

    async def get(self, template_id: str) -> Any:
        return await self._dispatcher.request("GET", f"{TEMPLATES_PATH}/{path_segment(template_id)}")

    async def update(self, template_id: str, data: Mapping[str, Any]) -> Any:
        return await self._dispatcher.request(
            "PUT", f"{TEMPLATES_PATH}/{path_segment(template_id)}", dict(data)
        )
