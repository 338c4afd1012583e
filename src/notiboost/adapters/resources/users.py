"""Usuarios: CRUD, datos de canal, preferencias y alta por lotes."""

from __future__ import annotations

from typing import Any, Iterable, Mapping

from notiboost.adapters.resources._base import Resource, idempotency_headers, path_segment

USERS_PATH = "/api/v1/users"


class UsersResource(Resource):
    def _user_path(self, user_id: str) -> str:
        return f"{USERS_PATH}/{path_segment(user_id)}"

    async def create(self, user: Mapping[str, Any], *, idempotency_key: str | None = None) -> Any:
        return await self._dispatcher.request(
            "POST", USERS_PATH, dict(user), headers=idempotency_headers(idempotency_key)
        )

    async def get(self, user_id: str) -> Any:
        return await self._dispatcher.request("GET", self._user_path(user_id))

    async def update(self, user_id: str, data: Mapping[str, Any]) -> Any:
        return await self._dispatcher.request("PUT", self._user_path(user_id), dict(data))

    async def delete(self, user_id: str) -> Any:
        return await self._dispatcher.request("DELETE", self._user_path(user_id))

    async def set_channel_data(self, user_id: str, channel_data: Mapping[str, Any]) -> Any:
        """Reemplaza los datos de canal (tokens push, teléfono, email, ...) del usuario."""

        return await self._dispatcher.request(
            "PUT", f"{self._user_path(user_id)}/channel_data", dict(channel_data)
        )

    async def set_preferences(self, user_id: str, preferences: Mapping[str, Any]) -> Any:
        return await self._dispatcher.request(
            "PUT", f"{self._user_path(user_id)}/preferences", dict(preferences)
        )

    async def create_batch(
        self,
        users: Iterable[Mapping[str, Any]],
        *,
        idempotency_key: str | None = None,
    ) -> Any:
        return await self._dispatcher.request(
            "POST",
            f"{USERS_PATH}/batch",
            {"users": list(users)},
            headers=idempotency_headers(idempotency_key),
        )
