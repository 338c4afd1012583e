"""Contrato del dispatcher de requests.

Por qué Protocol:
- Los wrappers de recursos (events, users, ...) solo necesitan "algo que
  despache (method, path, payload)"; no dependen de httpx.
- Permite testear los wrappers con un dispatcher falso.
"""

from __future__ import annotations

from typing import Any, Mapping, Protocol, runtime_checkable


@runtime_checkable
class Dispatcher(Protocol):
    """Contrato mínimo que consumen los wrappers de recursos."""

    async def request(
        self,
        method: str,
        path: str,
        data: Any = None,
        *,
        headers: Mapping[str, str] | None = None,
    ) -> Any:
        """Despacha la llamada y devuelve el body JSON parseado."""

        ...
