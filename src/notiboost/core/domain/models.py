"""Modelos del dominio (Pydantic v2).

Nota:
- Estos modelos describen *qué* devuelve la API, no *cómo* se obtiene.
- Los payloads (eventos, usuarios, templates) son opacos: los define y
  valida el servicio remoto, así que aquí solo viajan como `Any`.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal, Mapping, Union

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


def _parse_int_header(value: str | None) -> int | None:
    if value is None:
        return None
    try:
        return int(value.strip())
    except ValueError:
        return None


class RateLimitInfo(BaseModel):
    """Cabeceras `X-RateLimit-*` informadas por la API (todas opcionales)."""

    model_config = ConfigDict(frozen=True)

    limit: int | None = Field(default=None, description="Cuota total de la ventana.")
    remaining: int | None = Field(default=None, description="Requests restantes en la ventana.")
    reset: int | None = Field(default=None, description="Momento/segundos hasta el reinicio de la ventana.")

    @classmethod
    def from_headers(cls, headers: Mapping[str, str]) -> "RateLimitInfo":
        lowered = {k.lower(): v for k, v in headers.items()}
        return cls(
            limit=_parse_int_header(lowered.get("x-ratelimit-limit")),
            remaining=_parse_int_header(lowered.get("x-ratelimit-remaining")),
            reset=_parse_int_header(lowered.get("x-ratelimit-reset")),
        )


class ApiResponse(BaseModel):
    """Respuesta HTTP ya parseada. Efímera: no se cachea."""

    model_config = ConfigDict(frozen=True)

    status_code: int = Field(..., description="Status HTTP tal como lo devuelve el servidor.")
    headers: dict[str, str] = Field(
        default_factory=dict,
        description="Cabeceras de respuesta con claves en minúsculas.",
    )
    data: Any = Field(
        default_factory=dict,
        description="Body JSON parseado, o `{'message': <texto>}` si no era JSON.",
    )

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300

    @property
    def rate_limit(self) -> RateLimitInfo:
        return RateLimitInfo.from_headers(self.headers)

    @property
    def message(self) -> str:
        """Mensaje reportado por el servidor o `HTTP <code>` genérico."""

        if isinstance(self.data, dict):
            msg = self.data.get("message")
            if msg:
                return msg if isinstance(msg, str) else str(msg)
        return f"HTTP {self.status_code}"


class Success(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["success"] = "success"
    response: ApiResponse


class RateLimited(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["rate_limited"] = "rate_limited"
    response: ApiResponse
    retry_after: float = Field(..., ge=0)


class Rejected(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["rejected"] = "rejected"
    response: ApiResponse


class TransportFailure(BaseModel):
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    kind: Literal["transport_failure"] = "transport_failure"
    error: Exception


AttemptOutcome = Annotated[
    Union[Success, RateLimited, Rejected, TransportFailure],
    Field(discriminator="kind"),
]
"""Resultado de un único intento de dispatch (unión discriminada por `kind`)."""
