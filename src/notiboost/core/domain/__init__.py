"""Modelos de dominio del cliente (respuestas y resultados de intento)."""

from notiboost.core.domain.models import (
    ApiResponse,
    AttemptOutcome,
    RateLimited,
    RateLimitInfo,
    Rejected,
    Success,
    TransportFailure,
)

__all__ = [
    "ApiResponse",
    "AttemptOutcome",
    "RateLimitInfo",
    "RateLimited",
    "Rejected",
    "Success",
    "TransportFailure",
]
