"""Cliente Python asíncrono para la API de orquestación de notificaciones NotiBoost."""

from notiboost.client import NotiBoost
from notiboost.core.config import ClientSettings
from notiboost.core.domain.models import ApiResponse, RateLimitInfo
from notiboost.core.errors import APIError, ConfigurationError, NotiBoostError, RateLimitError

__version__ = "0.1.0"

__all__ = [
    "APIError",
    "ApiResponse",
    "ClientSettings",
    "ConfigurationError",
    "NotiBoost",
    "NotiBoostError",
    "RateLimitError",
    "RateLimitInfo",
    "__version__",
]
