"""Configuración del cliente.

Por qué aquí:
- Centraliza credencial, endpoint, timeout y reintentos (pydantic-settings).
- Permite configurar el cliente por variables de entorno `NOTIBOOST_*` sin
  tocar código, o por argumentos explícitos al construirlo.

La configuración es inmutable: se fija una vez y se comparte entre llamadas
concurrentes sin necesidad de sincronización.
"""

from __future__ import annotations

from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BASE_URL = "https://api.notiboost.com"


class ClientSettings(BaseSettings):
    """Configuración central del cliente NotiBoost."""

    model_config = SettingsConfigDict(
        env_prefix="NOTIBOOST_",
        extra="ignore",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        frozen=True,
    )

    api_key: str | None = Field(
        default=None,
        description="API key enviada como token Bearer en cada request.",
    )
    base_url: str = Field(
        default=DEFAULT_BASE_URL,
        min_length=8,
        description="Endpoint base de la API (https por defecto).",
    )
    timeout_seconds: float = Field(
        default=30.0,
        gt=0,
        description="Timeout por request (segundos).",
    )
    max_retries: int = Field(
        default=3,
        ge=0,
        description="Reintentos máximos ante fallos de transporte o rate limit.",
    )
    user_agent: str = Field(
        default="notiboost-python/0.1",
        min_length=1,
        description="User-Agent enviado en cada request.",
    )

    @field_validator("base_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        value = value.strip()
        if not value.startswith(("http://", "https://")):
            raise ValueError("base_url must start with http:// or https://")
        return value.rstrip("/")

    @classmethod
    def from_options(cls, **options: Any) -> "ClientSettings":
        """Construye settings ignorando opciones `None` (el entorno rellena el resto)."""

        return cls(**{k: v for k, v in options.items() if v is not None})
