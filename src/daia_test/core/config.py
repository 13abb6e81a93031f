"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Permite que adaptadores (HTTP/registro) lean config de forma consistente.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BASE_URL = "https://daia.gbv.de/"
DEFAULT_REGISTRY_URL = "https://uri.gbv.de/database/?format=jsonld"

# Códigos de salida reservados (el de fallo de aserciones es configurable).
EXIT_OK = 0
EXIT_FATAL = 1
EXIT_USAGE = 64


class LogLevel(str, Enum):
    """Niveles de logging aceptados por la CLI y por `DAIA_TEST_LOG_LEVEL`."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars) sin ensuciar el Core con lógica.
    - Un único contrato de configuración para CLI/adapters.
    """

    model_config = SettingsConfigDict(
        env_prefix="DAIA_TEST_",
        extra="ignore",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    base_url: str = Field(
        default=DEFAULT_BASE_URL,
        min_length=8,
        description="Endpoint DAIA consultado (se normaliza con '/' final).",
    )
    registry_url: str = Field(
        default=DEFAULT_REGISTRY_URL,
        min_length=8,
        description="Documento JSON-LD con las bases de datos (OPACs) conocidas.",
    )
    user_agent: str = Field(
        default="daia-test/0.1",
        min_length=1,
        description="User-Agent que identifica al validador ante el servidor.",
    )
    http_timeout_seconds: float = Field(
        default=20.0,
        gt=0,
        description="Timeout por request (segundos).",
    )
    request_delay_seconds: float = Field(
        default=0.2,
        ge=0,
        description="Pausa entre requests en modo batch para no saturar el servidor.",
    )
    failure_exit_code: int = Field(
        default=2,
        ge=0,
        le=255,
        description="Código de salida si alguna aserción falla (0 lo desactiva).",
    )
    log_level: LogLevel = Field(
        default=LogLevel.WARNING,
        description="Nivel de logging (stderr).",
    )

    @field_validator("base_url")
    @classmethod
    def _ensure_trailing_slash(cls, value: str) -> str:
        return normalize_base_url(value)

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value: Any) -> Any:
        return value.upper() if isinstance(value, str) else value


def normalize_base_url(url: str) -> str:
    url = url.strip()
    return url if url.endswith("/") else url + "/"
