"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Permite que el cliente HTTP lea timeouts/headers de forma consistente.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


def get_user_config_dir() -> Path:
    """Directorio de configuración por usuario (cross-platform, sin dependencias)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "octofetch"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "octofetch"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "octofetch"
    return Path.home() / ".config" / "octofetch"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars) sin ensuciar el Core con lógica.
    - El timeout nunca se hereda implícito del transporte: siempre sale de aquí.
    """

    model_config = SettingsConfigDict(
        env_prefix="OCTOFETCH_",
        extra="ignore",
        case_sensitive=False,
        # Orden: proyecto primero (dev), luego config global de usuario.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    http_timeout_seconds: float = Field(
        default=20.0,
        gt=0,
        description="Timeout por request (segundos).",
    )
    user_agent: str = Field(
        default="octofetch/0.1 (+https://local)",
        min_length=1,
        description="User-Agent de las peticiones (GitHub lo exige).",
    )
    accept: str = Field(
        default="application/json",
        min_length=1,
        description="Header Accept por defecto.",
    )
    follow_redirects: bool = Field(
        default=True,
        description="Seguir redirecciones (p.ej. usuarios renombrados en GitHub).",
    )
    log_level: str = Field(
        default="WARNING",
        min_length=1,
        description="Nivel de logging de la CLI (DEBUG, INFO, WARNING...).",
    )
