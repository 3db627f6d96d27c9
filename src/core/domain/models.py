"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Validación estricta de los payloads decodificados sin acoplar el Core a
  librerías de I/O.
- Los alias camelCase permiten declarar campos en snake_case (Python) y
  casarlos con las keys ya transformadas por `snake_to_camel`.

Nota:
- Estos modelos describen *qué* es la información, no *cómo* se obtiene.
"""

from __future__ import annotations

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

from core.domain.naming import snake_to_camel

# Valor JSON genérico (unión etiquetada recursiva).
JsonValue = str | int | float | bool | None | list["JsonValue"] | dict[str, "JsonValue"]
JsonObject = dict[str, JsonValue]


class CamelModel(BaseModel):
    """Base para formas tipadas decodificadas desde JSON snake_case.

    - Los campos se exponen con alias camelCase (`public_repos` -> `publicRepos`).
    - Las keys extra del payload se ignoran: el modelo solo declara lo que usa.
    - Inmutable una vez construido.
    """

    model_config = ConfigDict(
        alias_generator=snake_to_camel,
        populate_by_name=True,
        extra="ignore",
        frozen=True,
    )


class GitHubUser(CamelModel):
    """Perfil público de un usuario de GitHub (`GET /users/{username}`)."""

    login: str = Field(
        ...,
        description="Handle del usuario.",
    )
    url: str = Field(
        ...,
        description="URL del recurso en la API.",
    )
    name: str = Field(
        ...,
        description="Nombre visible del perfil.",
    )
    followers: int = Field(
        ...,
        description="Número de seguidores.",
    )
    following: int = Field(
        ...,
        description="Número de cuentas seguidas.",
    )
