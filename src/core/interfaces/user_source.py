"""Contrato de clientes de recursos de usuario.

Por qué Protocol:
- Define un contrato estructural (duck typing) sin herencia rígida.
- La CLI depende de la abstracción y los tests pueden sustituir el cliente.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import GitHubUser, JsonObject


@runtime_checkable
class UserSource(Protocol):
    """Contrato mínimo para obtener un perfil por username.

    Reglas de diseño:
    - Los métodos son asíncronos porque hacen exactamente un round trip HTTP.
    - No hay reintentos: el primer error se propaga tal cual.
    """

    async def get_user(self, username: str) -> GitHubUser:
        """Devuelve el perfil tipado de `username`."""

        ...

    async def get_user_json(self, username: str) -> JsonObject:
        """Devuelve el payload completo de `username` sin esquema."""

        ...
