"""Cliente de recursos: GitHub REST API.

Fija la base URL y compone el helper HTTP para un único recurso
(`/users/{username}`). Es I/O puro, por eso vive en adapters.
"""

from __future__ import annotations

import httpx

from adapters.http_client import HttpMethod, request
from core.config import AppSettings
from core.domain.models import GitHubUser, JsonObject
from core.services.json_decoding import decode_generic, decode_typed


class GitHubAPI:
    """Obtiene perfiles de usuario de GitHub."""

    base_url = "https://api.github.com"

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._client = client

    def user_url(self, username: str) -> str:
        # Concatenación plana: el username no se valida ni se escapa.
        return self.base_url + "/users" + f"/{username}"

    async def _fetch_user(self, username: str) -> bytes:
        return await request(
            self.user_url(username),
            HttpMethod.GET,
            settings=self._settings,
            client=self._client,
        )

    async def get_user(self, username: str) -> GitHubUser:
        """GET `/users/{username}` decodificado como `GitHubUser`.

        Raises:
            InvalidURL, BadResponse, DecodeError
        """

        data = await self._fetch_user(username)
        return decode_typed(GitHubUser, data)

    async def get_user_json(self, username: str) -> JsonObject:
        data = await self._fetch_user(username)
        return decode_generic(data)
