"""Wrapper de httpx.

Por qué un wrapper:
- Estandariza timeouts, headers y la política de status (solo 2xx es éxito).
- Separa construir el request (puro, sin red) de ejecutarlo (un round trip).
- Facilita testeo: se puede inyectar un `httpx.AsyncClient` con un transport mock.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

import httpx

from core.config import AppSettings
from core.errors import BadResponse, InvalidURL, SerializationError, UnsupportedMethod

logger = logging.getLogger(__name__)

_ALLOWED_SCHEMES = ("http", "https")


class HttpMethod(str, Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"


@dataclass(frozen=True)
class ApiRequest:
    """Descriptor inmutable de un único intercambio HTTP."""

    url: str
    method: HttpMethod
    headers: tuple[tuple[str, str], ...] = ()
    body: bytes | None = None

    def header(self, name: str) -> str | None:
        lowered = name.lower()
        for key, value in self.headers:
            if key.lower() == lowered:
                return value
        return None


def build_async_client(
    settings: AppSettings | None = None,
    *,
    extra_headers: dict[str, str] | None = None,
) -> httpx.AsyncClient:
    """Crea un `httpx.AsyncClient` con los defaults de `AppSettings`.

    Por qué un builder:
    - Centraliza timeout/headers para que todos los requests se comporten igual.
    - El timeout siempre es explícito, nunca el default implícito del transporte.
    """

    settings = settings or AppSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": settings.accept,
    }
    if extra_headers:
        headers.update(extra_headers)
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=settings.follow_redirects,
        headers=headers,
    )


def _parse_url(url_string: str) -> httpx.URL:
    try:
        url = httpx.URL(url_string)
    except (httpx.InvalidURL, TypeError, ValueError) as exc:
        raise InvalidURL(url_string) from exc
    if url.scheme not in _ALLOWED_SCHEMES or not url.host:
        raise InvalidURL(url_string)
    return url


def build_request(
    url_string: str,
    method: HttpMethod,
    headers: Mapping[str, str] | None = None,
    body: Mapping[str, Any] | None = None,
) -> ApiRequest:
    """Construye el descriptor del request. No toca la red.

    Raises:
        InvalidURL: la URL no parsea o no tiene esquema http(s)/host.
        UnsupportedMethod: `method` no es GET, POST, PUT ni DELETE.
        SerializationError: `body` no es serializable a JSON.
    """

    _parse_url(url_string)
    try:
        method = HttpMethod(method)
    except ValueError as exc:
        raise UnsupportedMethod(method) from exc

    pairs: list[tuple[str, str]] = []
    if headers:
        for key, value in headers.items():
            pairs.append((key, value))

    payload: bytes | None = None
    if body is not None:
        try:
            payload = json.dumps(body, ensure_ascii=False, allow_nan=False).encode("utf-8")
        except (TypeError, ValueError) as exc:
            raise SerializationError(str(exc)) from exc
        if not any(k.lower() == "content-type" for k, _ in pairs):
            pairs.append(("Content-Type", "application/json"))

    logger.debug("built %s %s (headers=%d, body=%s)", method.value, url_string, len(pairs), payload is not None)
    return ApiRequest(url=url_string, method=method, headers=tuple(pairs), body=payload)


async def _send(client: httpx.AsyncClient, request: ApiRequest) -> bytes:
    http_request = client.build_request(
        request.method.value,
        request.url,
        headers=list(request.headers),
        content=request.body,
    )
    response = await client.send(http_request)
    status = response.status_code
    logger.debug("%s %s -> %s", request.method.value, request.url, status)
    if not 200 <= status <= 299:
        raise BadResponse(status_code=status, content=response.content)
    return response.content


async def execute(
    request: ApiRequest,
    *,
    settings: AppSettings | None = None,
    client: httpx.AsyncClient | None = None,
) -> bytes:
    """Ejecuta exactamente un round trip y devuelve los bytes del body.

    - Si se inyecta `client`, se usa y queda abierto (lo gestiona el caller).
    - Si no, se crea uno nuevo y se cierra al terminar: nada se comparte
      entre invocaciones.

    Raises:
        BadResponse: status fuera de 200..299 (sin reintentos).
        httpx.TransportError: fallos de red/timeout, sin envolver.
    """

    if client is not None:
        return await _send(client, request)
    async with build_async_client(settings) as owned:
        return await _send(owned, request)


async def request(
    url_string: str,
    method: HttpMethod,
    headers: Mapping[str, str] | None = None,
    body: Mapping[str, Any] | None = None,
    *,
    settings: AppSettings | None = None,
    client: httpx.AsyncClient | None = None,
) -> bytes:
    """`build_request` + `execute`; los errores se propagan sin cambios."""

    api_request = build_request(url_string, method, headers=headers, body=body)
    return await execute(api_request, settings=settings, client=client)
