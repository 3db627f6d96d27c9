"""Taxonomía de errores del cliente.

Por qué un módulo propio:
- Todas las capas (adapters HTTP, decodificación, CLI) comparten los mismos
  tipos sin depender unas de otras.
- Cada operación falla con exactamente uno de estos errores; nadie los
  envuelve entre capas, solo la CLI los captura.
"""

from __future__ import annotations

from enum import Enum
from typing import Any


class NetworkError(Exception):
    """Base de todos los errores del paquete."""


class InvalidURL(NetworkError):
    def __init__(self, url: str) -> None:
        super().__init__(f"invalid URL: {url!r}")
        self.url = url


class UnsupportedMethod(NetworkError):
    """Método HTTP fuera de GET, POST, PUT, DELETE."""

    def __init__(self, method: object) -> None:
        super().__init__(f"unsupported HTTP method: {method!r}")
        self.method = method


class BadResponse(NetworkError):
    """Status fuera de 200..299.

    El body se conserva crudo en `content` pero no se parsea ni forma parte
    del mensaje: el esquema de error del servicio remoto es desconocido.
    """

    def __init__(self, *, status_code: int | None, content: bytes = b"") -> None:
        super().__init__(f"bad response (status={status_code})")
        self.status_code = status_code
        self.content = content


class NotAnObject(NetworkError):
    def __init__(self, found: str) -> None:
        super().__init__(f"top-level JSON value is not an object (got {found})")
        self.found = found


class DecodeErrorKind(str, Enum):
    INVALID_JSON = "invalid_json"
    SCHEMA_MISMATCH = "schema_mismatch"
    TYPE_MISMATCH = "type_mismatch"
    MISSING_FIELD = "missing_field"


class DecodeError(NetworkError):
    def __init__(
        self,
        kind: DecodeErrorKind,
        message: str,
        *,
        errors: list[dict[str, Any]] | None = None,
    ) -> None:
        super().__init__(f"{kind.value}: {message}")
        self.kind = kind
        self.errors = errors or []


class SerializationError(NetworkError):
    """El body del request no se pudo serializar a JSON."""
