"""Decodificación de payloads JSON.

Dos caminos:
- `decode_typed`: bytes -> modelo Pydantic. Antes de validar, todas las keys
  se transforman de snake_case a camelCase con `snake_to_camel` (transformación
  explícita, no una convención implícita del validador).
- `decode_generic`: bytes -> `JsonObject`, sin esquema y sin tocar las keys.

Es lógica pura: no hay I/O aquí.
"""

from __future__ import annotations

import json
import logging
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from core.domain.models import JsonObject, JsonValue
from core.domain.naming import snake_to_camel
from core.errors import DecodeError, DecodeErrorKind, NotAnObject

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

_MISSING_TYPES = {"missing"}
_TYPE_ERROR_SUFFIXES = ("_type", "_parsing")


def convert_keys(value: JsonValue) -> JsonValue:
    """Aplica `snake_to_camel` a cada key de objeto, recursivamente."""

    if isinstance(value, dict):
        return {snake_to_camel(k): convert_keys(v) for k, v in value.items()}
    if isinstance(value, list):
        return [convert_keys(v) for v in value]
    return value


def _loads(data: bytes | str) -> JsonValue:
    try:
        return json.loads(data)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise DecodeError(DecodeErrorKind.INVALID_JSON, str(exc)) from exc


def _json_type_name(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    return type(value).__name__


def _classify(errors: list[dict[str, Any]]) -> DecodeErrorKind:
    types = {str(e.get("type", "")) for e in errors}
    if types & _MISSING_TYPES:
        return DecodeErrorKind.MISSING_FIELD
    if any(t.endswith(_TYPE_ERROR_SUFFIXES) for t in types):
        return DecodeErrorKind.TYPE_MISMATCH
    return DecodeErrorKind.SCHEMA_MISMATCH


def decode_typed(model: type[ModelT], data: bytes | str) -> ModelT:
    """Decodifica `data` en una instancia de `model`.

    Reglas:
    - Keys snake_case del payload -> alias camelCase del modelo.
    - Keys extra se ignoran (decodificación de esquema parcial).
    - Validación estricta: ni `"105"` ni `105.0` son enteros.

    Raises:
        DecodeError: JSON inválido, raíz no-objeto, campo faltante o tipo incorrecto.
    """

    payload = _loads(data)
    if not isinstance(payload, dict):
        raise DecodeError(
            DecodeErrorKind.SCHEMA_MISMATCH,
            f"expected a JSON object for {model.__name__}, got {_json_type_name(payload)}",
        )

    try:
        result = model.model_validate(convert_keys(payload), strict=True)
    except ValidationError as exc:
        errors = exc.errors(include_url=False, include_input=False)
        kind = _classify(errors)
        locs = ", ".join(".".join(str(p) for p in e["loc"]) for e in errors)
        logger.debug("decode of %s failed (%s): %s", model.__name__, kind.value, locs)
        raise DecodeError(kind, f"{model.__name__}: {locs}", errors=errors) from exc

    return result


def decode_generic(data: bytes | str) -> JsonObject:
    """Decodifica `data` como objeto JSON genérico (keys sin transformar).

    Raises:
        NotAnObject: la raíz es un array o un escalar.
        DecodeError: el JSON es inválido.
    """

    payload = _loads(data)
    if not isinstance(payload, dict):
        raise NotAnObject(_json_type_name(payload))
    return payload
