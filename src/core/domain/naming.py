"""Transformación de nombres snake_case -> camelCase.

Vive en el dominio porque la usan los dos lados de la decodificación: el
alias de cada campo de `CamelModel` y las keys del payload. Una sola función
garantiza que ambos coincidan.
"""

from __future__ import annotations


def snake_to_camel(key: str) -> str:
    """`public_repos` -> `publicRepos`.

    Los `_` iniciales y finales se conservan; los segmentos vacíos (`a__b`)
    se descartan. Keys sin `_` quedan igual.
    """

    if "_" not in key:
        return key

    stripped = key.strip("_")
    if not stripped:
        return key

    leading = key[: len(key) - len(key.lstrip("_"))]
    trailing = key[len(key.rstrip("_")) :]

    parts = [p for p in stripped.split("_") if p]
    camel = parts[0] + "".join(p.capitalize() for p in parts[1:])
    return f"{leading}{camel}{trailing}"
