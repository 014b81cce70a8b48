"""Field access helpers shared by the mappers."""

from __future__ import annotations

from collections.abc import Mapping

from .base64url import base64url_to_bytes, bytes_to_base64url


def read_field(source, name: str):
    """Read ``name`` from a mapping or an attribute-bearing object.

    Missing fields, and a missing ``source``, read as ``None``.
    """
    if source is None:
        return None
    if isinstance(source, Mapping):
        return source.get(name)
    return getattr(source, name, None)


def read_accessor(source, names: tuple[str, ...], field: str):
    """Prefer a callable accessor on ``source``, else the stored ``field``."""
    for name in names:
        accessor = getattr(source, name, None)
        if callable(accessor):
            value = accessor()
            if value is not None:
                return value
            break
    return read_field(source, field)


def encode_optional(value):
    return None if value is None else bytes_to_base64url(value)


def decode_optional(value):
    return None if value is None else base64url_to_bytes(value)
