"""JSON provider that writes binary payloads in wire shape."""

from __future__ import annotations

from types import MappingProxyType

from quart.json.provider import DefaultJSONProvider

from .base64url import bytes_to_base64url


class WebAuthnJSONProvider(DefaultJSONProvider):
    """Serialize bytes-like values as unpadded base64url text."""

    @staticmethod
    def default(value):
        if isinstance(value, (bytes, bytearray, memoryview)):
            return bytes_to_base64url(value)
        if isinstance(value, MappingProxyType):
            return dict(value)
        return DefaultJSONProvider.default(value)
