"""Creation and request options in native and JSON wire shape."""

from __future__ import annotations

from .base64url import base64url_to_bytes, bytes_to_base64url
from .utils import decode_optional, encode_optional, read_field


def creation_options_to_json(options) -> dict:
    """Partner of ``PublicKeyCredential.parseCreationOptionsFromJSON``.

    Every declared key is present in the result; absent inputs become
    ``None``, including the members of a missing ``authenticatorSelection``
    or ``user``.
    """
    selection = read_field(options, "authenticatorSelection")
    user = read_field(options, "user")
    return {
        "authenticatorSelection": {
            "residentKey": read_field(selection, "residentKey"),
        },
        "challenge": encode_optional(read_field(options, "challenge")),
        "pubKeyCredParams": read_field(options, "pubKeyCredParams"),
        "rp": read_field(options, "rp"),
        "user": {
            "name": read_field(user, "name"),
            "displayName": read_field(user, "displayName"),
            "id": encode_optional(read_field(user, "id")),
        },
    }


def parse_creation_options_from_json(data) -> dict:
    """Inverse of :func:`creation_options_to_json`."""
    selection = read_field(data, "authenticatorSelection")
    user = read_field(data, "user")
    return {
        "authenticatorSelection": {
            "residentKey": read_field(selection, "residentKey"),
        },
        "challenge": decode_optional(read_field(data, "challenge")),
        "pubKeyCredParams": read_field(data, "pubKeyCredParams"),
        "rp": read_field(data, "rp"),
        "user": {
            "name": read_field(user, "name"),
            "displayName": read_field(user, "displayName"),
            "id": decode_optional(read_field(user, "id")),
        },
    }


def _map_allow_credentials(credentials, convert):
    if credentials is None:
        return None
    return [
        {
            "id": convert(read_field(credential, "id")),
            "transports": read_field(credential, "transports"),
            "type": read_field(credential, "type"),
        }
        for credential in credentials
    ]


def request_options_to_json(options) -> dict:
    """Partner of ``PublicKeyCredential.parseRequestOptionsFromJSON``."""
    return {
        "allowCredentials": _map_allow_credentials(
            read_field(options, "allowCredentials"), bytes_to_base64url
        ),
        "challenge": encode_optional(read_field(options, "challenge")),
        "extensions": read_field(options, "extensions"),
        "hints": read_field(options, "hints"),
        "rpId": read_field(options, "rpId"),
        "timeout": read_field(options, "timeout"),
        "userVerification": read_field(options, "userVerification"),
    }


def parse_request_options_from_json(data) -> dict:
    """Inverse of :func:`request_options_to_json`."""
    return {
        "allowCredentials": _map_allow_credentials(
            read_field(data, "allowCredentials"), base64url_to_bytes
        ),
        "challenge": decode_optional(read_field(data, "challenge")),
        "extensions": read_field(data, "extensions"),
        "hints": read_field(data, "hints"),
        "rpId": read_field(data, "rpId"),
        "timeout": read_field(data, "timeout"),
        "userVerification": read_field(data, "userVerification"),
    }
