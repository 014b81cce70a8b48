"""Assertion and attestation results in native and JSON wire shape.

The ``*_to_json`` functions always emit an empty ``clientExtensionResults``
while the ``*_from_json`` functions pass it through untouched. Extension
outputs are not modelled yet, so they are dropped on the way out only.
"""

from __future__ import annotations

from .base64url import base64url_to_bytes, bytes_to_base64url
from .utils import read_accessor, read_field

_AUTHENTICATOR_DATA = ("getAuthenticatorData", "get_authenticator_data")
_PUBLIC_KEY = ("getPublicKey", "get_public_key")
_PUBLIC_KEY_ALGORITHM = ("getPublicKeyAlgorithm", "get_public_key_algorithm")
_TRANSPORTS = ("getTransports", "get_transports")


def assertion_to_json(credential) -> dict:
    response = read_field(credential, "response")
    return {
        "id": read_field(credential, "id"),
        "rawId": bytes_to_base64url(read_field(credential, "rawId")),
        "response": {
            "authenticatorData": bytes_to_base64url(
                read_field(response, "authenticatorData")
            ),
            "clientDataJSON": bytes_to_base64url(read_field(response, "clientDataJSON")),
            "signature": bytes_to_base64url(read_field(response, "signature")),
            "userHandle": bytes_to_base64url(read_field(response, "userHandle")),
        },
        "authenticatorAttachment": read_field(credential, "authenticatorAttachment"),
        "clientExtensionResults": {},
        "type": read_field(credential, "type"),
    }


def assertion_from_json(data) -> dict:
    response = read_field(data, "response")
    return {
        "id": read_field(data, "id"),
        "rawId": base64url_to_bytes(read_field(data, "rawId")),
        "response": {
            "authenticatorData": base64url_to_bytes(
                read_field(response, "authenticatorData")
            ),
            "clientDataJSON": base64url_to_bytes(read_field(response, "clientDataJSON")),
            "signature": base64url_to_bytes(read_field(response, "signature")),
            "userHandle": base64url_to_bytes(read_field(response, "userHandle")),
        },
        "authenticatorAttachment": read_field(data, "authenticatorAttachment"),
        "clientExtensionResults": read_field(data, "clientExtensionResults"),
        "type": read_field(data, "type"),
    }


def attestation_to_json(credential) -> dict:
    """Serialize a registration result.

    ``credential`` may be a live platform result whose response computes
    ``authenticatorData``, ``publicKey``, ``publicKeyAlgorithm`` and
    ``transports`` through accessor methods, or a flat object such as the
    output of :func:`attestation_from_json`. Each of the four is looked up
    through its accessor first and the stored field second.
    """
    response = read_field(credential, "response")
    return {
        "id": read_field(credential, "id"),
        "rawId": bytes_to_base64url(read_field(credential, "rawId")),
        "response": {
            "attestationObject": bytes_to_base64url(
                read_field(response, "attestationObject")
            ),
            "clientDataJSON": bytes_to_base64url(read_field(response, "clientDataJSON")),
            "authenticatorData": bytes_to_base64url(
                read_accessor(response, _AUTHENTICATOR_DATA, "authenticatorData")
            ),
            "publicKey": bytes_to_base64url(
                read_accessor(response, _PUBLIC_KEY, "publicKey")
            ),
            "publicKeyAlgorithm": read_accessor(
                response, _PUBLIC_KEY_ALGORITHM, "publicKeyAlgorithm"
            ),
            "transports": read_accessor(response, _TRANSPORTS, "transports"),
        },
        "authenticatorAttachment": read_field(credential, "authenticatorAttachment"),
        "clientExtensionResults": {},
        "type": read_field(credential, "type"),
    }


def attestation_from_json(data) -> dict:
    response = read_field(data, "response")
    return {
        "id": read_field(data, "id"),
        "rawId": base64url_to_bytes(read_field(data, "rawId")),
        "response": {
            "attestationObject": base64url_to_bytes(
                read_field(response, "attestationObject")
            ),
            "clientDataJSON": base64url_to_bytes(read_field(response, "clientDataJSON")),
            "authenticatorData": base64url_to_bytes(
                read_field(response, "authenticatorData")
            ),
            "publicKey": base64url_to_bytes(read_field(response, "publicKey")),
            "publicKeyAlgorithm": read_field(response, "publicKeyAlgorithm"),
            "transports": read_field(response, "transports"),
        },
        "authenticatorAttachment": read_field(data, "authenticatorAttachment"),
        "clientExtensionResults": read_field(data, "clientExtensionResults"),
        "type": read_field(data, "type"),
    }
