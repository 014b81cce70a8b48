"""Public API for quart-webauthn-json."""

from .algorithms import PUB_KEY_CRED_PARAMS, pub_key_cred_params
from .base64url import base64url_to_bytes, bytes_to_base64url
from .core import WebAuthnJSON
from .credentials import (
    assertion_from_json,
    assertion_to_json,
    attestation_from_json,
    attestation_to_json,
)
from .exceptions import InvalidInput, MalformedEncoding, WebAuthnJSONError
from .options import (
    creation_options_to_json,
    parse_creation_options_from_json,
    parse_request_options_from_json,
    request_options_to_json,
)
from .provider import WebAuthnJSONProvider
from .proxies import current_webauthn_json

__all__ = [
    "PUB_KEY_CRED_PARAMS",
    "pub_key_cred_params",
    "bytes_to_base64url",
    "base64url_to_bytes",
    "creation_options_to_json",
    "parse_creation_options_from_json",
    "request_options_to_json",
    "parse_request_options_from_json",
    "assertion_to_json",
    "assertion_from_json",
    "attestation_to_json",
    "attestation_from_json",
    "WebAuthnJSONError",
    "InvalidInput",
    "MalformedEncoding",
    "WebAuthnJSON",
    "WebAuthnJSONProvider",
    "current_webauthn_json",
]
