"""Unpadded base64url codec for binary WebAuthn fields."""

from __future__ import annotations

import base64
import binascii
import logging
import re

from .exceptions import InvalidInput, MalformedEncoding

logger = logging.getLogger(__name__)

_ALPHABET = re.compile(r"[A-Za-z0-9_-]*")


def bytes_to_base64url(value: bytes | bytearray | memoryview) -> str:
    """Encode a buffer or memoryview to unpadded base64url."""
    if isinstance(value, memoryview):
        value = value.tobytes()
    elif not isinstance(value, (bytes, bytearray)):
        logger.debug("Refusing to encode %s as base64url", type(value).__name__)
        raise InvalidInput(
            f"Expected bytes, bytearray or memoryview, got {type(value).__name__}"
        )
    return base64.urlsafe_b64encode(value).decode("ascii").rstrip("=")


def base64url_to_bytes(value: str) -> bytes:
    """Decode unpadded base64url into bytes.

    Padding characters are rejected along with anything else outside the
    URL-safe alphabet. A length of ``1 (mod 4)`` can never come out of the
    encoder and is rejected too.
    """
    if not isinstance(value, str):
        logger.debug("Refusing to decode %s as base64url", type(value).__name__)
        raise MalformedEncoding(
            f"Expected base64url text, got {type(value).__name__}"
        )
    if _ALPHABET.fullmatch(value) is None:
        logger.debug("Rejecting base64url text with foreign characters")
        raise MalformedEncoding("Text contains characters outside the base64url alphabet")
    if len(value) % 4 == 1:
        logger.debug("Rejecting base64url text of length %d", len(value))
        raise MalformedEncoding(f"Invalid base64url length: {len(value)}")

    padding = "=" * (-len(value) % 4)
    try:
        return base64.urlsafe_b64decode(f"{value}{padding}")
    except binascii.Error as exc:
        raise MalformedEncoding(str(exc)) from exc
