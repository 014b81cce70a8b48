"""Errors raised while converting between native and wire shapes."""


class WebAuthnJSONError(Exception):
    """Base class for every conversion failure."""


class InvalidInput(WebAuthnJSONError, TypeError):
    """A binary field holds something other than a bytes-like payload."""


class MalformedEncoding(WebAuthnJSONError, ValueError):
    """Wire text is not valid unpadded base64url."""
