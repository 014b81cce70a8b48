"""Proxy object for the active webauthn-json extension."""

from quart import current_app
from werkzeug.local import LocalProxy


def _get_webauthn_json():
    return current_app.extensions["webauthn_json"]


current_webauthn_json = LocalProxy(_get_webauthn_json)
