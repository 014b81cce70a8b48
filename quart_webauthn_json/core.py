"""Quart extension wiring the codec into an application."""

from __future__ import annotations

import logging

from quart import current_app

from .algorithms import pub_key_cred_params
from .provider import WebAuthnJSONProvider

logger = logging.getLogger(__name__)


class WebAuthnJSON:
    """Quart extension exposing WebAuthn wire-format defaults."""

    def __init__(self, app=None, **kwargs):
        self.app = None
        self.json_provider_cls = kwargs.get("json_provider", WebAuthnJSONProvider)

        if app is not None:
            self.init_app(app, **kwargs)

    def init_app(self, app, **kwargs):
        self.app = app
        self.json_provider_cls = kwargs.get("json_provider", self.json_provider_cls)

        self._load_defaults(app)

        if app.config["WEBAUTHN_JSON_BYTES_AS_BASE64URL"]:
            app.json = self.json_provider_cls(app)

        app.extensions["webauthn_json"] = self
        logger.debug(
            "webauthn-json initialized for %s (base64url bytes: %s)",
            app.name,
            app.config["WEBAUTHN_JSON_BYTES_AS_BASE64URL"],
        )
        return self

    @staticmethod
    def _load_defaults(app):
        defaults = {
            "WEBAUTHN_JSON_PUB_KEY_CRED_PARAMS": pub_key_cred_params(),
            "WEBAUTHN_JSON_BYTES_AS_BASE64URL": True,
        }

        for key, value in defaults.items():
            app.config.setdefault(key, value)

    @property
    def pub_key_cred_params(self) -> list[dict]:
        """Algorithm preferences configured for the current app."""
        return current_app.config["WEBAUTHN_JSON_PUB_KEY_CRED_PARAMS"]
