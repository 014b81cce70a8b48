from dataclasses import dataclass

import pytest
from quart import Quart

from quart_webauthn_json import WebAuthnJSON, bytes_to_base64url


class LiveAttestationResponse:
    """Mimics a platform response that computes fields from the attestation object."""

    def __init__(self, *, stale=None, **computed):
        self.clientDataJSON = computed["clientDataJSON"]
        self.attestationObject = computed["attestationObject"]
        self._computed = computed
        for name, value in (stale or {}).items():
            setattr(self, name, value)

    def getAuthenticatorData(self):
        return self._computed["authenticatorData"]

    def getPublicKey(self):
        return self._computed["publicKey"]

    def getPublicKeyAlgorithm(self):
        return self._computed["publicKeyAlgorithm"]

    def getTransports(self):
        return list(self._computed["transports"])


@dataclass
class LiveCredential:
    id: str
    rawId: bytes
    response: object
    type: str = "public-key"
    authenticatorAttachment: str | None = "platform"

    def getClientExtensionResults(self):
        return {"credProps": {"rk": True}}


@pytest.fixture
def native_creation_options():
    return {
        "authenticatorSelection": {"residentKey": "required"},
        "challenge": b"challenge",
        "pubKeyCredParams": [
            {"alg": -8, "type": "public-key"},
            {"alg": -7, "type": "public-key"},
        ],
        "rp": {"id": "example.com", "name": "Example"},
        "user": {"name": "ada", "displayName": "Ada Lovelace", "id": b"user-id"},
    }


@pytest.fixture
def json_creation_options():
    return {
        "authenticatorSelection": {"residentKey": "required"},
        "challenge": "Y2hhbGxlbmdl",
        "pubKeyCredParams": [
            {"alg": -8, "type": "public-key"},
            {"alg": -7, "type": "public-key"},
        ],
        "rp": {"id": "example.com", "name": "Example"},
        "user": {"name": "ada", "displayName": "Ada Lovelace", "id": "dXNlci1pZA"},
    }


@pytest.fixture
def native_request_options():
    return {
        "allowCredentials": [
            {"id": b"cred-1", "transports": ["internal", "hybrid"], "type": "public-key"},
            {"id": b"cred-2", "transports": ["usb"], "type": "public-key"},
        ],
        "challenge": b"challenge",
        "extensions": {"appid": "https://example.com"},
        "hints": ["client-device"],
        "rpId": "example.com",
        "timeout": 60000,
        "userVerification": "preferred",
    }


@pytest.fixture
def json_request_options():
    return {
        "allowCredentials": [
            {
                "id": bytes_to_base64url(b"cred-1"),
                "transports": ["internal", "hybrid"],
                "type": "public-key",
            },
            {
                "id": bytes_to_base64url(b"cred-2"),
                "transports": ["usb"],
                "type": "public-key",
            },
        ],
        "challenge": "Y2hhbGxlbmdl",
        "extensions": {"appid": "https://example.com"},
        "hints": ["client-device"],
        "rpId": "example.com",
        "timeout": 60000,
        "userVerification": "preferred",
    }


@pytest.fixture
def native_assertion():
    return {
        "id": bytes_to_base64url(b"cred-1"),
        "rawId": b"cred-1",
        "response": {
            "authenticatorData": b"\x49\x96\x0d\xe5" + b"\x00" * 33,
            "clientDataJSON": b'{"type":"webauthn.get"}',
            "signature": b"\x30\x45" + b"\x11" * 69,
            "userHandle": b"user-id",
        },
        "authenticatorAttachment": "cross-platform",
        "clientExtensionResults": {},
        "type": "public-key",
    }


@pytest.fixture
def json_assertion(native_assertion):
    response = native_assertion["response"]
    return {
        "id": native_assertion["id"],
        "rawId": bytes_to_base64url(b"cred-1"),
        "response": {
            "authenticatorData": bytes_to_base64url(response["authenticatorData"]),
            "clientDataJSON": bytes_to_base64url(response["clientDataJSON"]),
            "signature": bytes_to_base64url(response["signature"]),
            "userHandle": "dXNlci1pZA",
        },
        "authenticatorAttachment": "cross-platform",
        "clientExtensionResults": {},
        "type": "public-key",
    }


@pytest.fixture
def attestation_fields():
    return {
        "attestationObject": b"\xa3cfmtdnone",
        "clientDataJSON": b'{"type":"webauthn.create"}',
        "authenticatorData": b"\x49\x96\x0d\xe5" + b"\x45" + b"\x00" * 32,
        "publicKey": b"\x30\x59\x30\x13" + b"\x22" * 87,
        "publicKeyAlgorithm": -7,
        "transports": ["internal", "hybrid"],
    }


@pytest.fixture
def native_attestation(attestation_fields):
    return {
        "id": bytes_to_base64url(b"cred-1"),
        "rawId": b"cred-1",
        "response": dict(attestation_fields),
        "authenticatorAttachment": "platform",
        "clientExtensionResults": {},
        "type": "public-key",
    }


@pytest.fixture
def json_attestation(attestation_fields):
    return {
        "id": bytes_to_base64url(b"cred-1"),
        "rawId": bytes_to_base64url(b"cred-1"),
        "response": {
            "attestationObject": bytes_to_base64url(
                attestation_fields["attestationObject"]
            ),
            "clientDataJSON": bytes_to_base64url(attestation_fields["clientDataJSON"]),
            "authenticatorData": bytes_to_base64url(
                attestation_fields["authenticatorData"]
            ),
            "publicKey": bytes_to_base64url(attestation_fields["publicKey"]),
            "publicKeyAlgorithm": -7,
            "transports": ["internal", "hybrid"],
        },
        "authenticatorAttachment": "platform",
        "clientExtensionResults": {},
        "type": "public-key",
    }


@pytest.fixture
def live_attestation(attestation_fields):
    response = LiveAttestationResponse(
        stale={
            "authenticatorData": b"stale-auth-data",
            "publicKey": b"stale-key",
            "publicKeyAlgorithm": -257,
            "transports": ["usb"],
        },
        **attestation_fields,
    )
    return LiveCredential(
        id=bytes_to_base64url(b"cred-1"),
        rawId=b"cred-1",
        response=response,
    )


def _build_app(**config) -> Quart:
    app = Quart(__name__)
    app.config.update(TESTING=True, **config)

    WebAuthnJSON(app)

    @app.get("/challenge")
    async def challenge():
        return {"challenge": b"challenge", "userId": memoryview(b"user-id")}

    return app


@pytest.fixture
def app():
    return _build_app()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def app_plain_json():
    return _build_app(WEBAUTHN_JSON_BYTES_AS_BASE64URL=False)
