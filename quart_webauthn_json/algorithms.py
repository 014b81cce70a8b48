"""Public-key credential parameters offered to authenticators."""

from __future__ import annotations

from types import MappingProxyType

from webauthn.helpers.cose import COSEAlgorithmIdentifier
from webauthn.helpers.structs import PublicKeyCredentialType

_PUBLIC_KEY = PublicKeyCredentialType.PUBLIC_KEY.value

# Order is the relying party's preference.
PUB_KEY_CRED_PARAMS = (
    MappingProxyType({"alg": int(COSEAlgorithmIdentifier.EDDSA), "type": _PUBLIC_KEY}),
    MappingProxyType(
        {"alg": int(COSEAlgorithmIdentifier.ECDSA_SHA_256), "type": _PUBLIC_KEY}
    ),
    MappingProxyType(
        {
            "alg": int(COSEAlgorithmIdentifier.RSASSA_PKCS1_v1_5_SHA_256),
            "type": _PUBLIC_KEY,
        }
    ),
)


def pub_key_cred_params() -> list[dict]:
    """Return a JSON-safe copy of :data:`PUB_KEY_CRED_PARAMS`."""
    return [dict(param) for param in PUB_KEY_CRED_PARAMS]
