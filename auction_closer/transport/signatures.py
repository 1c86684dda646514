"""Ed25519 signing of closing notices.

The closer signs with `sign_payload`; webhook receivers check the
`X-Closer-Signature` header with `verify_signature` and the matching public key.
"""

from __future__ import annotations

import base64
from typing import Any

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric.ed25519 import (
    Ed25519PrivateKey,
    Ed25519PublicKey,
)

from .canonical_json import canonical_dumps


class SignatureError(ValueError):
    """Raised when a key or signature is missing or invalid."""


def load_public_key(pem: str) -> Ed25519PublicKey:
    if not pem:
        raise SignatureError("public key missing")
    key = serialization.load_pem_public_key(pem.encode("utf-8"))
    if not isinstance(key, Ed25519PublicKey):
        raise SignatureError("public key is not an Ed25519 key")
    return key


def load_private_key(pem: str) -> Ed25519PrivateKey:
    if not pem:
        raise SignatureError("private key missing")
    key = serialization.load_pem_private_key(pem.encode("utf-8"), password=None)
    if not isinstance(key, Ed25519PrivateKey):
        raise SignatureError("private key is not an Ed25519 key")
    return key


def sign_payload(payload: Any, private_key_pem: str) -> str:
    private_key = load_private_key(private_key_pem)
    signature = private_key.sign(canonical_dumps(payload))
    return base64.b64encode(signature).decode("utf-8")


def verify_signature(payload: Any, signature_b64: str, public_key_pem: str) -> None:
    """Validate an ed25519 signature over the canonical JSON payload."""
    if not signature_b64:
        raise SignatureError("signature missing")
    public_key = load_public_key(public_key_pem)
    try:
        signature = base64.b64decode(signature_b64, validate=True)
    except (ValueError, TypeError) as exc:
        raise SignatureError("signature is not base64") from exc
    try:
        public_key.verify(signature, canonical_dumps(payload))
    except InvalidSignature as exc:
        raise SignatureError("signature verification failed") from exc
