"""Canonical serialization and HMAC-SHA256 signing of webhook payloads.

The receiver recomputes HMAC-SHA256(secret, body) over the raw request body
and compares it with the ``X-Webhook-Signature`` header.
"""

import hashlib
import hmac
import json
from typing import Any

SIGNATURE_HEADER = "X-Webhook-Signature"


def canonical_json(payload: dict[str, Any]) -> bytes:
    """Serialize the payload deterministically; the same bytes are signed and sent."""
    return json.dumps(payload, sort_keys=True, separators=(",", ":"), ensure_ascii=False).encode("utf-8")


def sign_payload(body: bytes, secret: str | None) -> str:
    """Lowercase hex HMAC-SHA256 of ``body``; empty string when there is no secret."""
    if not secret:
        return ""
    return hmac.new(secret.encode("utf-8"), body, hashlib.sha256).hexdigest()


def verify_signature(body: bytes, signature: str, secret: str) -> bool:
    if not signature or not secret:
        return False
    return hmac.compare_digest(sign_payload(body, secret), signature.strip().lower())
