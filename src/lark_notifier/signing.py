"""Request signing for Lark custom bot webhooks.

A bot with signature verification enabled expects two extra fields in every
message: ``timestamp`` and ``sign``. The signature is computed as::

    string_to_sign = f"{timestamp}\\n{secret}"
    sign = base64(hmac_sha256(key=string_to_sign, msg=b""))

The server rejects the message if ``sign`` was not derived from the same
``timestamp`` that travels with it, or if the timestamp is too far from its
clock.
"""

from __future__ import annotations

import base64
import hashlib
import hmac
import time
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True, slots=True)
class SignedEnvelope:
    """Timestamp and signature pair attached to a signed message."""

    timestamp: int
    signature: str


def generate_sign(secret: str, timestamp: int) -> str:
    """Return the base64 encoded signature for ``timestamp`` and ``secret``."""

    string_to_sign = f"{timestamp}\n{secret}"
    digest = hmac.new(
        string_to_sign.encode("utf-8"), b"", digestmod=hashlib.sha256
    ).digest()
    return base64.b64encode(digest).decode("utf-8")


def sign(secret: Optional[str], timestamp: Optional[int] = None) -> Optional[SignedEnvelope]:
    """Build a :class:`SignedEnvelope`, or ``None`` when no secret is configured."""

    if not secret or not secret.strip():
        return None
    if timestamp is None:
        timestamp = int(time.time())
    return SignedEnvelope(timestamp=timestamp, signature=generate_sign(secret, timestamp))
