"""HMAC request signing for the CLOB API.

Each request carries a millisecond timestamp, the API key, the passphrase
and a base64 HMAC-SHA256 over ``timestamp + METHOD + path + body`` keyed by
the base64-decoded API secret. ``path`` includes the query string.
"""

from __future__ import annotations

import base64
import hashlib
import hmac
import time

from breakwatch.config.schema import Credentials


def _decode_secret(secret: str) -> bytes:
    """Decode a base64 secret, accepting both the standard and URL-safe alphabets."""
    normalized = secret.strip().replace("-", "+").replace("_", "/")
    normalized += "=" * (-len(normalized) % 4)
    return base64.b64decode(normalized, validate=True)


class RequestSigner:
    """Builds authenticated headers for outbound market-data calls."""

    def __init__(self, credentials: Credentials):
        if not credentials.complete:
            raise ValueError("api_key, api_secret and api_passphrase are all required")
        self.api_key = credentials.api_key
        self.passphrase = credentials.api_passphrase
        self._secret = _decode_secret(credentials.api_secret)

    def sign(self, method: str, path: str, body: str = "", timestamp: int | None = None) -> str:
        if timestamp is None:
            timestamp = int(time.time() * 1000)
        payload = f"{timestamp}{method.upper()}{path}{body}"
        digest = hmac.new(self._secret, payload.encode("utf-8"), hashlib.sha256).digest()
        return base64.b64encode(digest).decode("ascii")

    def headers(
        self,
        method: str,
        path: str,
        body: str = "",
        timestamp: int | None = None,
    ) -> dict[str, str]:
        if timestamp is None:
            timestamp = int(time.time() * 1000)
        return {
            "Content-Type": "application/json",
            "Accept": "application/json",
            "X-BAPI-TIMESTAMP": str(timestamp),
            "X-BAPI-API-KEY": self.api_key,
            "X-BAPI-SIGN": self.sign(method, path, body, timestamp),
            "X-BAPI-PASSPHRASE": self.passphrase,
        }
