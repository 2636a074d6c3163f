from __future__ import annotations

import base64
import binascii
from typing import Optional


class Uid:
    """Encodes raw entity identifiers into the opaque uids exposed by the schema."""

    def encode(self, value: str) -> str:
        return base64.b64encode(value.encode("utf-8")).decode("ascii")

    def decode(self, uid: str) -> Optional[str]:
        """Return the raw identifier, or None when `uid` is not a valid uid."""
        if not self.is_valid_base64(uid):
            return None
        return base64.b64decode(uid, validate=True).decode("utf-8")

    def is_valid_base64(self, value: str) -> bool:
        """Strict base64 check: decodable and re-encodes to the same string."""
        try:
            decoded = base64.b64decode(value, validate=True)
        except (binascii.Error, ValueError):
            return False
        try:
            decoded.decode("utf-8")
        except UnicodeDecodeError:
            return False
        return base64.b64encode(decoded).decode("ascii") == value
