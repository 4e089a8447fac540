"""
Hashing utilities for catalog versioning.
"""

from __future__ import annotations

import hashlib
import json
from typing import Any


def sha256_hash(content: str | bytes) -> str:
    """Return the SHA-256 hex digest of the given content."""
    if isinstance(content, str):
        content = content.encode("utf-8")
    return hashlib.sha256(content).hexdigest()


def fingerprint(payload: Any, length: int = 12) -> str:
    """Stable short digest of a JSON-serializable payload (key order independent)."""
    canonical = json.dumps(payload, sort_keys=True, separators=(",", ":"), default=str)
    return sha256_hash(canonical)[:length]
