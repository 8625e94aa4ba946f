"""Canonical JSON and hashing helpers.

Used for CLI output and policy fingerprints so identical input always
produces byte-identical output.
"""
from __future__ import annotations

import hashlib
import json
from typing import Any


def stable_json(obj: Any) -> str:
    """Canonical JSON: sorted keys, no whitespace, UTF-8 safe."""
    return json.dumps(obj, sort_keys=True, separators=(",", ":"), ensure_ascii=False)


def stable_hash(obj: Any) -> str:
    """SHA-256 of the canonical JSON form of ``obj``."""
    return hashlib.sha256(stable_json(obj).encode("utf-8")).hexdigest()


def hash_suffix(h: str, n: int = 8) -> str:
    """Last n characters of a hash (for display)."""
    if not h:
        return ""
    return h[-n:]
