from __future__ import annotations

import hashlib
from typing import Any, Optional

from .json_canonical import canonical_bytes


def sha256_hex(obj: Any) -> str:
    return hashlib.sha256(canonical_bytes(obj)).hexdigest()


def fingerprint(obj: Any, length: Optional[int] = None) -> str:
    h = sha256_hex(obj)
    return h[: int(length)] if length else h
