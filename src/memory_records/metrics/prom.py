from __future__ import annotations
from typing import Optional

from prometheus_client import Counter

from ..settings import get_settings

ENCODED = Counter("memory_records_encoded_total", "Metadata bags produced from records")
DECODED = Counter("memory_records_decoded_total", "Metadata bags applied to records")
DECODE_FAILURES = Counter(
    "memory_records_decode_failures_total", "Metadata bags rejected while decoding", ["key"]
)


def mark_encoded() -> None:
    if get_settings().metrics_enabled:
        ENCODED.inc()


def mark_decoded() -> None:
    if get_settings().metrics_enabled:
        DECODED.inc()


def mark_decode_failure(key: Optional[str]) -> None:
    if get_settings().metrics_enabled:
        DECODE_FAILURES.labels(key=key or "document").inc()
