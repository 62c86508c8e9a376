from .prom import DECODED, DECODE_FAILURES, ENCODED, mark_decoded, mark_decode_failure, mark_encoded

__all__ = ["DECODED", "DECODE_FAILURES", "ENCODED", "mark_decoded", "mark_decode_failure", "mark_encoded"]
