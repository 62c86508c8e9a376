from __future__ import annotations
from typing import Any, Optional


class MemoryRecordsError(Exception):
    """Base error for the memory_records package."""


class MetadataFormatError(MemoryRecordsError, ValueError):
    """
    A persisted value cannot be decoded into a record field.

    Raised for an IsReference value other than "T"/"F", for bytes that are
    not UTF-8 and for malformed record documents. It means the data was
    corrupted or written by an incompatible writer, so it is never coerced.
    """

    def __init__(self, message: str, *, key: Optional[str] = None, value: Any = None) -> None:
        super().__init__(message)
        self.key = key
        self.value = value
