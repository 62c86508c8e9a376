"""
Metadata bag codec for MemoryRecord.

The bag is the storage-engine-agnostic form of a record's scalar fields: a flat
mapping of five fixed keys to text values. The embedding never goes in the bag.

    IsReference          "T" / "F"
    ExternalSourceName   verbatim
    Id                   verbatim
    Description          verbatim
    Text                 verbatim

The key names are the persisted schema; do not rename them.
"""
from __future__ import annotations

from dataclasses import replace
from typing import TYPE_CHECKING, Any, Dict, Mapping

from ..errors import MetadataFormatError
from ..metrics.prom import mark_decode_failure, mark_decoded, mark_encoded
from ..utils.logging_utils import get_logger

if TYPE_CHECKING:
    from ..models.memory_record import MemoryRecord

log = get_logger(__name__)

IS_REFERENCE = "IsReference"
EXTERNAL_SOURCE_NAME = "ExternalSourceName"
ID = "Id"
DESCRIPTION = "Description"
TEXT = "Text"

METADATA_KEYS = (IS_REFERENCE, EXTERNAL_SOURCE_NAME, ID, DESCRIPTION, TEXT)

TRUE_TOKEN = "T"
FALSE_TOKEN = "F"

# bag key -> record attribute, for the fields copied verbatim
_TEXT_FIELDS = (
    (EXTERNAL_SOURCE_NAME, "external_source_name"),
    (ID, "id"),
    (DESCRIPTION, "description"),
    (TEXT, "text"),
)


def _as_text(key: str, value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, (bytes, bytearray)):
        try:
            return bytes(value).decode("utf-8")
        except UnicodeDecodeError as e:
            raise MetadataFormatError(f"{key} is not valid UTF-8", key=key, value=value) from e
    return str(value)


def encode_bool(value: bool) -> str:
    return TRUE_TOKEN if value else FALSE_TOKEN


def decode_bool(value: Any, key: str = IS_REFERENCE) -> bool:
    s = _as_text(key, value)
    if s == TRUE_TOKEN:
        return True
    if s == FALSE_TOKEN:
        return False
    raise MetadataFormatError(f"Invalid {key} value: {s!r}", key=key, value=value)


def to_metadata(record: "MemoryRecord") -> Dict[str, str]:
    bag = {
        IS_REFERENCE: encode_bool(record.is_reference),
        EXTERNAL_SOURCE_NAME: str(record.external_source_name),
        ID: str(record.id),
        DESCRIPTION: str(record.description),
        TEXT: str(record.text),
    }
    mark_encoded()
    return bag


def apply_metadata(record: "MemoryRecord", metadata: Mapping[str, Any]) -> "MemoryRecord":
    """
    Replay a metadata bag onto ``record`` and return the resulting record.

    Keys are read independently. A missing key (or a ``None`` value, which is how
    some engines return unset columns) keeps the field from ``record``; keys other
    than the five schema keys are ignored. ``record`` itself is never modified.

    Raises MetadataFormatError when IsReference is not exactly "T" or "F" or a
    bytes value is not UTF-8. No partially decoded record is returned.
    """
    changes: Dict[str, Any] = {}
    try:
        raw = metadata.get(IS_REFERENCE)
        if raw is not None:
            changes["is_reference"] = decode_bool(raw)

        for key, attr in _TEXT_FIELDS:
            raw = metadata.get(key)
            if raw is not None:
                changes[attr] = _as_text(key, raw)
    except MetadataFormatError as e:
        log.warning(
            "rejected metadata for record id=%r: %s",
            metadata.get(ID, record.id),
            e,
        )
        mark_decode_failure(e.key)
        raise

    mark_decoded()
    log.debug("applied metadata keys=%s", sorted(k for k in METADATA_KEYS if k in metadata))
    return replace(record, **changes) if changes else record
