from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any, Dict

from ..errors import MetadataFormatError
from ..models.embedding import EmbeddingVector
from ..models.memory_record import MemoryRecord
from ..utils.hashing import fingerprint
from ..utils.json_canonical import canonical_dumps
from .metadata import to_metadata

DOC_METADATA = "metadata"
DOC_EMBEDDING = "embedding"


def record_to_document(record: MemoryRecord) -> Dict[str, Any]:
    return {
        DOC_METADATA: to_metadata(record),
        DOC_EMBEDDING: record.embedding.tolist(),
    }


def record_from_document(doc: Any) -> MemoryRecord:
    """
    Inverse of ``record_to_document``. ``metadata`` may hold any subset of the
    bag keys; a missing ``embedding`` yields an empty vector.
    """
    if not isinstance(doc, Mapping):
        raise MetadataFormatError("record document must be an object", value=doc)

    meta = doc.get(DOC_METADATA)
    if meta is None:
        meta = {}
    if not isinstance(meta, Mapping):
        raise MetadataFormatError("record metadata must be an object", key=DOC_METADATA, value=meta)

    raw = doc.get(DOC_EMBEDDING)
    if raw is None:
        raw = []
    if not isinstance(raw, list):
        raise MetadataFormatError("record embedding must be a list", key=DOC_EMBEDDING, value=raw)
    for x in raw:
        # numbers only; bool is an int subclass
        if isinstance(x, bool) or not isinstance(x, (int, float)):
            raise MetadataFormatError(f"embedding element is not a number: {x!r}", key=DOC_EMBEDDING, value=raw)
    try:
        emb = EmbeddingVector(raw)
    except (TypeError, ValueError) as e:
        raise MetadataFormatError(f"invalid embedding: {e}", key=DOC_EMBEDDING, value=raw) from e

    return MemoryRecord.from_metadata(meta, emb)


def dumps_record(record: MemoryRecord) -> str:
    return canonical_dumps(record_to_document(record))


def loads_record(s: str) -> MemoryRecord:
    try:
        doc = json.loads(s)
    except json.JSONDecodeError as e:
        raise MetadataFormatError(f"invalid record JSON: {e.msg}", value=s) from e
    return record_from_document(doc)


def metadata_fingerprint(record: MemoryRecord) -> str:
    # scalar fields only; the embedding does not contribute
    return fingerprint(to_metadata(record))
