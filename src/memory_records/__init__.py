from .errors import MemoryRecordsError, MetadataFormatError
from .models.embedding import EmbeddingVector
from .models.memory_record import MemoryRecord
from .models.protocols import EmbeddingWithMetadata
from .core.metadata import METADATA_KEYS, apply_metadata, decode_bool, encode_bool, to_metadata
from .core.documents import dumps_record, loads_record, metadata_fingerprint, record_from_document, record_to_document
from .core.record_store import InMemoryRecordStore, RecordStore

__version__ = "0.1.0"

__all__ = [
    "EmbeddingVector",
    "EmbeddingWithMetadata",
    "InMemoryRecordStore",
    "METADATA_KEYS",
    "MemoryRecord",
    "MemoryRecordsError",
    "MetadataFormatError",
    "RecordStore",
    "apply_metadata",
    "decode_bool",
    "dumps_record",
    "encode_bool",
    "loads_record",
    "metadata_fingerprint",
    "record_from_document",
    "record_to_document",
    "to_metadata",
]
