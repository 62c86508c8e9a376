from __future__ import annotations

import threading
from typing import Dict, List, Optional, Protocol, runtime_checkable

import numpy as np

from ..models.embedding import EmbeddingVector
from ..models.memory_record import MemoryRecord
from ..utils.logging_utils import get_logger
from .metadata import to_metadata

log = get_logger(__name__)


@runtime_checkable
class RecordStore(Protocol):
    def upsert(self, record: MemoryRecord) -> None:
        ...

    def get(self, record_id: str) -> Optional[MemoryRecord]:
        ...

    def remove(self, record_id: str) -> bool:
        ...

    def __len__(self) -> int:
        ...


class InMemoryRecordStore:
    """
    Reference storage collaborator.
    - metadata channel: the flat bag from to_metadata, keyed by record id.
    - vector channel: float32 arrays, keyed by record id.
    With drop_empty=True, empty-string values are not persisted, like engines
    that do not round-trip empty columns; reads then rely on partial decode.
    """

    def __init__(self, drop_empty: bool = False) -> None:
        self.drop_empty = drop_empty
        self._lock = threading.RLock()
        self._metadata: Dict[str, Dict[str, str]] = {}
        self._vectors: Dict[str, np.ndarray] = {}

    def upsert(self, record: MemoryRecord) -> None:
        bag = to_metadata(record)
        if self.drop_empty:
            bag = {k: v for k, v in bag.items() if v != ""}
        vec = np.array(record.embedding.vector, dtype=np.float32)
        with self._lock:
            self._metadata[record.id] = bag
            self._vectors[record.id] = vec
        log.debug("upsert id=%r dim=%d keys=%d", record.id, vec.shape[0], len(bag))

    def get(self, record_id: str) -> Optional[MemoryRecord]:
        with self._lock:
            bag = self._metadata.get(record_id)
            if bag is None:
                return None
            vec = self._vectors[record_id]
        return MemoryRecord.from_metadata(bag, EmbeddingVector(vec))

    def metadata(self, record_id: str) -> Optional[Dict[str, str]]:
        with self._lock:
            bag = self._metadata.get(record_id)
            return dict(bag) if bag is not None else None

    def vector(self, record_id: str) -> Optional[np.ndarray]:
        with self._lock:
            vec = self._vectors.get(record_id)
            return vec.copy() if vec is not None else None

    def remove(self, record_id: str) -> bool:
        with self._lock:
            if record_id not in self._metadata:
                return False
            del self._metadata[record_id]
            del self._vectors[record_id]
            return True

    def ids(self) -> List[str]:
        with self._lock:
            return list(self._metadata)

    def __contains__(self, record_id: object) -> bool:
        with self._lock:
            return record_id in self._metadata

    def __len__(self) -> int:
        with self._lock:
            return len(self._metadata)
