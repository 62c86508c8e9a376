from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Dict, Mapping, Optional, Sequence, Union

from ..core.metadata import apply_metadata, to_metadata
from .embedding import EmbeddingVector

EmbeddingLike = Union[EmbeddingVector, Sequence[float], None]


def _as_embedding(embedding: EmbeddingLike) -> EmbeddingVector:
    if embedding is None:
        return EmbeddingVector.empty()
    if isinstance(embedding, EmbeddingVector):
        return embedding
    return EmbeddingVector(embedding)


@dataclass(frozen=True)
class MemoryRecord:
    """
    A persisted memory: identity, local/reference classification, description,
    source text and the content embedding.

    IMPORTANT: this is a storage schema. Renaming or removing fields invalidates
    metadata already persisted by vector stores (see core.metadata).

    Build records with ``local_record`` or ``reference_record``. The bare
    constructor and ``placeholder`` produce the empty state used while
    reconstructing from storage. Equality covers the five scalar fields; the
    embedding travels through a separate channel and is not compared.
    """

    is_reference: bool = False
    # owner of externally stored data, e.g. "GitHub", "MSTeams", "WebSite"
    external_source_name: str = ""
    # domain specific: URL, GUID, provider key...
    id: str = ""
    # not indexed
    description: str = ""
    # only for local records
    text: str = ""
    embedding: EmbeddingVector = field(default_factory=EmbeddingVector.empty, compare=False, repr=False)

    @classmethod
    def reference_record(
        cls,
        external_id: str,
        source_name: str,
        description: Optional[str] = None,
        embedding: EmbeddingLike = None,
    ) -> "MemoryRecord":
        """
        Record whose source lives in an external service.

        ``external_id`` points at the original (URL or equivalent); ``source_name``
        names the service. Neither is validated.
        """
        return cls(
            is_reference=True,
            external_source_name=source_name,
            id=external_id,
            description=description or "",
            text="",
            embedding=_as_embedding(embedding),
        )

    @classmethod
    def local_record(
        cls,
        id: str,
        text: str,
        description: Optional[str] = None,
        embedding: EmbeddingLike = None,
    ) -> "MemoryRecord":
        """Record whose full source text is stored alongside the embedding."""
        return cls(
            is_reference=False,
            external_source_name="",
            id=id,
            description=description or "",
            text=text,
            embedding=_as_embedding(embedding),
        )

    @classmethod
    def placeholder(cls, embedding: EmbeddingLike = None) -> "MemoryRecord":
        return cls(embedding=_as_embedding(embedding))

    @classmethod
    def from_metadata(cls, metadata: Mapping[str, Any], embedding: EmbeddingLike = None) -> "MemoryRecord":
        return apply_metadata(cls.placeholder(embedding), metadata)

    @property
    def metadata(self) -> Dict[str, str]:
        return to_metadata(self)

    def with_metadata(self, metadata: Mapping[str, Any]) -> "MemoryRecord":
        return apply_metadata(self, metadata)

    def with_embedding(self, embedding: EmbeddingLike) -> "MemoryRecord":
        return replace(self, embedding=_as_embedding(embedding))
