from __future__ import annotations
from typing import Dict, Protocol, runtime_checkable

from .embedding import EmbeddingVector


@runtime_checkable
class EmbeddingWithMetadata(Protocol):
    """Anything a storage collaborator can persist: a vector plus a flat string metadata bag."""

    @property
    def embedding(self) -> EmbeddingVector:
        ...

    @property
    def metadata(self) -> Dict[str, str]:
        ...
