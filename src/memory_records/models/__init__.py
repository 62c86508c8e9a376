from .embedding import EmbeddingVector
from .memory_record import MemoryRecord
from .protocols import EmbeddingWithMetadata

__all__ = ["EmbeddingVector", "EmbeddingWithMetadata", "MemoryRecord"]
