from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, List

import numpy as np


@dataclass(frozen=True, eq=False)
class EmbeddingVector:
    """
    Immutable holder for one ordered numeric vector (float32 unless told otherwise).

    The input is copied into a read-only 1-D array. Length is not checked against
    any dimensionality; an empty vector is valid. Equality and distance belong to
    whoever consumes the vector, so instances compare by identity.
    """

    vector: np.ndarray
    dtype: Any = np.float32

    def __post_init__(self) -> None:
        dt = np.dtype(self.dtype)
        if not (np.issubdtype(dt, np.floating) or np.issubdtype(dt, np.integer)):
            raise TypeError(f"embedding element type must be a real numeric dtype, got {dt}")

        values = self.vector
        if not isinstance(values, np.ndarray):
            values = list(values)
        arr = np.array(values, dtype=dt)
        if arr.ndim > 1:
            raise ValueError(f"embedding must be one-dimensional, got shape {arr.shape}")
        arr = arr.reshape(-1)
        arr.setflags(write=False)

        object.__setattr__(self, "vector", arr)
        object.__setattr__(self, "dtype", dt)

    @classmethod
    def empty(cls) -> "EmbeddingVector":
        return cls(np.zeros((0,), dtype=np.float32))

    @property
    def dim(self) -> int:
        return int(self.vector.shape[0])

    def __len__(self) -> int:
        return self.dim

    def __iter__(self) -> Iterator[Any]:
        return iter(self.vector.tolist())

    def tolist(self) -> List[Any]:
        return self.vector.tolist()
