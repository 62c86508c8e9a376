from __future__ import annotations

import numpy as np
import pytest

from memory_records.models.embedding import EmbeddingVector


def test_embedding_shape_dtype_default_float32():
    v = EmbeddingVector([1, 2, 3])
    assert isinstance(v.vector, np.ndarray)
    assert v.vector.shape == (3,)
    assert v.vector.dtype == np.float32
    assert v.dim == len(v) == 3


def test_embedding_empty_is_valid():
    v = EmbeddingVector([])
    assert len(v) == 0
    assert v.tolist() == []
    assert len(EmbeddingVector.empty()) == 0


def test_embedding_is_read_only_and_copied():
    src = np.array([0.5, 1.5], dtype=np.float32)
    v = EmbeddingVector(src)
    src[0] = 9.0
    assert v.vector[0] == np.float32(0.5)
    with pytest.raises(ValueError):
        v.vector[0] = 2.0


def test_embedding_frozen():
    v = EmbeddingVector([1.0])
    with pytest.raises(AttributeError):
        v.vector = np.zeros(1, dtype=np.float32)  # type: ignore[misc]


def test_embedding_accepts_generators_and_other_dtypes():
    v = EmbeddingVector((x / 2 for x in range(4)), dtype=np.float64)
    assert v.vector.dtype == np.float64
    assert v.tolist() == [0.0, 0.5, 1.0, 1.5]
    assert list(v) == [0.0, 0.5, 1.0, 1.5]


def test_embedding_rejects_non_numeric_element_type():
    with pytest.raises(TypeError):
        EmbeddingVector([1.0], dtype=np.str_)


def test_embedding_compares_by_identity():
    a = EmbeddingVector([1.0, 2.0])
    b = EmbeddingVector([1.0, 2.0])
    assert a == a
    assert a != b


def test_embedding_rejects_nested_input():
    with pytest.raises(ValueError):
        EmbeddingVector([[1.0, 2.0], [3.0, 4.0]])
    with pytest.raises(ValueError):
        EmbeddingVector(np.zeros((2, 2), dtype=np.float32))
