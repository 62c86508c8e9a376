from __future__ import annotations

from typing import List

import numpy as np
import pytest

from memory_records.core.metadata import apply_metadata, to_metadata
from memory_records.models.memory_record import MemoryRecord

_ALPHABET = list("abcXYZ019 _-/:.?#\t\n") + ["é", "ñ", "中", "🙂", "\u0000", "T", "F"]


def _rand_text(rng: np.random.Generator, max_len: int = 24) -> str:
    n = int(rng.integers(0, max_len + 1))
    return "".join(_ALPHABET[int(i)] for i in rng.integers(0, len(_ALPHABET), size=n))


def _cases(seed: int, n: int) -> List[MemoryRecord]:
    rng = np.random.default_rng(seed)
    out: List[MemoryRecord] = []
    for _ in range(n):
        vec = rng.standard_normal(int(rng.integers(0, 8))).astype(np.float32)
        desc = _rand_text(rng) if rng.random() < 0.7 else None
        if rng.random() < 0.5:
            out.append(MemoryRecord.reference_record(_rand_text(rng), _rand_text(rng), desc, vec))
        else:
            out.append(MemoryRecord.local_record(_rand_text(rng), _rand_text(rng), desc, vec))
    return out


@pytest.mark.property
@pytest.mark.parametrize("record", _cases(seed=20240611, n=200))
def test_metadata_round_trip_reproduces_scalars(record: MemoryRecord):
    rebuilt = apply_metadata(MemoryRecord.placeholder(), to_metadata(record))
    assert rebuilt.is_reference == record.is_reference
    assert rebuilt.external_source_name == record.external_source_name
    assert rebuilt.id == record.id
    assert rebuilt.description == record.description
    assert rebuilt.text == record.text
    assert rebuilt == record


@pytest.mark.property
def test_round_trip_is_idempotent():
    for record in _cases(seed=7, n=50):
        bag = to_metadata(record)
        assert to_metadata(MemoryRecord.from_metadata(bag)) == bag
