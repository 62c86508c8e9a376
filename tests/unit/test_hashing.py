from __future__ import annotations

import numpy as np

from memory_records.utils.hashing import fingerprint, sha256_hex
from memory_records.utils.json_canonical import canonical_dumps


def test_sha256_hex_stable():
    assert sha256_hex({"a": 1, "b": 2}) == sha256_hex({"b": 2, "a": 1})


def test_fingerprint_prefix():
    assert fingerprint({"Id": "x"}, 16) == sha256_hex({"Id": "x"})[:16]


def test_canonical_dumps_numpy():
    assert canonical_dumps({"v": np.array([1.5, 2.0], dtype=np.float32), "n": np.int64(3)}) == '{"n":3,"v":[1.5,2.0]}'
