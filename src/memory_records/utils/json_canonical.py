from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

import numpy as np


def _to_jsonable(x: Any) -> Any:
    """
    Converts values to JSON-friendly structures deterministically.
    - numpy arrays -> lists of Python scalars; numpy scalars -> Python scalars
    - mappings/list/tuple -> recursive, mapping keys coerced to str
    """
    if x is None or isinstance(x, (bool, int, float, str)):
        return x

    if isinstance(x, np.ndarray):
        return x.tolist()

    if isinstance(x, np.generic):
        return x.item()

    if isinstance(x, Mapping):
        return {str(k): _to_jsonable(v) for k, v in x.items()}

    if isinstance(x, (list, tuple)):
        return [_to_jsonable(v) for v in x]

    raise TypeError(f"not JSON-serializable: {type(x).__name__}")


def canonical_dumps(obj: Any) -> str:
    """
    Deterministic JSON: sorted keys, no whitespace, non-ASCII kept as UTF-8.
    """
    return json.dumps(_to_jsonable(obj), sort_keys=True, ensure_ascii=False, separators=(",", ":"))


def canonical_bytes(obj: Any) -> bytes:
    return canonical_dumps(obj).encode("utf-8")
