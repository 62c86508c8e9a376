from __future__ import annotations

import numpy as np
import pytest

from memory_records.models.embedding import EmbeddingVector
from memory_records.settings import get_settings
from memory_records.utils.schema_validator import SchemaRegistry


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line(
        "markers",
        "property: seeded pseudo-random cases over the metadata round trip",
    )


@pytest.fixture(autouse=True)
def _fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def emb() -> EmbeddingVector:
    return EmbeddingVector(np.array([0.25, -1.0, 3.5], dtype=np.float32))


@pytest.fixture
def registry() -> SchemaRegistry:
    return SchemaRegistry.default()
