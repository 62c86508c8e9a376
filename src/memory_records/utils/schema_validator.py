from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Optional

from jsonschema import Draft202012Validator

from ..settings import get_settings

METADATA_SCHEMA_ID = "memory_record_metadata.v1"
PARTIAL_METADATA_SCHEMA_ID = "memory_record_metadata.partial.v1"


class SchemaRegistry:
    def __init__(self, schemas_dir: Path):
        self.schemas_dir = Path(schemas_dir)
        reg = json.loads((self.schemas_dir / "registry.json").read_text(encoding="utf-8"))
        self._map = {s["schema_id"]: (self.schemas_dir / s["path"]) for s in reg["schemas"]}
        self._validators: Dict[str, Draft202012Validator] = {}

    @classmethod
    def default(cls, schemas_dir: Optional[Path] = None) -> "SchemaRegistry":
        return cls(schemas_dir or get_settings().schemas_dir)

    def schema_ids(self) -> List[str]:
        return sorted(self._map)

    def load_schema(self, schema_id: str) -> Dict[str, Any]:
        if schema_id not in self._map:
            raise KeyError(f"unknown schema_id: {schema_id}")
        return json.loads(self._map[schema_id].read_text(encoding="utf-8"))

    def validator(self, schema_id: str) -> Draft202012Validator:
        v = self._validators.get(schema_id)
        if v is None:
            schema = self.load_schema(schema_id)
            Draft202012Validator.check_schema(schema)
            v = Draft202012Validator(schema)
            self._validators[schema_id] = v
        return v


def validate_payload(payload: Dict[str, Any], schema_id: str, registry: SchemaRegistry) -> None:
    registry.validator(schema_id).validate(payload)


def schema_errors(payload: Any, schema_id: str, registry: SchemaRegistry) -> List[str]:
    errs = sorted(registry.validator(schema_id).iter_errors(payload), key=lambda e: list(e.path))
    return [e.message for e in errs]
