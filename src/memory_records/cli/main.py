from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, TextIO, Tuple

from jsonschema import ValidationError

from ..core.documents import DOC_METADATA, record_from_document
from ..errors import MetadataFormatError
from ..models.memory_record import MemoryRecord
from ..utils.logging_utils import get_logger
from ..utils.schema_validator import (
    METADATA_SCHEMA_ID,
    PARTIAL_METADATA_SCHEMA_ID,
    SchemaRegistry,
    validate_payload,
)

log = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="memory-records", description="Offline tools for persisted memory records")
    sub = p.add_subparsers(dest="cmd", required=True)

    c = sub.add_parser("check", help="Decode and schema-check a JSON Lines file of metadata bags or record documents")
    c.add_argument("path", help="JSONL file; one metadata bag or {'metadata':..., 'embedding':...} per line")
    c.add_argument("--schemas-dir", default=None, help="Schema registry directory (default: MEMREC_SCHEMAS_DIR or bundled)")
    c.add_argument("--strict", action="store_true", help="Require all five metadata keys and no unknown keys")
    return p


def _check_line(obj: Any, registry: SchemaRegistry, strict: bool) -> MemoryRecord:
    if not isinstance(obj, dict):
        raise MetadataFormatError("line is not a JSON object", value=obj)

    is_document = DOC_METADATA in obj
    bag = obj.get(DOC_METADATA) if is_document else obj
    if isinstance(bag, dict):
        schema_id = METADATA_SCHEMA_ID if strict else PARTIAL_METADATA_SCHEMA_ID
        validate_payload(bag, schema_id, registry)

    if is_document:
        return record_from_document(obj)
    return MemoryRecord.from_metadata(bag)


def run_check(path: Path, registry: SchemaRegistry, strict: bool = False, out: Optional[TextIO] = None) -> int:
    if out is None:
        out = sys.stdout
    failures: List[Tuple[int, str]] = []
    checked = 0
    counts: Dict[str, int] = {"local": 0, "reference": 0}

    with path.open("rb") as f:
        for n, raw in enumerate(f, start=1):
            if not raw.strip():
                continue
            checked += 1
            try:
                line = raw.decode("utf-8")
                rec = _check_line(json.loads(line), registry, strict)
            except UnicodeDecodeError as e:
                failures.append((n, f"invalid UTF-8 at byte {e.start}"))
                continue
            except json.JSONDecodeError as e:
                failures.append((n, f"invalid JSON: {e.msg}"))
                continue
            except ValidationError as e:
                failures.append((n, f"schema: {e.message}"))
                continue
            except MetadataFormatError as e:
                failures.append((n, str(e)))
                continue
            counts["reference" if rec.is_reference else "local"] += 1

    for n, msg in failures:
        out.write(f"line={n} error={msg}\n")
    out.write(
        f"checked={checked} ok={checked - len(failures)} failed={len(failures)} "
        f"local={counts['local']} reference={counts['reference']}\n"
    )
    log.info("checked %s: %d lines, %d failed", path, checked, len(failures))
    return 0 if not failures else 1


def main(argv: Optional[List[str]] = None) -> int:
    if argv is None:
        argv = sys.argv[1:]
    args = build_parser().parse_args(argv)
    if args.cmd == "check":
        path = Path(args.path)
        if not path.is_file():
            sys.stderr.write(f"memory-records: no such file: {path}\n")
            return 2
        registry = SchemaRegistry.default(Path(args.schemas_dir) if args.schemas_dir else None)
        return run_check(path, registry, strict=args.strict)
    return 2


if __name__ == "__main__":
    raise SystemExit(main())
