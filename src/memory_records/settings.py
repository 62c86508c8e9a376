from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

DEFAULT_SCHEMAS_DIR = Path(__file__).resolve().parent / "config" / "schemas"


def _env_bool(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "y", "on")


@dataclass(frozen=True)
class Settings:
    log_level: str = "INFO"
    schemas_dir: Path = DEFAULT_SCHEMAS_DIR
    metrics_enabled: bool = True

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            log_level=os.environ.get("MEMREC_LOG_LEVEL", "INFO").strip().upper() or "INFO",
            schemas_dir=Path(os.environ.get("MEMREC_SCHEMAS_DIR", str(DEFAULT_SCHEMAS_DIR))),
            metrics_enabled=_env_bool("MEMREC_METRICS_ENABLED", True),
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    # read once per process; tests call get_settings.cache_clear() after monkeypatching env
    return Settings.from_env()
