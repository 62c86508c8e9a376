from __future__ import annotations

from pathlib import Path

from memory_records.settings import DEFAULT_SCHEMAS_DIR, Settings, get_settings


def test_settings_defaults(monkeypatch):
    for name in ("MEMREC_LOG_LEVEL", "MEMREC_SCHEMAS_DIR", "MEMREC_METRICS_ENABLED"):
        monkeypatch.delenv(name, raising=False)
    s = Settings.from_env()
    assert s == Settings()
    assert s.schemas_dir == DEFAULT_SCHEMAS_DIR
    assert (DEFAULT_SCHEMAS_DIR / "registry.json").is_file()


def test_settings_from_env(monkeypatch, tmp_path):
    monkeypatch.setenv("MEMREC_LOG_LEVEL", "debug")
    monkeypatch.setenv("MEMREC_SCHEMAS_DIR", str(tmp_path))
    monkeypatch.setenv("MEMREC_METRICS_ENABLED", "0")
    s = get_settings()
    assert s.log_level == "DEBUG"
    assert s.schemas_dir == Path(tmp_path)
    assert s.metrics_enabled is False
