"""Test configuration and fixtures."""

import pytest

from slugger.config import reset_config


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch, tmp_path):
    """Point configuration at an empty location and reset it between tests."""
    monkeypatch.setenv("SLUGGER_CONFIG", str(tmp_path / "missing.yaml"))
    for name in ("SLUGGER_SEPARATOR", "SLUGGER_MAX_LENGTH", "SLUGGER_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    reset_config()
    yield
    reset_config()


@pytest.fixture
def config_file(tmp_path, monkeypatch):
    """Write a slugger.yaml and point SLUGGER_CONFIG at it."""

    def _write(content: str):
        path = tmp_path / "slugger.yaml"
        path.write_text(content, encoding="utf-8")
        monkeypatch.setenv("SLUGGER_CONFIG", str(path))
        return path

    return _write
