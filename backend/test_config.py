"""Tests for Settings env parsing."""

from pathlib import Path

from config import Settings


def test_defaults(monkeypatch):
    for name in ("PATHSTORE_DATA_DIR", "PATHSTORE_ENGINE_TIMEOUT", "ALLOWED_ORIGINS", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    s = Settings()
    assert s.PATHSTORE_DATA_DIR == Path("data")
    assert s.PATHSTORE_ENGINE_TIMEOUT == 30.0
    assert s.ALLOWED_ORIGINS == ["*"]
    assert s.LOG_LEVEL == "INFO"


def test_invalid_values_fall_back(monkeypatch):
    monkeypatch.setenv("PATHSTORE_ENGINE_TIMEOUT", "soon")
    monkeypatch.setenv("LOG_LEVEL", "chatty")
    monkeypatch.setenv("ALLOWED_ORIGINS", "http://a.test, http://b.test,")
    s = Settings()
    assert s.PATHSTORE_ENGINE_TIMEOUT == 30.0
    assert s.LOG_LEVEL == "INFO"
    assert s.ALLOWED_ORIGINS == ["http://a.test", "http://b.test"]
