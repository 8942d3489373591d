"""Shared pytest fixtures: a temporary store and an app client bound to it."""

from pathlib import Path
from typing import Iterator

import pytest
from fastapi.testclient import TestClient

from config import Settings
from main import create_app
from repositories import PathStore


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    return tmp_path / "data"


@pytest.fixture
def store(data_dir: Path) -> Iterator[PathStore]:
    with PathStore(data_dir, timeout=5.0) as s:
        yield s


@pytest.fixture
def settings(data_dir: Path, monkeypatch: pytest.MonkeyPatch) -> Settings:
    monkeypatch.setenv("PATHSTORE_DATA_DIR", str(data_dir))
    monkeypatch.setenv("PATHSTORE_ENGINE_TIMEOUT", "5")
    return Settings()


@pytest.fixture
def client(settings: Settings) -> Iterator[TestClient]:
    with TestClient(create_app(settings)) as c:
        yield c
