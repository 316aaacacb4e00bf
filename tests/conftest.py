"""
Shared pytest fixtures.

Every test gets its own data directory so nothing touches the real one.
"""

from pathlib import Path

import pytest
from tinydb import TinyDB
from tinydb.storages import MemoryStorage

from config import config
from persist.helpers.platform import close_preferences


@pytest.fixture(autouse=True)
def data_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the application data directory at a fresh temporary path."""
    directory = tmp_path / "data"
    monkeypatch.setattr(config, "DATA_DIR", directory)
    monkeypatch.setattr(config, "PREFERENCES_FILE", "preferences.json")
    monkeypatch.setattr(config, "PERSIST_KEY", "app")
    monkeypatch.setattr(config, "SAVE_LOCATION", "document_file")
    yield directory
    close_preferences()


@pytest.fixture(params=[True, False], ids=["offloaded", "inline"])
def offload(request, monkeypatch: pytest.MonkeyPatch) -> bool:
    """Run a test with and without worker offload."""
    monkeypatch.setattr(config, "OFFLOAD_WORK", request.param)
    return request.param


@pytest.fixture
def preferences() -> TinyDB:
    """In-memory preference store."""
    db = TinyDB(storage=MemoryStorage)
    yield db
    db.close()
