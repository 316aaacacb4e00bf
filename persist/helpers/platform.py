"""Platform collaborators: application directory and preference store."""

import logging
import threading
import weakref
from pathlib import Path
from typing import Dict

from tinydb import TinyDB

from config import config
from persist.errors import StorageError
from persist.helpers.worker import compute

logger = logging.getLogger(__name__)

# Open preference stores, one per file
_preferences: Dict[Path, TinyDB] = {}

# TinyDB rewrites the whole file on every write; one lock per store handle
_store_locks: "weakref.WeakKeyDictionary[TinyDB, threading.Lock]" = weakref.WeakKeyDictionary()
_store_locks_guard = threading.Lock()


def _ensure_directory(path: Path) -> Path:
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise StorageError(f"Failed to create data directory: {e}", path=path) from e
    return path


async def get_documents_directory() -> Path:
    """Get the application-private data directory, creating it if needed."""
    return await compute(_ensure_directory, Path(config.DATA_DIR))


async def get_preferences() -> TinyDB:
    """Get the shared preference store for the configured data directory."""
    directory = await get_documents_directory()
    path = directory / config.PREFERENCES_FILE

    if path not in _preferences:
        try:
            _preferences[path] = TinyDB(path)
        except OSError as e:
            raise StorageError(f"Failed to open preference store: {e}", path=path) from e
        logger.info(f"Preference store opened at {path}")
    return _preferences[path]


def store_lock(preferences: TinyDB) -> threading.Lock:
    """Get the lock every access to this store handle must hold."""
    with _store_locks_guard:
        lock = _store_locks.get(preferences)
        if lock is None:
            lock = _store_locks[preferences] = threading.Lock()
        return lock


def close_preferences() -> None:
    """Close every open preference store."""
    for path, db in list(_preferences.items()):
        with store_lock(db):
            db.close()
        logger.debug(f"Preference store closed at {path}")
    _preferences.clear()
