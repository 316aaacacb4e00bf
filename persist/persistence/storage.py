"""Storage engine abstraction layer."""

import logging
from abc import ABC, abstractmethod
from enum import Enum
from pathlib import Path
from typing import Optional, Union

from tinydb import Query, TinyDB

from config import config
from persist.core.serialization import bytes_to_string, string_to_bytes
from persist.errors import ConfigurationError, StorageError
from persist.helpers.platform import get_documents_directory, get_preferences, store_lock
from persist.helpers.worker import compute

logger = logging.getLogger(__name__)


class StorageEngine(ABC):
    """Abstract storage engine for a single byte buffer."""

    @abstractmethod
    async def load(self) -> Optional[bytes]:
        """Load the last saved buffer, or None if nothing is stored."""
        pass

    @abstractmethod
    async def save(self, data: Optional[bytes]) -> None:
        """Replace the stored buffer. Saving None leaves it untouched."""
        pass

    @abstractmethod
    async def clear(self) -> None:
        """Remove the stored buffer."""
        pass


class SaveLocation(Enum):
    """Location to save state to."""

    # Maps to DocumentFileEngine
    DOCUMENT_FILE = "document_file"

    # Maps to SharedPreferencesEngine
    SHARED_PREFERENCES = "shared_preferences"


class LocationStorage(StorageEngine):
    """
    Storage engine chosen by save location.

    Proxy of DocumentFileEngine and SharedPreferencesEngine. The engine is
    picked once at construction; no I/O happens until the first call.
    """

    def __init__(
        self,
        key: str = "app",
        location: Union[SaveLocation, str] = SaveLocation.DOCUMENT_FILE,
    ):
        try:
            location = SaveLocation(location)
        except ValueError:
            raise ConfigurationError("No storage location", "location", location) from None

        engines = {
            SaveLocation.DOCUMENT_FILE: DocumentFileEngine,
            SaveLocation.SHARED_PREFERENCES: SharedPreferencesEngine,
        }
        self._location_engine: StorageEngine = engines[location](key)
        self.location = location

    async def load(self) -> Optional[bytes]:
        return await self._location_engine.load()

    async def save(self, data: Optional[bytes]) -> None:
        await self._location_engine.save(data)

    async def clear(self) -> None:
        await self._location_engine.clear()


class DocumentFileEngine(StorageEngine):
    """Storage engine saving to a file in the application data directory."""

    def __init__(self, key: str = "app", directory: Optional[Path] = None):
        self.key = key
        self.directory = Path(directory) if directory is not None else None

    async def load(self) -> Optional[bytes]:
        path = await self._get_file()
        data = await compute(self._read_file, path)
        logger.debug(f"Loaded {len(data) if data is not None else 'no'} bytes from {path}")
        return data

    async def save(self, data: Optional[bytes]) -> None:
        if data is None:
            return

        path = await self._get_file()
        await compute(self._write_file, path, bytes(data))
        logger.debug(f"Saved {len(data)} bytes to {path}")

    async def clear(self) -> None:
        path = await self._get_file()
        await compute(self._delete_file, path)
        logger.debug(f"Cleared {path}")

    async def _get_file(self) -> Path:
        if self.directory is not None:
            return self.directory / f"persist_{self.key}.json"

        try:
            directory = await get_documents_directory()
        except StorageError as e:
            raise StorageError(e.message, self.key, e.path) from e
        return directory / f"persist_{self.key}.json"

    def _read_file(self, path: Path) -> Optional[bytes]:
        try:
            return path.read_bytes()
        except FileNotFoundError:
            return None
        except OSError as e:
            raise StorageError(f"Failed to read state: {e}", self.key, path) from e

    def _write_file(self, path: Path, data: bytes) -> None:
        try:
            path.write_bytes(data)
        except OSError as e:
            raise StorageError(f"Failed to write state: {e}", self.key, path) from e

    def _delete_file(self, path: Path) -> None:
        try:
            path.unlink()
        except FileNotFoundError:
            return
        except OSError as e:
            raise StorageError(f"Failed to delete state: {e}", self.key, path) from e


class SharedPreferencesEngine(StorageEngine):
    """
    Storage engine saving to the shared preference store.

    Only UTF-8 data belongs here, like JSON or base64 text.
    """

    def __init__(self, key: str = "app", preferences: Optional[TinyDB] = None):
        self.key = key
        self._preferences = preferences

    async def load(self) -> Optional[bytes]:
        preferences = await self._get_preferences()
        text = await compute(self._get_string, preferences)
        return await string_to_bytes(text)

    async def save(self, data: Optional[bytes]) -> None:
        if data is None:
            return

        text = await bytes_to_string(data)
        preferences = await self._get_preferences()
        await compute(self._set_string, preferences, text)
        logger.debug(f"Saved preference {self.key}")

    async def clear(self) -> None:
        preferences = await self._get_preferences()
        await compute(self._remove, preferences)
        logger.debug(f"Cleared preference {self.key}")

    async def _get_preferences(self) -> TinyDB:
        if self._preferences is None:
            try:
                self._preferences = await get_preferences()
            except StorageError as e:
                raise StorageError(e.message, self.key, e.path) from e
        return self._preferences

    def _get_string(self, preferences: TinyDB) -> Optional[str]:
        Record = Query()
        try:
            with store_lock(preferences):
                result = preferences.search(Record.key == self.key)
        except (OSError, ValueError) as e:
            raise StorageError(f"Failed to read preference: {e}", self.key) from e
        return result[0]["value"] if result else None

    def _set_string(self, preferences: TinyDB, text: str) -> None:
        Record = Query()
        try:
            with store_lock(preferences):
                preferences.upsert({"key": self.key, "value": text}, Record.key == self.key)
        except (OSError, ValueError) as e:
            raise StorageError(f"Failed to write preference: {e}", self.key) from e

    def _remove(self, preferences: TinyDB) -> None:
        Record = Query()
        try:
            with store_lock(preferences):
                preferences.remove(Record.key == self.key)
        except (OSError, ValueError) as e:
            raise StorageError(f"Failed to remove preference: {e}", self.key) from e


class MemoryEngine(StorageEngine):
    """Storage engine keeping the buffer in process memory."""

    def __init__(self, initial: Optional[bytes] = None):
        self._data = bytes(initial) if initial is not None else None

    async def load(self) -> Optional[bytes]:
        return self._data

    async def save(self, data: Optional[bytes]) -> None:
        if data is None:
            return
        self._data = bytes(data)

    async def clear(self) -> None:
        self._data = None


def get_storage() -> StorageEngine:
    """Get storage engine based on config."""
    return LocationStorage(key=config.PERSIST_KEY, location=config.SAVE_LOCATION)
