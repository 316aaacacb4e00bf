"""State persistence: load on startup, save on change."""

import asyncio
import logging
from typing import Generic, Optional, TypeVar

from persist.core.serialization import StateSerializer
from persist.persistence.storage import StorageEngine

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Persistor(Generic[T]):
    """Load and save application state through a serializer and a storage engine."""

    def __init__(self, storage: StorageEngine, serializer: StateSerializer[T]):
        self.storage = storage
        self.serializer = serializer
        self._save_lock = asyncio.Lock()

    async def load(self) -> Optional[T]:
        """Load state. Returns whatever the serializer makes of no data on first run."""
        try:
            data = await self.storage.load()
            state = await self.serializer.decode(data)
        except Exception as e:
            logger.error(f"Failed to load state: {e}")
            raise

        if data is None:
            logger.debug("No saved state found")
        else:
            logger.debug(f"Loaded state ({len(data)} bytes)")
        return state

    async def save(self, state: T) -> None:
        """Save state. Saves through one persistor complete in call order."""
        async with self._save_lock:
            try:
                data = await self.serializer.encode(state)
                await self.storage.save(data)
            except Exception as e:
                logger.error(f"Failed to save state: {e}")
                raise

        if data is not None:
            logger.debug(f"Saved state ({len(data)} bytes)")

    async def clear(self) -> None:
        """Remove saved state."""
        async with self._save_lock:
            try:
                await self.storage.clear()
            except Exception as e:
                logger.error(f"Failed to clear state: {e}")
                raise
        logger.debug("Cleared saved state")
