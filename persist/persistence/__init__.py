"""
Persistence layer package.

Handles saving and retrieving application state through storage engines.
"""

from .storage import (
    StorageEngine,
    SaveLocation,
    LocationStorage,
    DocumentFileEngine,
    SharedPreferencesEngine,
    MemoryEngine,
    get_storage,
)
from .state import Persistor

__all__ = [
    "StorageEngine",
    "SaveLocation",
    "LocationStorage",
    "DocumentFileEngine",
    "SharedPreferencesEngine",
    "MemoryEngine",
    "get_storage",
    "Persistor",
]
