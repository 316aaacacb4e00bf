"""
Main persist package.

Pluggable persistence for application state: serializers turn state into
bytes, storage engines keep those bytes across restarts.
"""

from .core import JsonSerializer, RawSerializer, StateSerializer, StringSerializer
from .errors import (
    ConfigurationError,
    DecodeError,
    EncodeError,
    ParseError,
    PersistError,
    StorageError,
)
from .persistence import (
    DocumentFileEngine,
    LocationStorage,
    MemoryEngine,
    Persistor,
    SaveLocation,
    SharedPreferencesEngine,
    StorageEngine,
    get_storage,
)

__version__ = "1.0.0"

__all__ = [
    "StateSerializer",
    "JsonSerializer",
    "StringSerializer",
    "RawSerializer",
    "StorageEngine",
    "SaveLocation",
    "LocationStorage",
    "DocumentFileEngine",
    "SharedPreferencesEngine",
    "MemoryEngine",
    "get_storage",
    "Persistor",
    "PersistError",
    "DecodeError",
    "ParseError",
    "EncodeError",
    "StorageError",
    "ConfigurationError",
]
