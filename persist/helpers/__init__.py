"""
Helpers package.

Provides the worker offload primitive and the platform collaborators used to
locate the data directory and the preference store.
"""

from .worker import compute
from .platform import get_documents_directory, get_preferences, close_preferences, store_lock

__all__ = [
    "compute",
    "get_documents_directory",
    "get_preferences",
    "close_preferences",
    "store_lock",
]
