"""
Core package.

Contains the serializers that turn application state into bytes and back.
"""

from .serialization import (
    StateSerializer,
    JsonSerializer,
    StringSerializer,
    RawSerializer,
    string_to_bytes,
    bytes_to_string,
)

__all__ = [
    "StateSerializer",
    "JsonSerializer",
    "StringSerializer",
    "RawSerializer",
    "string_to_bytes",
    "bytes_to_string",
]
