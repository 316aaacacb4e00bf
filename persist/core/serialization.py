"""Serializers for turning state into bytes and back."""

import dataclasses
import json
from abc import ABC, abstractmethod
from typing import Any, Callable, Generic, Optional, TypeVar

from persist.errors import DecodeError, EncodeError, ParseError
from persist.helpers.worker import compute

T = TypeVar("T")


class StateSerializer(ABC, Generic[T]):
    """Serializer interface for turning state (T) into bytes, and back."""

    @abstractmethod
    async def encode(self, state: T) -> Optional[bytes]:
        """Encode state. Absent state encodes to None."""
        pass

    @abstractmethod
    async def decode(self, data: Optional[bytes]) -> Optional[T]:
        """Decode bytes. None means nothing was persisted."""
        pass


class JsonSerializer(StateSerializer[T]):
    """
    Serializer for application state stored as JSON.

    The decoder turns the parsed JSON (None when nothing was persisted) into
    state. It may raise on shapes it does not recognize; those errors reach
    the caller unchanged.
    """

    def __init__(self, decoder: Callable[[Any], Optional[T]]):
        self.decoder = decoder

    async def decode(self, data: Optional[bytes]) -> Optional[T]:
        if data is None:
            return self.decoder(None)

        text = await bytes_to_string(data)
        return self.decoder(await compute(_json_decode, text))

    async def encode(self, state: T) -> Optional[bytes]:
        if state is None:
            return None

        return await string_to_bytes(await compute(_json_encode, state))


class StringSerializer(StateSerializer[Optional[str]]):
    """Serializer for a str state."""

    async def decode(self, data: Optional[bytes]) -> Optional[str]:
        return await bytes_to_string(data)

    async def encode(self, state: Optional[str]) -> Optional[bytes]:
        return await string_to_bytes(state)


class RawSerializer(StateSerializer[Optional[bytes]]):
    """Serializer for a bytes state, basically pass-through."""

    async def decode(self, data: Optional[bytes]) -> Optional[bytes]:
        return data

    async def encode(self, state: Optional[bytes]) -> Optional[bytes]:
        return state


# String helpers

async def string_to_bytes(data: Optional[str]) -> Optional[bytes]:
    if data is None:
        return None

    return await compute(_utf8_encode, data)


async def bytes_to_string(data: Optional[bytes]) -> Optional[str]:
    if data is None:
        return None

    return await compute(_utf8_decode, data)


def _utf8_encode(data: str) -> bytes:
    try:
        return data.encode("utf-8")
    except UnicodeEncodeError as e:
        raise EncodeError(f"Text is not encodable as UTF-8: {e.reason}") from e


def _utf8_decode(data: bytes) -> str:
    try:
        return bytes(data).decode("utf-8")
    except UnicodeDecodeError as e:
        raise DecodeError(f"Malformed UTF-8 at byte {e.start}: {e.reason}") from e


def _to_json(value: Any) -> Any:
    """Fallback for values json cannot encode natively."""
    to_json = getattr(value, "to_json", None)
    if callable(to_json):
        return to_json()
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return dataclasses.asdict(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def _json_encode(state: Any) -> str:
    try:
        return json.dumps(
            state,
            default=_to_json,
            separators=(",", ":"),
            ensure_ascii=False,
            allow_nan=False,
        )
    except (TypeError, ValueError) as e:
        raise EncodeError(f"State is not JSON serializable: {e}") from e


def _json_decode(text: str) -> Any:
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise ParseError(f"Malformed JSON: {e.msg}", e.lineno, e.colno) from e
