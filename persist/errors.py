"""Exceptions raised by the persistence layer."""

from typing import Any, Optional


class PersistError(Exception):
    """Base class for all persistence errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)

    def _context(self) -> dict:
        return {}

    def __str__(self) -> str:
        context = {name: value for name, value in self._context().items() if value is not None}
        if not context:
            return self.message
        details = ", ".join(f"{name}={value}" for name, value in context.items())
        return f"{self.message} ({details})"


class DecodeError(PersistError):
    """Bytes could not be decoded as UTF-8 text."""


class ParseError(PersistError):
    """Text could not be parsed as JSON."""

    def __init__(self, message: str, line: Optional[int] = None, column: Optional[int] = None):
        super().__init__(message)
        self.line = line
        self.column = column

    def _context(self) -> dict:
        return {"line": self.line, "column": self.column}


class EncodeError(PersistError):
    """A state value has no JSON representation."""


class StorageError(PersistError):
    """Reading or writing the storage medium failed."""

    def __init__(self, message: str, key: Optional[str] = None, path: Optional[Any] = None):
        super().__init__(message)
        self.key = key
        self.path = path

    def _context(self) -> dict:
        return {"key": self.key, "path": self.path}


class ConfigurationError(PersistError):
    """A setting or storage location is not recognized."""

    def __init__(self, message: str, setting: Optional[str] = None, value: Optional[Any] = None):
        super().__init__(message)
        self.setting = setting
        self.value = value

    def _context(self) -> dict:
        return {"setting": self.setting, "value": self.value}
