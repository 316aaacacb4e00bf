import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

SAVE_LOCATIONS = ("document_file", "shared_preferences")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Config:
    # Persistence settings
    PERSIST_KEY = os.getenv("PERSIST_KEY", "app")
    SAVE_LOCATION = os.getenv("SAVE_LOCATION", "document_file")

    # Application-private storage
    DATA_DIR = Path(os.getenv("DATA_DIR", "data"))
    PREFERENCES_FILE = os.getenv("PREFERENCES_FILE", "preferences.json")

    # Run UTF-8/JSON conversion and file I/O on the worker pool
    OFFLOAD_WORK = os.getenv("OFFLOAD_WORK", "true").lower() in ("1", "true", "yes")

    # Logging
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
    LOG_FILE = os.getenv("LOG_FILE", "")

    def validate(self) -> None:
        """Fail fast on settings that cannot work."""
        # Imported here to avoid circular imports
        from persist.errors import ConfigurationError

        if not self.PERSIST_KEY:
            raise ConfigurationError("Persist key must not be empty", "PERSIST_KEY", self.PERSIST_KEY)
        if self.SAVE_LOCATION not in SAVE_LOCATIONS:
            raise ConfigurationError("Unknown save location", "SAVE_LOCATION", self.SAVE_LOCATION)
        if self.LOG_LEVEL not in LOG_LEVELS:
            raise ConfigurationError("Unknown log level", "LOG_LEVEL", self.LOG_LEVEL)


config = Config()
