"""Main application entry point."""

import argparse
import asyncio
import logging
import sys
from dataclasses import dataclass
from typing import Any, List, Optional

from config import config
from persist.core.serialization import JsonSerializer
from persist.errors import PersistError
from persist.helpers.platform import close_preferences
from persist.persistence.state import Persistor
from persist.persistence.storage import get_storage

logger = logging.getLogger(__name__)


@dataclass
class CounterState:
    """Application state persisted between runs."""
    count: int = 0

    def to_json(self) -> dict:
        return {"count": self.count}

    @classmethod
    def from_json(cls, json: Any) -> "CounterState":
        if json is None:
            return cls()
        return cls(count=int(json.get("count", 0)))


def setup_logging() -> None:
    """Configure logging from config."""
    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if config.LOG_FILE:
        handlers.append(logging.FileHandler(config.LOG_FILE))

    logging.basicConfig(
        level=getattr(logging, config.LOG_LEVEL),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=handlers,
    )


async def run(command: str) -> CounterState:
    """Load the counter, apply command, persist the result."""
    persistor: Persistor[CounterState] = Persistor(
        storage=get_storage(),
        serializer=JsonSerializer(CounterState.from_json),
    )

    try:
        state = await persistor.load() or CounterState()

        if command == "increment":
            state = CounterState(count=state.count + 1)
            await persistor.save(state)
        elif command == "reset":
            await persistor.clear()
            state = CounterState()
    finally:
        close_preferences()

    logger.info(f"Count is {state.count}")
    return state


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Persisted counter")
    parser.add_argument(
        "command",
        nargs="?",
        default="show",
        choices=["show", "increment", "reset"],
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)

    try:
        config.validate()
    except PersistError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 2

    setup_logging()

    try:
        state = asyncio.run(run(args.command))
    except PersistError as e:
        logger.error(f"Fatal error: {e}")
        return 1

    print(state.count)
    return 0


if __name__ == "__main__":
    sys.exit(main())
