"""Worker offload for blocking work."""

import asyncio
from typing import Any, Callable, TypeVar

from config import config

R = TypeVar("R")


async def compute(func: Callable[..., R], *args: Any) -> R:
    """Run func(*args) on the default executor, or inline when offload is off."""
    if not config.OFFLOAD_WORK:
        return func(*args)

    loop = asyncio.get_event_loop()
    return await loop.run_in_executor(None, func, *args)
