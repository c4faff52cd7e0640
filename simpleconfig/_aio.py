"""Run blocking work off the event loop."""

from __future__ import annotations

import asyncio
import functools
from typing import Any, Callable, TypeVar

R = TypeVar("R")


async def run_blocking(func: Callable[..., R], *args: Any) -> R:
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(None, functools.partial(func, *args))
