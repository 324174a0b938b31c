from pathlib import Path
from typing import Awaitable, Callable

Delay = Callable[[float], Awaitable[None]]


def get_resource_path(relative_path: str) -> Path:
    """
    Get absolute path to a resource shipped inside the package.

    Args:
        relative_path: Relative path from the package root (e.g., "resources/templates")

    Returns:
        Absolute Path object
    """
    # This file is in timesheet/utils.py, so the package root is its parent
    base_path = Path(__file__).parent.absolute()
    return base_path / relative_path


async def simulate_latency(delay: Delay, seconds: float) -> None:
    """Wait through the given delay coroutine; zero or negative seconds skip it"""
    if seconds > 0:
        await delay(seconds)
