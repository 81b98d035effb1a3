"""Console utilities for Todos CLI."""

from functools import lru_cache

from rich.console import Console


@lru_cache(maxsize=1)
def get_console() -> Console:
    """Get a Rich Console instance for regular output."""
    return Console(highlight=False)


@lru_cache(maxsize=1)
def get_error_console() -> Console:
    """Get a Rich Console that writes to stderr, for failures the user must see."""
    return Console(stderr=True, highlight=False)
