"""Environment-driven defaults for lottery pools."""

from __future__ import annotations

import os
from typing import Optional

from dotenv import load_dotenv

# Maximum value of a signed 32-bit ticket count.
INT32_MAX = 2**31 - 1


def parse_capacity(raw: Optional[str], default: int = INT32_MAX) -> int:
    """Parse a capacity value read from the environment.

    Parameters
    ----------
    raw : Optional[str]
        Raw string value, typically from ``os.getenv``. ``None`` or a blank
        string falls back to ``default``.
    default : int, default: INT32_MAX
        Capacity used when ``raw`` is missing.

    Returns
    -------
    int
        A strictly positive capacity.

    Raises
    ------
    ValueError
        If ``raw`` is not an integer or is not positive.
    """
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw.strip())
    except ValueError as exc:
        raise ValueError(f"Capacity must be an integer, got {raw!r}") from exc
    if value <= 0:
        raise ValueError(f"Capacity must be positive, got {value}")
    return value


def parse_seed(raw: Optional[str]) -> Optional[int]:
    """Parse an optional integer seed; blank or missing values mean no seed."""
    if raw is None or not raw.strip():
        return None
    try:
        return int(raw.strip())
    except ValueError as exc:
        raise ValueError(f"Seed must be an integer, got {raw!r}") from exc


# Get pool defaults
load_dotenv()
DEFAULT_CAPACITY = parse_capacity(os.getenv("LOTTERYBOX_CAPACITY"))
DEFAULT_SEED = parse_seed(os.getenv("LOTTERYBOX_SEED"))


__all__ = [
    "DEFAULT_CAPACITY",
    "DEFAULT_SEED",
    "INT32_MAX",
    "parse_capacity",
    "parse_seed",
]
