"""Random sources used by :class:`~lotterybox.pool.LotteryPool` draws."""

from __future__ import annotations

import random
from typing import Optional, Protocol


class RandomSource(Protocol):
    def randbelow(self, n: int) -> int:
        """Return a uniformly distributed integer in ``[0, n)``."""
        ...


class DefaultRandomSource:
    """Random source backed by :class:`random.Random`.

    Parameters
    ----------
    seed : Optional[int], default: None
        Seed for a new generator; useful for deterministic tests. Ignored
        when ``rng`` is supplied.
    rng : Optional[random.Random], default: None
        Existing generator to draw from. Passing a shared instance makes
        several pools consume the same random stream.
    """

    def __init__(
        self, seed: Optional[int] = None, *, rng: Optional[random.Random] = None
    ) -> None:
        self._rng = rng or random.Random(seed)

    def randbelow(self, n: int) -> int:
        if n <= 0:
            raise ValueError(f"Upper bound must be positive, got {n}")
        return self._rng.randrange(n)


__all__ = ["DefaultRandomSource", "RandomSource"]
