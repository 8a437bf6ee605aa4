"""Weighted lottery pools with ticket removal on draw."""

from ._version import __version__
from .pool import LotteryPool
from .random_source import DefaultRandomSource, RandomSource
from .results import DrawResult, ModifyOutcome, ModifyReport, ModifyStatus

__all__ = [
    "DefaultRandomSource",
    "DrawResult",
    "LotteryPool",
    "ModifyOutcome",
    "ModifyReport",
    "ModifyStatus",
    "RandomSource",
    "__version__",
]
