"""Value objects returned by lottery pool operations."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any, Generic, Iterator, Optional, Tuple, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class DrawResult(Generic[T]):
    """Outcome of :meth:`LotteryPool.draw`.

    Attributes
    ----------
    item : Optional[T]
        The drawn item, or ``None`` when the draw failed.
    success : bool
        ``True`` when a ticket was drawn and removed from the pool.
    key : Optional[int]
        Draw key in ``[0, total_count)`` that selected the item.
    reason : Optional[str]
        Short failure description (``"empty"`` or ``"negative_hint"``).

    Notes
    -----
    The result unpacks as ``item, success = pool.draw()`` and is truthy only
    when the draw succeeded.
    """

    item: Optional[T]
    success: bool
    key: Optional[int] = None
    reason: Optional[str] = None

    def __iter__(self) -> Iterator[Any]:
        return iter((self.item, self.success))

    def __bool__(self) -> bool:
        return self.success

    @classmethod
    def failed(cls, reason: str) -> "DrawResult[Any]":
        return cls(item=None, success=False, reason=reason)


class ModifyStatus(str, enum.Enum):
    """What happened to one element of a bulk modification."""

    APPLIED = "applied"
    INSERTED = "inserted"
    REMOVED = "removed"
    SKIPPED_ZERO = "skipped_zero"
    SKIPPED_CAPACITY = "skipped_capacity"
    REJECTED_INSUFFICIENT = "rejected_insufficient"
    REJECTED_MISSING = "rejected_missing"
    FAILED_ALLOCATION = "failed_allocation"

    @property
    def accepted(self) -> bool:
        return self in _ACCEPTED


_ACCEPTED = frozenset(
    {ModifyStatus.APPLIED, ModifyStatus.INSERTED, ModifyStatus.REMOVED}
)


@dataclass(frozen=True)
class ModifyOutcome(Generic[T]):
    """Per-element result of a bulk modification."""

    item: T
    delta: int
    status: ModifyStatus

    @property
    def accepted(self) -> bool:
        return self.status.accepted


@dataclass(frozen=True)
class ModifyReport(Generic[T]):
    """Summary of a :meth:`LotteryPool.modify` call.

    Attributes
    ----------
    valid : bool
        ``False`` when the input as a whole was rejected (missing, empty or
        mismatched sequences); no element was considered in that case.
    outcomes : tuple[ModifyOutcome, ...]
        One outcome per processed element, in input order.
    """

    valid: bool
    outcomes: Tuple[ModifyOutcome[T], ...] = field(default_factory=tuple)

    @property
    def applied(self) -> Tuple[ModifyOutcome[T], ...]:
        return tuple(o for o in self.outcomes if o.accepted)

    @property
    def skipped(self) -> Tuple[ModifyOutcome[T], ...]:
        return tuple(o for o in self.outcomes if not o.accepted)

    @property
    def net_delta(self) -> int:
        """Total change applied to the pool's ticket count."""
        return sum(o.delta for o in self.applied)

    def __bool__(self) -> bool:
        return self.valid and bool(self.applied)


__all__ = ["DrawResult", "ModifyOutcome", "ModifyReport", "ModifyStatus"]
