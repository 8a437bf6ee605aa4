"""Weighted lottery pool with per-ticket removal on draw."""

from __future__ import annotations

import logging
import operator
from typing import (
    Any,
    Callable,
    Generic,
    Iterable,
    Iterator,
    List,
    Mapping,
    Optional,
    Sequence,
    Tuple,
    TypeVar,
    Union,
)

from . import config
from ._version import __version__
from .random_source import DefaultRandomSource, RandomSource
from .results import DrawResult, ModifyOutcome, ModifyReport, ModifyStatus

logger = logging.getLogger(__name__)

T = TypeVar("T")

_MISSING: Any = object()


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


class LotteryPool(Generic[T]):
    """Pool of distinct items, each holding a number of lottery tickets.

    Drawing picks one ticket uniformly, so an item is drawn with probability
    proportional to its remaining count; the drawn ticket is removed.

    Parameters
    ----------
    capacity : Optional[int], default: None
        Upper bound on the total number of tickets. When omitted,
        :data:`lotterybox.config.DEFAULT_CAPACITY` is used.
    eq : Optional[Callable[[T, T], bool]], default: None
        Equality relation used to match items. Defaults to ``==``; pass a
        callable for item types without a useful natural equality.
    rng : Optional[RandomSource], default: None
        Source of random numbers used when :meth:`draw` is called without a
        hint. Defaults to a :class:`DefaultRandomSource` seeded with
        :data:`lotterybox.config.DEFAULT_SEED`.

    Raises
    ------
    TypeError
        If ``capacity`` is not an integer.
    ValueError
        If ``capacity`` is not positive.
    """

    def __init__(
        self,
        capacity: Optional[int] = None,
        *,
        eq: Optional[Callable[[T, T], bool]] = None,
        rng: Optional[RandomSource] = None,
    ) -> None:
        if capacity is None:
            capacity = config.DEFAULT_CAPACITY
        if not _is_int(capacity):
            raise TypeError("capacity must be an integer")
        if capacity <= 0:
            raise ValueError(f"capacity must be positive, got {capacity}")

        self._capacity = capacity
        self._eq: Callable[[T, T], bool] = eq or operator.eq
        self._rng: RandomSource = rng or DefaultRandomSource(config.DEFAULT_SEED)
        # Each entry is a mutable [item, count] pair with count > 0.
        self._entries: List[List[Any]] = []
        self._total_count = 0

    def __repr__(self) -> str:
        return (
            f"<LotteryPool(items={len(self._entries)}, "
            f"total_count={self._total_count}, capacity={self._capacity})>"
        )

    # -------- observers --------
    @property
    def total_count(self) -> int:
        return self._total_count

    @property
    def capacity(self) -> int:
        return self._capacity

    def entries(self) -> List[Tuple[T, int]]:
        """Return ``(item, count)`` pairs in sequence order."""
        return [(item, count) for item, count in self._entries]

    def __iter__(self) -> Iterator[Tuple[T, int]]:
        return iter(self.entries())

    def __len__(self) -> int:
        return len(self._entries)

    def __bool__(self) -> bool:
        return self._total_count > 0

    def __contains__(self, item: object) -> bool:
        return self._index_of(item) is not None  # type: ignore[arg-type]

    def get_count(self, item: T = _MISSING) -> int:
        """Return the ticket count of ``item``, or the pool total.

        Parameters
        ----------
        item : T, optional
            Item to look up. When omitted the total ticket count is returned.
            ``None`` is a regular item value.

        Returns
        -------
        int
            The item's current count, ``0`` if it is not in the pool.
        """
        if item is _MISSING:
            return self._total_count
        index = self._index_of(item)
        return 0 if index is None else self._entries[index][1]

    def dump(self) -> str:
        """Return a human-readable listing of the pool.

        The listing contains the pool version, total ticket count, capacity
        and one line per entry with its 1-based index and count. The text is
        also logged at DEBUG level.
        """
        lines = [
            f"LotteryPool version {__version__}",
            f"Current total lottery count {self._total_count}.",
            f"Lottery pool capacity {self._capacity}",
        ]
        for index, (_, count) in enumerate(self._entries, start=1):
            lines.append(f"Lottery index {index}, count {count}.")
        text = "\n".join(lines)
        logger.debug(text)
        return text

    # -------- mutators --------
    def draw(self, random_hint: Optional[int] = None) -> DrawResult[T]:
        """Draw one ticket and remove it from the pool.

        Parameters
        ----------
        random_hint : Optional[int], default: None
            Non-negative integer deciding which ticket is drawn. When omitted
            the pool's random source is used. The draw key is
            ``random_hint % total_count``; entries occupy consecutive
            half-open key ranges in sequence order.

        Returns
        -------
        DrawResult[T]
            Successful result carrying the drawn item and key, or a failed
            result when the pool is empty or ``random_hint`` is negative.
            The pool is not modified on failure.

        Raises
        ------
        TypeError
            If ``random_hint`` is neither ``None`` nor an integer.
        """
        if random_hint is not None and not _is_int(random_hint):
            raise TypeError("random_hint must be an integer or None")
        if self._total_count <= 0:
            logger.debug("Draw from empty pool rejected")
            return DrawResult.failed("empty")
        if random_hint is not None and random_hint < 0:
            logger.debug(f"Draw with negative hint {random_hint} rejected")
            return DrawResult.failed("negative_hint")

        if random_hint is None:
            random_hint = self._rng.randbelow(self._total_count)
        key = random_hint % self._total_count
        index = self._locate(key)
        item = self._entries[index][0]

        self._entries[index][1] -= 1
        if self._entries[index][1] == 0:
            del self._entries[index]
        self._total_count -= 1
        logger.debug(f"Drew entry {index + 1} with key {key}")
        return DrawResult(item=item, success=True, key=key)

    def modify(
        self,
        items: Optional[Sequence[T]],
        counts: Optional[Sequence[int]],
    ) -> ModifyReport[T]:
        """Deposit or withdraw tickets for several items.

        ``counts[i]`` is added to the count of ``items[i]``: positive values
        deposit tickets, negative values withdraw them. Elements are applied
        independently in order; an element that cannot be applied is skipped
        and the rest are still processed.

        Parameters
        ----------
        items : Optional[Sequence[T]]
            Items to adjust.
        counts : Optional[Sequence[int]]
            Ticket deltas, one per item.

        Returns
        -------
        ModifyReport[T]
            Report with one outcome per element. ``valid`` is ``False`` and
            nothing is applied when either sequence is missing, empty, or the
            lengths differ.

        Raises
        ------
        TypeError
            If any count is not an integer. Raised before anything is applied.
        """
        if items is None or counts is None:
            return ModifyReport(valid=False)
        if len(items) == 0 or len(items) != len(counts):
            logger.debug(
                f"Bulk modify ignored: {len(items)} items, {len(counts)} counts"
            )
            return ModifyReport(valid=False)
        return self._apply(list(zip(items, counts)))

    def modify_mapping(
        self, deltas: Union[Mapping[T, int], Iterable[Tuple[T, int]]]
    ) -> ModifyReport[T]:
        """Apply ``item -> delta`` adjustments in the collection's iteration order.

        Accepts a mapping or any iterable of ``(item, delta)`` pairs, the
        latter being useful for unhashable items. Per-element behaviour is
        the same as :meth:`modify`; an empty collection is a valid no-op.
        """
        pairs = list(deltas.items()) if isinstance(deltas, Mapping) else list(deltas)
        return self._apply(pairs)

    def clear(self) -> None:
        """Remove every entry from the pool."""
        self._entries.clear()
        self._total_count = 0

    # -------- internals --------
    def _index_of(self, item: T) -> Optional[int]:
        for index, (candidate, _) in enumerate(self._entries):
            if self._eq(item, candidate):
                return index
        return None

    def _locate(self, key: int) -> int:
        """Return the index of the entry whose key range contains ``key``."""
        top = 0
        for index, (_, count) in enumerate(self._entries):
            bottom = top
            top += count
            if bottom <= key < top:
                return index
        raise RuntimeError(
            f"Draw key {key} outside pool range (total {self._total_count})"
        )

    def _apply(self, pairs: List[Tuple[T, int]]) -> ModifyReport[T]:
        for _, delta in pairs:
            if not _is_int(delta):
                raise TypeError(f"Ticket counts must be integers, got {delta!r}")

        outcomes = []
        for item, delta in pairs:
            status = self._apply_one(item, delta)
            if not status.accepted:
                logger.debug(f"Skipped delta {delta}: {status.value}")
            outcomes.append(ModifyOutcome(item=item, delta=delta, status=status))
        return ModifyReport(valid=True, outcomes=tuple(outcomes))

    def _apply_one(self, item: T, delta: int) -> ModifyStatus:
        if delta == 0:
            return ModifyStatus.SKIPPED_ZERO
        if delta > 0 and self._capacity - self._total_count < delta:
            return ModifyStatus.SKIPPED_CAPACITY

        index = self._index_of(item)
        if index is not None:
            new_count = self._entries[index][1] + delta
            if new_count < 0:
                return ModifyStatus.REJECTED_INSUFFICIENT
            if new_count == 0:
                del self._entries[index]
                status = ModifyStatus.REMOVED
            else:
                self._entries[index][1] = new_count
                status = ModifyStatus.APPLIED
        elif delta < 0:
            return ModifyStatus.REJECTED_MISSING
        else:
            try:
                self._append_entry(item, delta)
            except MemoryError:
                logger.exception("Failed to allocate a new lottery pool entry")
                return ModifyStatus.FAILED_ALLOCATION
            status = ModifyStatus.INSERTED

        self._total_count += delta
        return status

    def _append_entry(self, item: T, count: int) -> None:
        self._entries.append([item, count])


__all__ = ["LotteryPool"]
