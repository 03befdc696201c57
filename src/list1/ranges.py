"""
Index ranges and the coverage predicate used by List1.splice.

A range is described by a start bound and an end bound, each of which is
inclusive, exclusive or unbounded. ``slice`` and ``range`` objects are
converted into this form before the predicate is evaluated.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple, Union


class BoundKind(Enum):
    INCLUDED = "included"
    EXCLUDED = "excluded"
    UNBOUNDED = "unbounded"


@dataclass(frozen=True)
class Bound:
    """One end of an index range."""
    kind: BoundKind
    index: Optional[int] = None

    def __post_init__(self) -> None:
        if self.kind is BoundKind.UNBOUNDED:
            if self.index is not None:
                raise ValueError("An unbounded bound does not take an index")
        elif not isinstance(self.index, int):
            raise TypeError(f"{self.kind.value} bound needs an integer index, got {self.index!r}")

    @classmethod
    def included(cls, index: int) -> Bound:
        return cls(BoundKind.INCLUDED, index)

    @classmethod
    def excluded(cls, index: int) -> Bound:
        return cls(BoundKind.EXCLUDED, index)

    @classmethod
    def unbounded(cls) -> Bound:
        return cls(BoundKind.UNBOUNDED)


@dataclass(frozen=True)
class IndexRange:
    """
    A contiguous range of indices given by explicit bounds.

    Indices are absolute: negative values are rejected by ``resolve`` instead
    of counting from the end. Use a ``slice`` for Python's relative semantics.
    """
    start: Bound
    end: Bound

    @classmethod
    def full(cls) -> IndexRange:
        """``..``"""
        return cls(Bound.unbounded(), Bound.unbounded())

    @classmethod
    def half_open(cls, start: int, stop: int) -> IndexRange:
        """``start..stop``"""
        return cls(Bound.included(start), Bound.excluded(stop))

    @classmethod
    def closed(cls, first: int, last: int) -> IndexRange:
        """``first..=last``"""
        return cls(Bound.included(first), Bound.included(last))

    @classmethod
    def starting_at(cls, start: int) -> IndexRange:
        """``start..``"""
        return cls(Bound.included(start), Bound.unbounded())

    @classmethod
    def up_to(cls, stop: int) -> IndexRange:
        """``..stop``"""
        return cls(Bound.unbounded(), Bound.excluded(stop))

    @classmethod
    def up_to_inclusive(cls, last: int) -> IndexRange:
        """``..=last``"""
        return cls(Bound.unbounded(), Bound.included(last))

    def resolve(self, length: int) -> Tuple[int, int]:
        """
        Turn the bounds into a concrete half-open ``(start, stop)`` pair.

        Args:
            length: Length of the sequence the range is applied to

        Returns:
            Tuple of start (inclusive) and stop (exclusive) indices

        Raises:
            IndexError: If the range does not fit into ``0..length``
        """
        if self.start.kind is BoundKind.INCLUDED:
            start = self.start.index
        elif self.start.kind is BoundKind.EXCLUDED:
            start = self.start.index + 1
        else:
            start = 0

        if self.end.kind is BoundKind.INCLUDED:
            stop = self.end.index + 1
        elif self.end.kind is BoundKind.EXCLUDED:
            stop = self.end.index
        else:
            stop = length

        if start < 0:
            raise IndexError(f"range start index {start} is negative")
        if start > stop:
            raise IndexError(f"range starts at {start} but ends at {stop}")
        if stop > length:
            raise IndexError(f"range end index {stop} out of range for length {length}")
        return start, stop


RangeSpec = Union[IndexRange, slice, range]


def as_index_range(rng: RangeSpec, length: int) -> IndexRange:
    """
    Normalize a slice, range or IndexRange into an IndexRange.

    Slices follow Python semantics for the given length: negative indices
    count from the end, out-of-range values clamp and a reversed slice is
    empty. ``range`` objects are taken as absolute bounds.

    Raises:
        ValueError: If the step is anything other than 1
        TypeError: If ``rng`` is not a supported range type
    """
    if isinstance(rng, IndexRange):
        return rng

    if isinstance(rng, slice):
        if rng.step not in (None, 1):
            raise ValueError(f"splice needs a contiguous range, got step {rng.step}")
        start, stop, _ = rng.indices(length)
        return IndexRange.half_open(start, max(start, stop))

    if isinstance(rng, range):
        if rng.step != 1:
            raise ValueError(f"splice needs a contiguous range, got step {rng.step}")
        return IndexRange.half_open(rng.start, rng.stop)

    raise TypeError(f"expected a slice, range or IndexRange, got {type(rng).__name__}")


def range_covers(rng: IndexRange, length: int) -> bool:
    """
    Check whether ``rng`` addresses every index of a sequence of ``length``.

    Only called for List1 contents, so ``length`` is at least 1.
    """
    return covers_start(rng.start) and covers_end(rng.end, length)


def covers_start(bound: Bound) -> bool:
    # excluded(-1) starts at 0 just like included(0)
    if bound.kind is BoundKind.INCLUDED:
        return bound.index <= 0
    if bound.kind is BoundKind.EXCLUDED:
        return bound.index < 0
    return True


def covers_end(bound: Bound, length: int) -> bool:
    if bound.kind is BoundKind.INCLUDED:
        return bound.index >= length - 1
    if bound.kind is BoundKind.EXCLUDED:
        return bound.index >= length
    return True
