"""Lazy replace-range adapter returned by List1.splice."""

from __future__ import annotations

from typing import Any, Generic, Iterable, Iterator, List, TypeVar

from .logging import get_logger

logger = get_logger(__name__)

T = TypeVar("T")

_NOTHING: Any = object()
_NO_DEFAULT: Any = object()


class Peekable(Generic[T]):
    """Iterator wrapper with one element of look-ahead."""

    def __init__(self, iterable: Iterable[T]) -> None:
        self._iterator = iter(iterable)
        self._peeked: Any = _NOTHING

    def __iter__(self) -> Peekable[T]:
        return self

    def __next__(self) -> T:
        if self._peeked is not _NOTHING:
            item = self._peeked
            self._peeked = _NOTHING
            return item
        return next(self._iterator)

    def peek(self, default: Any = _NO_DEFAULT) -> Any:
        """
        Return the next element without consuming it.

        Pulls at most one element from the wrapped iterator. Raises
        StopIteration when it is exhausted and no default is given.
        """
        if self._peeked is _NOTHING:
            try:
                self._peeked = next(self._iterator)
            except StopIteration:
                if default is _NO_DEFAULT:
                    raise
                return default
        return self._peeked

    def is_exhausted(self) -> bool:
        return self.peek(_NOTHING) is _NOTHING


class Splice(Generic[T]):
    """
    Removed elements of a pending splice.

    Iterating yields the elements of the addressed range, from the front with
    ``next()`` and from the back with ``next_back()`` or ``reversed()``. The
    backing list is left untouched until the edit is committed with a single
    slice assignment, which happens once when the removed elements run out,
    on ``close()``, when a ``with`` block exits or when the object is
    collected. Committing early discards the elements not yet yielded and
    still inserts the whole replacement.
    """

    def __init__(self, items: List[T], start: int, stop: int, replacement: Peekable[T]) -> None:
        self._items = items
        self._start = start
        self._stop = stop
        self._front = start
        self._back = stop
        self._replacement = replacement
        self._expected_len = len(items)
        self._committed = False

    def __iter__(self) -> Splice[T]:
        return self

    def __next__(self) -> T:
        if self._front >= self._back:
            self.close()
            raise StopIteration
        self._check_unchanged()
        item = self._items[self._front]
        self._front += 1
        return item

    def next_back(self) -> T:
        """Yield the last removed element not seen yet."""
        if self._front >= self._back:
            self.close()
            raise StopIteration
        self._check_unchanged()
        self._back -= 1
        return self._items[self._back]

    def __reversed__(self) -> Iterator[T]:
        while True:
            try:
                yield self.next_back()
            except StopIteration:
                return

    def __len__(self) -> int:
        return self._back - self._front

    @property
    def committed(self) -> bool:
        return self._committed

    def close(self) -> None:
        """Finish the edit, replacing the addressed range."""
        if self._committed:
            return
        self._check_unchanged()
        self._committed = True
        removed = self._stop - self._start
        self._front = self._back
        self._items[self._start:self._stop] = self._replacement
        logger.debug(
            f"Spliced range {self._start}..{self._stop}: removed {removed}, "
            f"length now {len(self._items)}"
        )

    def __enter__(self) -> Splice[T]:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def __del__(self) -> None:
        if getattr(self, "_committed", True):
            return
        try:
            self.close()
        except RuntimeError as exc:
            logger.warning(f"Abandoned splice could not be committed: {exc}")

    def __repr__(self) -> str:
        state = "committed" if self._committed else f"{len(self)} pending"
        return f"Splice({self._start}..{self._stop}, {state})"

    def _check_unchanged(self) -> None:
        if len(self._items) != self._expected_len:
            raise RuntimeError("List1 changed size during splice")
