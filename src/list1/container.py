"""
The List1 container: an ordered sequence that always holds at least one element.

Read-only and growing operations are forwarded to a private backing list.
Every operation that could shrink the content to nothing is exposed in a
checked form that raises EmptyError and leaves the content untouched when
the result would be empty.
"""

from __future__ import annotations

import copy
from collections.abc import Sequence
from typing import Any, Callable, Generic, Iterable, Iterator, List, Optional, Tuple, TypeVar, Union, overload

from .errors import EmptyError
from .logging import get_logger
from .ranges import RangeSpec, as_index_range, range_covers
from .splice import Peekable, Splice

logger = get_logger(__name__)

T = TypeVar("T")
N = TypeVar("N")
K = TypeVar("K")


def _refuse(operation: str, length: int) -> EmptyError:
    logger.debug(f"Refused {operation} on List1 of length {length}: result would be empty")
    return EmptyError()


class List1(Sequence, Generic[T]):
    """
    A list wrapper that can never be empty.

    ``List1(first, *rest)`` builds a container from one or more values; a
    call without values is rejected by the signature itself. ``first`` and
    ``last`` therefore never need an emptiness check.
    """

    __slots__ = ("_items",)

    def __init__(self, first: T, *rest: T) -> None:
        self._items: List[T] = [first, *rest]

    @classmethod
    def _adopt(cls, items: List[T]) -> List1[T]:
        # caller guarantees ``items`` is a fresh, non-empty list
        instance = cls.__new__(cls)
        instance._items = items
        return instance

    @classmethod
    def try_from_list(cls, items: Iterable[T]) -> List1[T]:
        """
        Build a List1 from a possibly empty iterable.

        The elements are copied into a new backing list, so later changes to
        ``items`` do not affect the container.

        Raises:
            EmptyError: If ``items`` has no elements
        """
        backing = list(items)
        if not backing:
            raise _refuse("construction", 0)
        return cls._adopt(backing)

    # -- read access -----------------------------------------------------

    @property
    def first(self) -> T:
        return self._items[0]

    @first.setter
    def first(self, value: T) -> None:
        self._items[0] = value

    @property
    def last(self) -> T:
        return self._items[-1]

    @last.setter
    def last(self, value: T) -> None:
        self._items[-1] = value

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __reversed__(self) -> Iterator[T]:
        return reversed(self._items)

    def __contains__(self, value: object) -> bool:
        return value in self._items

    def index(self, value: Any, start: int = 0, stop: Optional[int] = None) -> int:
        if stop is None:
            return self._items.index(value, start)
        return self._items.index(value, start, stop)

    def count(self, value: Any) -> int:
        return self._items.count(value)

    @overload
    def __getitem__(self, index: int) -> T: ...

    @overload
    def __getitem__(self, index: slice) -> List[T]: ...

    def __getitem__(self, index: Union[int, slice]) -> Union[T, List[T]]:
        # A slice may be empty, so it comes back as a plain list.
        return self._items[index]

    def __setitem__(self, index: Union[int, slice], value: Any) -> None:
        if isinstance(index, slice):
            values = list(value)
            removed = len(range(*index.indices(len(self._items))))
            if len(self._items) - removed + len(values) < 1:
                raise _refuse("slice assignment", len(self._items))
            self._items[index] = values
        else:
            self._items[index] = value

    def __delitem__(self, index: Union[int, slice]) -> None:
        if isinstance(index, slice):
            removed = len(range(*index.indices(len(self._items))))
            if removed >= len(self._items):
                raise _refuse("slice deletion", len(self._items))
        elif len(self._items) <= 1:
            raise _refuse("item deletion", len(self._items))
        del self._items[index]

    # -- comparison ------------------------------------------------------

    def _comparable(self, other: object) -> Optional[List[Any]]:
        if isinstance(other, List1):
            return other._items
        if isinstance(other, list):
            return other
        if isinstance(other, tuple):
            return list(other)
        return None

    def __eq__(self, other: object) -> bool:
        items = self._comparable(other)
        if items is None:
            return NotImplemented
        return self._items == items

    def __lt__(self, other: object) -> bool:
        items = self._comparable(other)
        if items is None:
            return NotImplemented
        return self._items < items

    def __le__(self, other: object) -> bool:
        items = self._comparable(other)
        if items is None:
            return NotImplemented
        return self._items <= items

    def __gt__(self, other: object) -> bool:
        items = self._comparable(other)
        if items is None:
            return NotImplemented
        return self._items > items

    def __ge__(self, other: object) -> bool:
        items = self._comparable(other)
        if items is None:
            return NotImplemented
        return self._items >= items

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r})"

    def __reduce__(self) -> Tuple[Any, ...]:
        return (type(self), tuple(self._items))

    # -- growth and length-preserving edits ------------------------------

    def append(self, value: T) -> None:
        self._items.append(value)

    def insert(self, index: int, value: T) -> None:
        self._items.insert(index, value)

    def extend(self, values: Iterable[T]) -> None:
        if isinstance(values, List1):
            values = values._items
        self._items.extend(values)

    def __add__(self, other: Iterable[T]) -> List1[T]:
        if isinstance(other, (str, bytes)):
            return NotImplemented
        return type(self)._adopt(self._items + list(other))

    def __iadd__(self, other: Iterable[T]) -> List1[T]:
        self.extend(other)
        return self

    def sort(self, *, key: Optional[Callable[[T], Any]] = None, reverse: bool = False) -> None:
        self._items.sort(key=key, reverse=reverse)

    def reverse(self) -> None:
        self._items.reverse()

    def copy(self) -> List1[T]:
        return type(self)._adopt(self._items.copy())

    def mapped(self, map_fn: Callable[[T], N]) -> List1[N]:
        """Return a new List1 holding ``map_fn`` applied to every element."""
        return List1._adopt([map_fn(item) for item in self._items])

    def to_ascii_uppercase(self) -> List1[int]:
        """Uppercase ASCII letters of a container of byte values."""
        return List1._adopt(list(bytes(self._items).upper()))

    def to_ascii_lowercase(self) -> List1[int]:
        """Lowercase ASCII letters of a container of byte values."""
        return List1._adopt(list(bytes(self._items).lower()))

    # -- checked shrinking -----------------------------------------------

    def try_pop(self) -> T:
        """
        Remove and return the last element.

        Raises:
            EmptyError: If this is the only element
        """
        if len(self._items) > 1:
            return self._items.pop()
        raise _refuse("try_pop", len(self._items))

    def try_remove(self, index: int) -> T:
        """
        Remove and return the element at ``index``, keeping the order of the rest.

        Raises:
            EmptyError: If this is the only element (checked before the index)
            IndexError: If ``index`` is out of range
        """
        if len(self._items) > 1:
            return self._items.pop(index)
        raise _refuse("try_remove", len(self._items))

    def try_swap_remove(self, index: int) -> T:
        """
        Remove and return the element at ``index``, filling the gap with the last element.

        Runs in constant time but does not preserve order.

        Raises:
            EmptyError: If this is the only element (checked before the index)
            IndexError: If ``index`` is out of range
        """
        length = len(self._items)
        if length <= 1:
            raise _refuse("try_swap_remove", length)
        item = self._items[index]
        if index < 0:
            index += length
        last = self._items.pop()
        if index < length - 1:
            self._items[index] = last
        return item

    def try_truncate(self, length: int) -> None:
        """
        Keep only the first ``length`` elements; no-op if ``length`` exceeds the current length.

        Raises:
            EmptyError: If ``length`` is less than 1
        """
        if length < 1:
            raise _refuse("try_truncate", len(self._items))
        del self._items[length:]

    def try_resize(self, length: int, value: T) -> None:
        """
        Grow or shrink to exactly ``length`` elements.

        New slots are filled with copies of ``value``; the final slot receives
        ``value`` itself.

        Raises:
            EmptyError: If ``length`` is less than 1
        """
        if length < 1:
            raise _refuse("try_resize", len(self._items))
        current = len(self._items)
        if length <= current:
            del self._items[length:]
            return
        self._items.extend(copy.copy(value) for _ in range(length - current - 1))
        self._items.append(value)

    def try_split_off(self, at: int) -> List1[T]:
        """
        Split into ``self[:at]`` (kept) and ``self[at:]`` (returned).

        Raises:
            EmptyError: Unless ``0 < at < len(self)``, since one half would be empty
        """
        if at <= 0 or at >= len(self._items):
            raise _refuse(f"try_split_off({at})", len(self._items))
        tail = self._items[at:]
        del self._items[at:]
        return type(self)._adopt(tail)

    def split_off_first(self) -> Tuple[T, List[T]]:
        """Return the first element and a plain list of the rest (possibly empty)."""
        return self._items[0], self._items[1:]

    def split_off_last(self) -> Tuple[List[T], T]:
        """Return a plain list of all but the last element (possibly empty) and the last element."""
        return self._items[:-1], self._items[-1]

    def splice(self, range_spec: RangeSpec, replacement: Iterable[T]) -> Splice[T]:
        """
        Replace a range of elements with the elements of ``replacement``.

        Args:
            range_spec: ``slice``, ``range`` or ``IndexRange`` to replace
            replacement: Elements inserted in place of the range

        Returns:
            A lazy Splice yielding the removed elements

        Raises:
            IndexError: If an explicit range does not fit the content
            EmptyError: If the range covers every element and ``replacement``
                is empty. Detecting this pulls one element from
                ``replacement``, so it may have been advanced even though
                nothing was changed.
        """
        length = len(self._items)
        rng = as_index_range(range_spec, length)
        start, stop = rng.resolve(length)
        pending = Peekable(replacement)
        # resolve() has rejected negative starts, so coverage means start == 0
        if range_covers(rng, length) and pending.is_exhausted():
            raise _refuse("splice", length)
        return Splice(self._items, start, stop, pending)

    # -- deduplication ---------------------------------------------------
    #
    # The first element is never dropped, so these cannot empty the content.

    def dedup(self) -> None:
        """Remove consecutive repeated elements."""
        self.dedup_by(lambda current, previous: current == previous)

    def dedup_by_key(self, key: Callable[[T], K]) -> None:
        """Remove consecutive elements that map to the same key."""
        self.dedup_by(lambda current, previous: key(current) == key(previous))

    def dedup_by(self, same_bucket: Callable[[T, T], bool]) -> None:
        """
        Remove consecutive elements judged equivalent by ``same_bucket``.

        ``same_bucket(current, previous)`` receives the candidate and the last
        retained element; the candidate is dropped when it returns true.
        """
        kept = [self._items[0]]
        for item in self._items[1:]:
            if not same_bucket(item, kept[-1]):
                kept.append(item)
        self._items[:] = kept

    # -- plain conversions -----------------------------------------------

    def to_list(self) -> List[T]:
        return list(self._items)

    def to_tuple(self) -> Tuple[T, ...]:
        return tuple(self._items)
