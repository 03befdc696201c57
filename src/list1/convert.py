"""
Conversions between List1 and ordinary, possibly empty, sequences.

``try_from`` is a single fallible constructor dispatched on the type of its
source. Each registration raises EmptyError iff the source is empty. The
``to_*`` helpers go the other way and never fail.
"""

from __future__ import annotations

import copy
import ctypes
from collections import deque
from collections.abc import Sequence
from functools import singledispatch
from typing import Any, Deque, Iterable, List, Tuple, TypeVar, Union

import numpy as np

from .container import List1

T = TypeVar("T")


@singledispatch
def try_from(source: Iterable[T]) -> List1[T]:
    """
    Build a List1 from ``source``.

    Unregistered iterables are materialized as they are; the registered
    source kinds are listed below.

    Raises:
        EmptyError: If ``source`` has no elements
        TypeError: If ``source`` is not iterable
    """
    return List1.try_from_list(source)


@try_from.register
def _(source: list) -> List1[Any]:
    return List1.try_from_list(source)


@try_from.register
def _(source: tuple) -> List1[Any]:
    return List1.try_from_list(source)


@try_from.register
def _(source: deque) -> List1[Any]:
    return List1.try_from_list(source)


@try_from.register(bytes)
@try_from.register(bytearray)
@try_from.register(memoryview)
def _(source: Union[bytes, bytearray, memoryview]) -> List1[int]:
    return List1.try_from_list(bytes(source))


@try_from.register
def _(source: str, encoding: str = "utf-8") -> List1[int]:
    """A text string becomes the List1 of its encoded bytes."""
    return List1.try_from_list(source.encode(encoding))


@try_from.register
def _(source: np.ndarray) -> List1[Any]:
    return try_from_array(source)


def try_from_array(array: np.ndarray) -> List1[Any]:
    """
    Build a List1 from a one-dimensional NumPy array.

    Elements are converted to Python scalars with ``ndarray.tolist``.

    Raises:
        EmptyError: If the array has no elements
        ValueError: If the array is not one-dimensional
    """
    if array.ndim != 1:
        raise ValueError(f"expected a one-dimensional array, got {array.ndim} dimensions")
    return List1.try_from_list(array.tolist())


def try_from_heap(heap: List[T]) -> List1[T]:
    """
    Build a List1 from a list maintained with ``heapq``.

    The elements keep the heap's internal layout order; they are not sorted.
    """
    return List1.try_from_list(heap)


def try_from_slice(items: Sequence) -> List1[Any]:
    """
    Build a List1 holding shallow copies of the elements of ``items``.

    Raises:
        EmptyError: If ``items`` has no elements
    """
    return List1.try_from_list(copy.copy(item) for item in items)


def try_from_c_string(buffer: Union[bytes, bytearray, ctypes.Array]) -> List1[int]:
    """
    Build a List1 of bytes from a NUL-terminated buffer.

    The data ends at the first NUL byte; the terminator and anything after it
    are not part of the content. Accepts ``ctypes`` character arrays (for
    example from ``ctypes.create_string_buffer``) and plain byte strings.

    Raises:
        EmptyError: If the buffer holds no bytes before the terminator
    """
    if isinstance(buffer, ctypes.Array):
        data = getattr(buffer, "value", None)
        if not isinstance(data, bytes):
            raise TypeError(f"expected a c_char array, got {type(buffer).__name__}")
    else:
        data = bytes(buffer).split(b"\x00", 1)[0]
    return List1.try_from_list(data)


def to_list(container: List1[T]) -> List[T]:
    return container.to_list()


def to_tuple(container: List1[T]) -> Tuple[T, ...]:
    return container.to_tuple()


def to_deque(container: List1[T]) -> Deque[T]:
    return deque(container)


def to_array(container: List1[Any], dtype: Any = None) -> np.ndarray:
    """Copy the content into a one-dimensional NumPy array."""
    return np.array(container.to_list(), dtype=dtype)


__all__ = [
    "try_from",
    "try_from_array",
    "try_from_heap",
    "try_from_slice",
    "try_from_c_string",
    "to_list",
    "to_tuple",
    "to_deque",
    "to_array",
]
