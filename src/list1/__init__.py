"""
list1: a list that always holds at least one element.

Operations that could leave the content empty are only available in a
checked form raising EmptyError, so code receiving a List1 never has to
handle the empty case.
"""

from .errors import EmptyError, EmptyArrayDecodeError
from .container import List1
from .ranges import Bound, BoundKind, IndexRange, range_covers
from .splice import Splice
from .convert import (
    try_from,
    try_from_array,
    try_from_heap,
    try_from_slice,
    try_from_c_string,
    to_list,
    to_tuple,
    to_deque,
    to_array,
)
from .config import Settings
from .codec import encode, decode

__all__ = [
    "EmptyError",
    "EmptyArrayDecodeError",
    "List1",
    "Bound",
    "BoundKind",
    "IndexRange",
    "range_covers",
    "Splice",
    "try_from",
    "try_from_array",
    "try_from_heap",
    "try_from_slice",
    "try_from_c_string",
    "to_list",
    "to_tuple",
    "to_deque",
    "to_array",
    "Settings",
    "encode",
    "decode",
]
