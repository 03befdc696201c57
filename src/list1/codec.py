"""
JSON serialization for List1.

A List1 is encoded exactly like the plain list of its elements. Decoding
reads an ordinary JSON array first and only then checks that it is not empty.
"""

import json
from typing import Any, List, Optional

from .config import DEFAULT_SETTINGS, Settings
from .container import List1
from .errors import EmptyArrayDecodeError, EmptyError
from .logging import get_logger

logger = get_logger(__name__)


def to_data(container: List1[Any]) -> List[Any]:
    """Return the JSON-ready form of ``container``: a plain list."""
    return container.to_list()


def from_data(data: Any) -> List1[Any]:
    """
    Rebuild a List1 from an already decoded JSON value.

    Args:
        data: Decoded JSON value, expected to be an array

    Returns:
        List1 holding the array elements

    Raises:
        TypeError: If ``data`` is not a list
        EmptyArrayDecodeError: If the array is empty
    """
    if not isinstance(data, list):
        raise TypeError(f"expected a JSON array, got {type(data).__name__}")
    try:
        return List1.try_from_list(data)
    except EmptyError as exc:
        logger.debug("Rejected empty JSON array while decoding List1")
        raise EmptyArrayDecodeError() from exc


def encode(container: List1[Any], settings: Optional[Settings] = None) -> str:
    """Serialize ``container`` as a JSON array."""
    settings = settings or DEFAULT_SETTINGS
    return json.dumps(
        to_data(container),
        indent=settings.json_indent,
        ensure_ascii=settings.json_ensure_ascii,
        sort_keys=settings.json_sort_keys,
        allow_nan=settings.json_allow_nan,
    )


def decode(text: str, settings: Optional[Settings] = None) -> List1[Any]:
    """
    Parse a JSON array into a List1.

    Raises:
        json.JSONDecodeError: If ``text`` is not valid JSON
        TypeError: If the document is not an array
        EmptyArrayDecodeError: If the array is empty
    """
    settings = settings or DEFAULT_SETTINGS
    if settings.json_allow_nan:
        data = json.loads(text)
    else:
        data = json.loads(text, parse_constant=_reject_constant)
    return from_data(data)


def _reject_constant(name: str) -> Any:
    raise ValueError(f"JSON constant {name} is not allowed")
