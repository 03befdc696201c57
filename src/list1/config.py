from dataclasses import dataclass
from typing import Optional


@dataclass
class Settings:
    """Options for the JSON codec."""
    json_indent: Optional[int] = None
    json_ensure_ascii: bool = True
    json_sort_keys: bool = False
    json_allow_nan: bool = True


DEFAULT_SETTINGS = Settings()
