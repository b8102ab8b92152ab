"""Small string helpers shared by the style registry and list rendering."""

from __future__ import annotations

import re

_CAMEL_BOUNDARY: re.Pattern[str] = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")
_SEPARATORS: re.Pattern[str] = re.compile(r"[\s\-_]+")


def snake_case(value: str) -> str:
    """Convert a name to its snake_case form.

    ``"MyStyle"``, ``"my-style"``, ``"my style"`` and ``"MY_STYLE"`` all
    become ``"my_style"``.

    Args:
        value: Name in any casing convention.

    Returns:
        Lowercase name with words joined by underscores.
    """
    value = value.strip()
    if not value.isupper():
        value = _CAMEL_BOUNDARY.sub("_", value)
    return _SEPARATORS.sub("_", value).strip("_").lower()


def is_numeric(value: object) -> bool:
    """Return True for ints and strings holding an integer."""
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    if isinstance(value, str):
        return bool(re.fullmatch(r"\s*-?\d+\s*", value))
    return False
