"""Read a list-valued field from a raw settings record."""

from collections.abc import Mapping
from typing import Any


def _as_list(record: Mapping[str, Any], key: str) -> list[Any]:
    """Return ``record[key]`` as a list; absent or null values are empty."""
    value = record.get(key)
    if value is None:
        return []
    if not isinstance(value, (list, tuple)):
        raise ValueError(f"{key} must be a list (found: {type(value).__name__} = {value!r}, expected: list)")
    return list(value)
