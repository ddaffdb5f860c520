"""Parse a value typed on the command line."""

import json
from typing import Any


def _parse_value(raw: str) -> Any:
    """Parse a value string as JSON, falling back to plain string."""
    try:
        return json.loads(raw)
    except (json.JSONDecodeError, ValueError):
        return raw
