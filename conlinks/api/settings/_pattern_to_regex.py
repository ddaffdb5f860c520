"""Convert a single user pattern into a regex body."""

import re


def _is_delimited(pattern: str) -> bool:
    return len(pattern) >= 2 and pattern.startswith("/") and pattern.endswith("/")


def _pattern_to_regex(pattern: str) -> str:
    """Return the regex body for a literal or ``/regex/`` pattern.

    Delimited patterns are used verbatim. Literal patterns are escaped and
    anchored at the start only, so they match as a path prefix.
    """
    if _is_delimited(pattern):
        return pattern[1:-1]
    return "^" + re.escape(pattern)


def _regex_error(body: str) -> str | None:
    """Return the compile error for a regex body, or None if it is valid.

    The body must compile on its own and inside the group it is combined in.
    """
    try:
        re.compile(body)
        re.compile(f"(?:{body})")
    except re.error as e:
        return str(e)
    return None
