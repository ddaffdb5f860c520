"""Validate an edited block of patterns before it is committed."""

from ._pattern_to_regex import _is_delimited, _regex_error


def validate_patterns(text: str) -> str | None:
    """Check every ``/regex/`` line of a newline-separated block.

    Literal lines are always valid.

    Returns:
        Error message naming the first invalid pattern, or None if all are valid
    """
    for line in text.split("\n"):
        if _is_delimited(line) and _regex_error(line[1:-1]) is not None:
            return f"Invalid regular expression {line}"
    return None
