"""Compile a pattern list into a single matcher."""

import logging
import re
from collections.abc import Sequence

from ._pattern_to_regex import _is_delimited, _pattern_to_regex, _regex_error
from .PatternError import PatternError

logger = logging.getLogger(__name__)


def compile_patterns(patterns: Sequence[str], default: re.Pattern[str]) -> re.Pattern[str]:
    """Compile patterns into one regex that matches if any pattern matches.

    Args:
        patterns: Literal path prefixes or ``/regex/`` strings
        default: Matcher returned as-is when ``patterns`` is empty

    Returns:
        Compiled matcher, tested with ``search``

    Raises:
        PatternError: If a delimited pattern is not a valid regular expression
    """
    if not patterns:
        return default

    for pattern in patterns:
        if not _is_delimited(pattern):
            continue
        error = _regex_error(pattern[1:-1])
        if error is not None:
            logger.error(f"Failed to compile path pattern {pattern}: {error}")
            raise PatternError(pattern, error)

    combined = "|".join(f"(?:{_pattern_to_regex(pattern)})" for pattern in patterns)
    try:
        return re.compile(combined)
    except re.error as e:
        logger.error(f"Failed to compile path patterns {combined}: {e}")
        raise PatternError(combined, str(e)) from e
