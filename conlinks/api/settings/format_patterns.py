"""Convert a pattern list into an editable text block."""


def format_patterns(patterns: list[str]) -> str:
    """Join patterns one per line."""
    return "\n".join(patterns)
