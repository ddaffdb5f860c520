"""Convert an edited text block into a pattern list."""


def parse_patterns(text: str) -> list[str]:
    """Split a newline-separated block into patterns, dropping empty lines."""
    return [line for line in text.split("\n") if line]
