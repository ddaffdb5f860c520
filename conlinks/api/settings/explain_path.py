"""Explain why a vault path is processed or ignored."""

from .PluginSettings import PluginSettings


def explain_path(settings: PluginSettings, path: str) -> tuple[bool, list[str]]:
    """Evaluate the include gate, then the exclude gate.

    Returns:
        (ignored, trace) where trace lists the decisions in order
    """
    trace: list[str] = []

    if not settings.include_paths:
        trace.append("No includePaths defined; all paths included")
    else:
        match = settings.include_regex.search(path)
        if match is None:
            trace.append("Outside includePaths")
            return True, trace
        trace.append(f"Included by includePaths (matched {match.group(0)!r})")

    if not settings.exclude_paths:
        trace.append("No excludePaths defined; nothing excluded")
        return False, trace

    match = settings.exclude_regex.search(path)
    if match is not None:
        trace.append(f"Excluded by excludePaths (matched {match.group(0)!r})")
        return True, trace

    trace.append("Not matched by excludePaths")
    return False, trace
