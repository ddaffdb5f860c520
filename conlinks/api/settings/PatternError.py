"""Error raised for patterns that cannot be compiled."""


class PatternError(ValueError):
    """A delimited pattern whose body is not a valid regular expression."""

    def __init__(self, pattern: str, reason: str = ""):
        self.pattern = pattern
        self.reason = reason
        message = f"Invalid regular expression {pattern}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)
