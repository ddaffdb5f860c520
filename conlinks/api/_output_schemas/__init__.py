"""Output schemas for API commands, registered on import."""

from . import settings  # noqa: F401
