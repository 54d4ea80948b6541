"""Timeline access errors."""


class TimelineUnavailableError(RuntimeError):
    """Raised when there is no timeline to read clips from."""
