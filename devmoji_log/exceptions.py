"""Exception hierarchy for devmoji-log."""


class DevmojiLogError(Exception):
    """Base exception for devmoji-log errors."""

    pass


class SpanError(DevmojiLogError):
    """Raised when the elapsed time between two instants cannot be computed."""

    pass
