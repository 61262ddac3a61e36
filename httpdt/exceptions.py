"""Custom exceptions for httpdt."""


class HttpdtError(Exception):
    """Base exception for all httpdt errors."""

    def __init__(self, message: str, details: dict | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class ClockUnavailable(HttpdtError):
    """The external clock could not supply a valid seconds-since-epoch value."""
    pass


class InvalidInstant(HttpdtError):
    """A seconds value outside the supported instant range was supplied."""
    pass
