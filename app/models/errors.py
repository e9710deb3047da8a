class AnalyticsError(Exception):
    """Base class for errors raised by the analytics services."""


class MalformedPayload(AnalyticsError):
    """The upstream payload failed or does not carry a courses list."""

    def __init__(self, message="Malformed visualization payload"):
        super().__init__(message)
        self.message = message


class InvalidFilterMode(AnalyticsError):
    """A filter mode outside the supported set was requested."""

    def __init__(self, mode):
        super().__init__(f"Unknown filter mode: {mode!r}")
        self.mode = mode
