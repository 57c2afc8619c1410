"""Failures of the record operation and the HTTP status each one maps to."""


class RecorderError(Exception):
    """Base class for errors raised while recording an event."""

    status_code = 500
    error_code = "RecorderError"

    def __init__(self, message: str, *, cause: Exception | None = None):
        super().__init__(message)
        self.message = message
        self.cause = cause


class TimeSourceError(RecorderError):
    """The time service could not be reached or answered with an error."""

    status_code = 502
    error_code = "TimeSourceUnavailable"


class TimestampDecodeError(RecorderError):
    """The time service payload is not a JSON object."""

    status_code = 502
    error_code = "InvalidTimestamp"
