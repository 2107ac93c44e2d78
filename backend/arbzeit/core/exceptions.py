"""
Fachliche Fehler der Zeiterfassung.
Die Router übersetzen sie in HTTP-Statuscodes (422 / 409).
"""


class TimeTrackingError(Exception):
    """Base exception for time-tracking rule violations."""


class MalformedEventSequence(TimeTrackingError):
    """Raised when a day's clock events cannot be paired into intervals."""

    def __init__(self, message: str, timestamp=None):
        super().__init__(message)
        self.timestamp = timestamp


class ClockStateConflict(TimeTrackingError):
    """Raised when a clock action is not allowed in the current tracking state."""
