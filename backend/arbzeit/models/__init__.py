from arbzeit.models.time_entry import (
    MIN_QUALIFYING_BREAK_MINUTES,
    BreakInterval,
    ClockEvent,
    DayAggregate,
    TimeEntryType,
    TrackingStatus,
)

__all__ = [
    "MIN_QUALIFYING_BREAK_MINUTES",
    "BreakInterval",
    "ClockEvent",
    "DayAggregate",
    "TimeEntryType",
    "TrackingStatus",
]
