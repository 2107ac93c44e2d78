"""
Wertobjekte der Zeiterfassung: Stempel-Ereignisse, Pausen, Tagesaggregat.
Keine Persistenz – Speicherung übernimmt der Aufrufer.
"""
from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from enum import Enum

MIN_QUALIFYING_BREAK_MINUTES = 15  # §4 ArbZG: Ruhepausen ab 15 Min zählen

_MINUTE = timedelta(minutes=1)


def as_utc(ts: datetime) -> datetime:
    """Zeitpunkt in UTC; naive Werte gelten als UTC."""
    if ts.tzinfo is None:
        return ts.replace(tzinfo=timezone.utc)
    return ts.astimezone(timezone.utc)


def minutes_between(start: datetime, end: datetime) -> int:
    """
    Ganze vergangene Minuten zwischen zwei Zeitpunkten (angebrochene Minuten entfallen).

    Beide Werte werden vorher nach UTC umgerechnet: bei gleicher ZoneInfo würde
    Python sonst die Wanduhrzeit subtrahieren und eine Zeitumstellung ignorieren.
    """
    return (as_utc(end) - as_utc(start)) // _MINUTE


def chronological(events: Iterable["ClockEvent"]) -> list["ClockEvent"]:
    return sorted(events, key=lambda e: as_utc(e.timestamp))


class TimeEntryType(str, Enum):
    CLOCK_IN = "CLOCK_IN"
    CLOCK_OUT = "CLOCK_OUT"
    BREAK_START = "BREAK_START"
    BREAK_END = "BREAK_END"


class TrackingStatus(str, Enum):
    CLOCKED_OUT = "CLOCKED_OUT"
    CLOCKED_IN = "CLOCKED_IN"
    ON_BREAK = "ON_BREAK"


@dataclass(frozen=True)
class ClockEvent:
    type: TimeEntryType
    timestamp: datetime


@dataclass(frozen=True)
class BreakInterval:
    start: datetime
    end: datetime

    @property
    def duration_minutes(self) -> int:
        return minutes_between(self.start, self.end)

    @property
    def qualifies(self) -> bool:
        return self.duration_minutes >= MIN_QUALIFYING_BREAK_MINUTES


@dataclass
class DayAggregate:
    raw_work_minutes: int = 0
    qualifying_break_minutes: int = 0
    short_break_minutes: int = 0
    breaks: list[BreakInterval] = field(default_factory=list)

    @property
    def total_break_minutes(self) -> int:
        return self.qualifying_break_minutes + self.short_break_minutes
