"""
Zeiterfassung: Tageszusammenfassung, Stundenzettel und Live-Status aus Stempel-Ereignissen.

Reine Funktionen – Laden und Speichern der Tageswerte übernimmt der Aufrufer.
"""
from __future__ import annotations

import logging
from collections import defaultdict
from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import date, datetime, tzinfo

from arbzeit.core.exceptions import ClockStateConflict, MalformedEventSequence
from arbzeit.models.time_entry import (
    ClockEvent,
    TimeEntryType,
    TrackingStatus,
    as_utc,
    chronological,
    minutes_between,
)
from arbzeit.services.compliance_service import compliance_service
from arbzeit.services.event_aggregator import aggregate_day

logger = logging.getLogger(__name__)

DEFAULT_DAILY_TARGET_MINUTES = 480  # 8h-Tag, falls kein Mitarbeiter-Soll bekannt

STATUS_AFTER: dict[TimeEntryType, TrackingStatus] = {
    TimeEntryType.CLOCK_IN:    TrackingStatus.CLOCKED_IN,
    TimeEntryType.BREAK_START: TrackingStatus.ON_BREAK,
    TimeEntryType.BREAK_END:   TrackingStatus.CLOCKED_IN,
    TimeEntryType.CLOCK_OUT:   TrackingStatus.CLOCKED_OUT,
}

ALLOWED_ACTIONS: dict[TrackingStatus, tuple[TimeEntryType, ...]] = {
    TrackingStatus.CLOCKED_OUT: (TimeEntryType.CLOCK_IN,),
    TrackingStatus.CLOCKED_IN:  (TimeEntryType.CLOCK_OUT, TimeEntryType.BREAK_START),
    TrackingStatus.ON_BREAK:    (TimeEntryType.BREAK_END,),
}


@dataclass
class DailySummary:
    date: date
    total_work_minutes: int
    total_break_minutes: int
    auto_deducted_minutes: int
    overtime_minutes: int
    is_compliant: bool
    rest_period_ok: bool
    compliance_notes: list[str] = field(default_factory=list)
    raw_work_minutes: int = 0
    qualifying_break_minutes: int = 0
    short_break_minutes: int = 0


@dataclass
class TimeSheet:
    start_date: date
    end_date: date
    daily_summaries: list[DailySummary] = field(default_factory=list)

    @property
    def total_work_minutes(self) -> int:
        return sum(s.total_work_minutes for s in self.daily_summaries)

    @property
    def total_break_minutes(self) -> int:
        return sum(s.total_break_minutes for s in self.daily_summaries)

    @property
    def total_overtime_minutes(self) -> int:
        return sum(s.overtime_minutes for s in self.daily_summaries)

    @property
    def non_compliant_days(self) -> list[date]:
        return [s.date for s in self.daily_summaries if not s.is_compliant or not s.rest_period_ok]


@dataclass
class StatusSnapshot:
    status: TrackingStatus
    clocked_in_since: datetime | None
    break_started_at: datetime | None
    elapsed_work_minutes: int
    elapsed_break_minutes: int
    today_work_minutes: int
    today_break_minutes: int
    allowed_actions: list[TimeEntryType]


# ── Tageszusammenfassung ──────────────────────────────────────────────────────

def summarize_day(
    day: date,
    events: Iterable[ClockEvent],
    previous_day_last_event: datetime | None = None,
    target_minutes: int = DEFAULT_DAILY_TARGET_MINUTES,
    tz: tzinfo | None = None,
) -> DailySummary:
    """
    Compute the daily summary for one calendar day.

    Overtime is measured against the employee's daily target. The rest period
    is checked between ``previous_day_last_event`` and the day's first event.

    With ``tz`` every event must fall on ``day`` in that zone, otherwise
    MalformedEventSequence is raised. Without ``tz`` the caller is expected to
    pass events already split by day (see ``split_by_day``).
    """
    events = chronological(events)
    if tz is not None:
        for event in events:
            event_day = local_date(event.timestamp, tz)
            if event_day != day:
                raise MalformedEventSequence(
                    f"Event at {event.timestamp.isoformat()} falls on {event_day}, not on {day}",
                    event.timestamp,
                )
    aggregate = aggregate_day(events)
    calc, result = compliance_service.evaluate_day(
        aggregate.raw_work_minutes,
        aggregate.qualifying_break_minutes,
        aggregate.short_break_minutes,
    )

    first_event = events[0].timestamp if events else None
    rest_period_ok = compliance_service.check_rest_period(previous_day_last_event, first_event)
    if not rest_period_ok:
        logger.info("Rest period violated on %s (previous event %s)", day, previous_day_last_event)

    return DailySummary(
        date=day,
        total_work_minutes=calc.effective_work_minutes,
        total_break_minutes=calc.effective_break_minutes,
        auto_deducted_minutes=calc.auto_deducted_minutes,
        overtime_minutes=max(0, calc.effective_work_minutes - target_minutes),
        is_compliant=result.is_compliant,
        rest_period_ok=rest_period_ok,
        compliance_notes=result.notes,
        raw_work_minutes=calc.raw_work_minutes,
        qualifying_break_minutes=calc.qualifying_break_minutes,
        short_break_minutes=calc.short_break_minutes,
    )


def local_date(ts: datetime, tz: tzinfo) -> date:
    """Kalendertag in ``tz``; naive Zeitpunkte gelten als UTC."""
    return as_utc(ts).astimezone(tz).date()


def split_by_day(events: Iterable[ClockEvent], tz: tzinfo) -> dict[date, list[ClockEvent]]:
    """Group events by local calendar day; naive timestamps are taken as UTC."""
    days: dict[date, list[ClockEvent]] = defaultdict(list)
    for event in chronological(events):
        days[local_date(event.timestamp, tz)].append(event)
    return dict(sorted(days.items()))


def build_time_sheet(
    start_date: date,
    end_date: date,
    events: Iterable[ClockEvent],
    tz: tzinfo,
    target_minutes: int = DEFAULT_DAILY_TARGET_MINUTES,
) -> TimeSheet:
    """
    Daily summaries for every day in [start_date, end_date] that has events.

    Events before ``start_date`` are only used for the rest period check of
    the first day.
    """
    sheet = TimeSheet(start_date=start_date, end_date=end_date)
    previous_last: datetime | None = None

    for day, day_events in split_by_day(events, tz).items():
        if start_date <= day <= end_date:
            sheet.daily_summaries.append(
                summarize_day(day, day_events, previous_last, target_minutes, tz)
            )
        elif day > end_date:
            break
        previous_last = day_events[-1].timestamp

    return sheet


# ── Live-Status ──────────────────────────────────────────────────────────────

def status_of(events: Iterable[ClockEvent]) -> TrackingStatus:
    events = chronological(events)
    if not events:
        return TrackingStatus.CLOCKED_OUT
    return STATUS_AFTER[events[-1].type]


def ensure_transition_allowed(status: TrackingStatus, entry_type: TimeEntryType) -> TrackingStatus:
    """Raise ClockStateConflict if ``entry_type`` may not be stamped now; return the new status."""
    if entry_type == TimeEntryType.CLOCK_IN:
        if status == TrackingStatus.CLOCKED_IN:
            raise ClockStateConflict("Already clocked in. Please clock out first.")
        if status == TrackingStatus.ON_BREAK:
            raise ClockStateConflict("Currently on break. Please end break first.")
    elif entry_type == TimeEntryType.CLOCK_OUT:
        if status == TrackingStatus.CLOCKED_OUT:
            raise ClockStateConflict("Not clocked in. Please clock in first.")
        if status == TrackingStatus.ON_BREAK:
            raise ClockStateConflict("Currently on break. Please end break before clocking out.")
    elif entry_type == TimeEntryType.BREAK_START:
        if status != TrackingStatus.CLOCKED_IN:
            raise ClockStateConflict("Must be clocked in to start a break.")
    elif entry_type == TimeEntryType.BREAK_END:
        if status != TrackingStatus.ON_BREAK:
            raise ClockStateConflict("Not on break.")
    return STATUS_AFTER[entry_type]


def current_status(events: Iterable[ClockEvent], now: datetime) -> StatusSnapshot:
    """Live view of today's events: running interval plus today's totals up to ``now``."""
    events = chronological(events)
    status = status_of(events)

    clocked_in_since = None
    if status != TrackingStatus.CLOCKED_OUT:
        clocked_in_since = next(
            (e.timestamp for e in reversed(events) if e.type == TimeEntryType.CLOCK_IN), None
        )
    break_started_at = events[-1].timestamp if status == TrackingStatus.ON_BREAK else None

    elapsed_work = 0
    if status == TrackingStatus.CLOCKED_IN and clocked_in_since is not None:
        elapsed_work = minutes_between(clocked_in_since, now)
    elapsed_break = minutes_between(break_started_at, now) if break_started_at else 0

    aggregate = aggregate_day(events, open_end=now)
    calc, _ = compliance_service.evaluate_day(
        aggregate.raw_work_minutes,
        aggregate.qualifying_break_minutes,
        aggregate.short_break_minutes,
    )

    return StatusSnapshot(
        status=status,
        clocked_in_since=clocked_in_since,
        break_started_at=break_started_at,
        elapsed_work_minutes=max(0, elapsed_work),
        elapsed_break_minutes=max(0, elapsed_break),
        today_work_minutes=calc.effective_work_minutes,
        today_break_minutes=calc.effective_break_minutes,
        allowed_actions=list(ALLOWED_ACTIONS[status]),
    )
