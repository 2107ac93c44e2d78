"""
Tagesaggregation: Stempel-Ereignisse eines Kalendertags → Arbeits- und Pausenminuten.

Pausen ab 15 Minuten zählen als Ruhepause nach §4 ArbZG. Kürzere Pausen
sind weder Arbeitszeit noch Ruhepause (sie verkürzen nur die Arbeitszeit).
"""
import logging
from collections.abc import Iterable
from datetime import datetime

from arbzeit.core.exceptions import MalformedEventSequence
from arbzeit.models.time_entry import (
    BreakInterval,
    ClockEvent,
    DayAggregate,
    TimeEntryType,
    chronological,
    minutes_between,
)

logger = logging.getLogger(__name__)


def aggregate_day(
    events: Iterable[ClockEvent],
    open_end: datetime | None = None,
) -> DayAggregate:
    """
    Reduce one day's clock events to raw work and break minutes.

    Events are processed in timestamp order. A work interval still open at the
    end of the list is left out of the totals, unless ``open_end`` is given
    (live status): then work counts up to ``open_end`` or, while on break, up to
    the start of the running break.

    Raises MalformedEventSequence for unmatched break boundaries and
    overlapping work or break intervals.
    """
    aggregate = DayAggregate()
    clock_in: datetime | None = None
    break_start: datetime | None = None
    interval_breaks: list[BreakInterval] = []

    for event in chronological(events):
        ts = event.timestamp

        if event.type == TimeEntryType.CLOCK_IN:
            if clock_in is not None:
                raise MalformedEventSequence(
                    f"Overlapping work intervals: clock-in at {ts.isoformat()} "
                    f"while clocked in since {clock_in.isoformat()}",
                    ts,
                )
            clock_in = ts
            interval_breaks = []

        elif event.type == TimeEntryType.CLOCK_OUT:
            if clock_in is None:
                # z.B. Nachtschicht, deren Clock-In am Vortag liegt
                logger.warning("Skipping clock-out at %s without open work interval", ts.isoformat())
                continue
            if break_start is not None:
                raise MalformedEventSequence(
                    f"Clock-out at {ts.isoformat()} while break started at "
                    f"{break_start.isoformat()} is still open",
                    ts,
                )
            _close_work_interval(aggregate, clock_in, ts, interval_breaks)
            clock_in = None

        elif event.type == TimeEntryType.BREAK_START:
            if clock_in is None:
                raise MalformedEventSequence(
                    f"Break start at {ts.isoformat()} outside of a work interval", ts
                )
            if break_start is not None:
                raise MalformedEventSequence(
                    f"Overlapping breaks: break start at {ts.isoformat()} while on break "
                    f"since {break_start.isoformat()}",
                    ts,
                )
            break_start = ts

        elif event.type == TimeEntryType.BREAK_END:
            if break_start is None:
                raise MalformedEventSequence(
                    f"Break end at {ts.isoformat()} without preceding break start", ts
                )
            interval_breaks.append(BreakInterval(start=break_start, end=ts))
            break_start = None

    if clock_in is not None and open_end is not None:
        work_end = break_start or open_end
        if minutes_between(clock_in, work_end) > 0:
            _close_work_interval(aggregate, clock_in, work_end, interval_breaks)

    logger.debug(
        "Aggregated day: work=%d qualifying_breaks=%d short_breaks=%d",
        aggregate.raw_work_minutes,
        aggregate.qualifying_break_minutes,
        aggregate.short_break_minutes,
    )
    return aggregate


def _close_work_interval(
    aggregate: DayAggregate,
    start: datetime,
    end: datetime,
    breaks: list[BreakInterval],
) -> None:
    work_minutes = minutes_between(start, end)
    for brk in breaks:
        duration = brk.duration_minutes
        work_minutes -= duration
        if brk.qualifies:
            aggregate.qualifying_break_minutes += duration
        else:
            aggregate.short_break_minutes += duration
        aggregate.breaks.append(brk)
    aggregate.raw_work_minutes += work_minutes
