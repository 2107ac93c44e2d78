"""
Zeiterfassung API – Tageswerte, Stundenzettel und Live-Status aus Stempel-Ereignissen.
Die Ereignisse kommen im Request mit; es wird nichts gespeichert.
"""
from datetime import datetime, timezone

from fastapi import APIRouter, HTTPException, status

from arbzeit.api.deps import AppSettings
from arbzeit.core.exceptions import ClockStateConflict, MalformedEventSequence
from arbzeit.schemas.time_tracking import (
    DailySummaryOut,
    DailySummaryRequest,
    DayAggregateOut,
    EventsRequest,
    StatusOut,
    StatusRequest,
    TimeSheetOut,
    TimeSheetRequest,
    TransitionOut,
    TransitionRequest,
)
from arbzeit.services.event_aggregator import aggregate_day
from arbzeit.services.time_tracking_service import (
    build_time_sheet,
    current_status,
    ensure_transition_allowed,
    status_of,
    summarize_day,
)

router = APIRouter(prefix="/time-tracking", tags=["time-tracking"])


def _malformed(exc: MalformedEventSequence) -> HTTPException:
    return HTTPException(status_code=422, detail=str(exc))


@router.post("/aggregate", response_model=DayAggregateOut)
async def aggregate(payload: EventsRequest):
    try:
        result = aggregate_day(payload.to_events())
    except MalformedEventSequence as exc:
        raise _malformed(exc)
    return DayAggregateOut.model_validate(result)


@router.post("/daily-summary", response_model=DailySummaryOut)
async def daily_summary(payload: DailySummaryRequest, settings: AppSettings):
    target = payload.target_minutes
    if target is None:
        target = settings.DEFAULT_DAILY_TARGET_MINUTES
    try:
        summary = summarize_day(
            payload.date,
            payload.to_events(),
            previous_day_last_event=payload.previous_day_last_event,
            target_minutes=target,
            tz=settings.tzinfo,
        )
    except MalformedEventSequence as exc:
        raise _malformed(exc)
    return DailySummaryOut.model_validate(summary)


@router.post("/timesheet", response_model=TimeSheetOut)
async def timesheet(payload: TimeSheetRequest, settings: AppSettings):
    if payload.end_date < payload.start_date:
        raise HTTPException(
            status_code=422,
            detail="end_date must not be before start_date",
        )
    target = payload.target_minutes
    if target is None:
        target = settings.DEFAULT_DAILY_TARGET_MINUTES
    try:
        sheet = build_time_sheet(
            payload.start_date,
            payload.end_date,
            payload.to_events(),
            settings.tzinfo,
            target_minutes=target,
        )
    except MalformedEventSequence as exc:
        raise _malformed(exc)
    return TimeSheetOut.model_validate(sheet)


@router.post("/status", response_model=StatusOut)
async def tracking_status(payload: StatusRequest):
    now = payload.now or datetime.now(timezone.utc)
    try:
        snapshot = current_status(payload.to_events(), now)
    except MalformedEventSequence as exc:
        raise _malformed(exc)
    return StatusOut.model_validate(snapshot)


@router.post("/transition", response_model=TransitionOut)
async def check_transition(payload: TransitionRequest):
    """Prüft, ob der gewünschte Stempel im aktuellen Zustand erlaubt ist (sonst 409)."""
    current = status_of(payload.to_events())
    try:
        resulting = ensure_transition_allowed(current, payload.entry_type)
    except ClockStateConflict as exc:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc))
    return TransitionOut(
        entry_type=payload.entry_type,
        current_status=current,
        resulting_status=resulting,
    )
