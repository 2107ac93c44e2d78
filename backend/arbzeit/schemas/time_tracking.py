from pydantic import AwareDatetime, BaseModel, Field
from datetime import date as Date, datetime as DateTime
from typing import Optional

from arbzeit.models.time_entry import ClockEvent, TimeEntryType, TrackingStatus


class ClockEventIn(BaseModel):
    type: TimeEntryType
    timestamp: AwareDatetime

    def to_event(self) -> ClockEvent:
        return ClockEvent(type=self.type, timestamp=self.timestamp)


class EventsRequest(BaseModel):
    events: list[ClockEventIn] = []

    def to_events(self) -> list[ClockEvent]:
        return [e.to_event() for e in self.events]


class BreakIntervalOut(BaseModel):
    start: DateTime
    end: DateTime
    duration_minutes: int
    qualifies: bool

    model_config = {"from_attributes": True}


class DayAggregateOut(BaseModel):
    raw_work_minutes: int
    qualifying_break_minutes: int
    short_break_minutes: int
    total_break_minutes: int
    breaks: list[BreakIntervalOut]

    model_config = {"from_attributes": True}


class DailySummaryRequest(EventsRequest):
    date: Date
    previous_day_last_event: Optional[AwareDatetime] = None
    target_minutes: Optional[int] = Field(default=None, ge=0)  # Soll pro Tag, sonst Default aus Settings


class DailySummaryOut(BaseModel):
    date: Date
    total_work_minutes: int
    total_break_minutes: int
    auto_deducted_minutes: int
    overtime_minutes: int
    is_compliant: bool
    rest_period_ok: bool
    compliance_notes: list[str]
    raw_work_minutes: int
    qualifying_break_minutes: int
    short_break_minutes: int

    model_config = {"from_attributes": True}


class TimeSheetRequest(EventsRequest):
    start_date: Date
    end_date: Date
    target_minutes: Optional[int] = Field(default=None, ge=0)


class TimeSheetOut(BaseModel):
    start_date: Date
    end_date: Date
    daily_summaries: list[DailySummaryOut]
    total_work_minutes: int
    total_break_minutes: int
    total_overtime_minutes: int
    non_compliant_days: list[Date]

    model_config = {"from_attributes": True}


class StatusRequest(EventsRequest):
    now: Optional[AwareDatetime] = None  # Default: aktuelle UTC-Zeit


class StatusOut(BaseModel):
    status: TrackingStatus
    clocked_in_since: Optional[DateTime]
    break_started_at: Optional[DateTime]
    elapsed_work_minutes: int
    elapsed_break_minutes: int
    today_work_minutes: int
    today_break_minutes: int
    allowed_actions: list[TimeEntryType]

    model_config = {"from_attributes": True}


class TransitionRequest(EventsRequest):
    entry_type: TimeEntryType


class TransitionOut(BaseModel):
    entry_type: TimeEntryType
    current_status: TrackingStatus
    resulting_status: TrackingStatus
