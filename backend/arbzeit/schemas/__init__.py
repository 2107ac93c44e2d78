from arbzeit.schemas.compliance import (
    RequiredBreakOut, AutoDeductionRequest, AutoDeductionOut,
    ComplianceCheckRequest, ComplianceResultOut, RestPeriodRequest, RestPeriodOut,
)
from arbzeit.schemas.time_tracking import (
    ClockEventIn, EventsRequest, BreakIntervalOut, DayAggregateOut,
    DailySummaryRequest, DailySummaryOut, TimeSheetRequest, TimeSheetOut,
    StatusRequest, StatusOut, TransitionRequest, TransitionOut,
)

__all__ = [
    "RequiredBreakOut", "AutoDeductionRequest", "AutoDeductionOut",
    "ComplianceCheckRequest", "ComplianceResultOut", "RestPeriodRequest", "RestPeriodOut",
    "ClockEventIn", "EventsRequest", "BreakIntervalOut", "DayAggregateOut",
    "DailySummaryRequest", "DailySummaryOut", "TimeSheetRequest", "TimeSheetOut",
    "StatusRequest", "StatusOut", "TransitionRequest", "TransitionOut",
]
