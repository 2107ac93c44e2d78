"""
Compliance API – Arbeitsrechtliche Prüfungen nach ArbZG (§3, §4, §5).
"""
from fastapi import APIRouter, Query

from arbzeit.api.deps import Compliance
from arbzeit.models.time_entry import minutes_between
from arbzeit.schemas.compliance import (
    AutoDeductionOut,
    AutoDeductionRequest,
    ComplianceCheckRequest,
    ComplianceResultOut,
    RequiredBreakOut,
    RestPeriodOut,
    RestPeriodRequest,
)
from arbzeit.services.compliance_service import MIN_REST_MINUTES

router = APIRouter(prefix="/compliance", tags=["compliance"])


@router.get("/required-break", response_model=RequiredBreakOut)
async def required_break(svc: Compliance, work_minutes: int = Query(ge=0)):
    return RequiredBreakOut(
        work_minutes=work_minutes,
        required_break_minutes=svc.required_break_minutes(work_minutes),
    )


@router.post("/auto-deduction", response_model=AutoDeductionOut)
async def auto_deduction(payload: AutoDeductionRequest, svc: Compliance):
    """
    Automatischer Pausenabzug: wie viele Minuten werden von der Arbeitszeit
    abgezogen, weil die Pflichtpause nicht (vollständig) genommen wurde.
    """
    calc, _ = svc.evaluate_day(payload.raw_work_minutes, payload.qualifying_break_minutes)
    return AutoDeductionOut.model_validate(calc)


@router.post("/check", response_model=ComplianceResultOut)
async def check_compliance(payload: ComplianceCheckRequest, svc: Compliance):
    result = svc.check_compliance(payload.work_minutes, payload.break_minutes)
    return ComplianceResultOut.model_validate(result)


@router.post("/rest-period", response_model=RestPeriodOut)
async def check_rest_period(payload: RestPeriodRequest, svc: Compliance):
    prev, curr = payload.previous_day_last_event, payload.current_day_first_event
    return RestPeriodOut(
        rest_period_ok=svc.check_rest_period(prev, curr),
        rest_minutes=minutes_between(prev, curr) if prev and curr else None,
        min_rest_minutes=MIN_REST_MINUTES,
    )
