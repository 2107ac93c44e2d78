"""
Schemas für Compliance-Endpunkte.
"""
from typing import Optional

from pydantic import AwareDatetime, BaseModel, Field


class RequiredBreakOut(BaseModel):
    work_minutes: int
    required_break_minutes: int


class AutoDeductionRequest(BaseModel):
    raw_work_minutes: int = Field(ge=0)
    qualifying_break_minutes: int = Field(default=0, ge=0)


class AutoDeductionOut(BaseModel):
    raw_work_minutes: int
    qualifying_break_minutes: int
    auto_deducted_minutes: int
    effective_work_minutes: int
    effective_qualifying_break_minutes: int

    model_config = {"from_attributes": True}


class ComplianceCheckRequest(BaseModel):
    work_minutes: int = Field(ge=0)
    break_minutes: int = Field(default=0, ge=0)


class ComplianceResultOut(BaseModel):
    is_compliant: bool
    notes: list[str]

    model_config = {"from_attributes": True}


class RestPeriodRequest(BaseModel):
    previous_day_last_event: Optional[AwareDatetime] = None
    current_day_first_event: Optional[AwareDatetime] = None


class RestPeriodOut(BaseModel):
    rest_period_ok: bool
    rest_minutes: int | None     # None, wenn ein Zeitpunkt fehlt
    min_rest_minutes: int
