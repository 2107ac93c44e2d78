"""
Compliance-Service: Prüfung eines Arbeitstags gemäß ArbZG.
Höchstarbeitszeit (§3), Pausenpflicht mit automatischem Pausenabzug (§4),
Ruhezeit zwischen zwei Arbeitstagen (§5).
"""
import logging
from dataclasses import dataclass, field
from datetime import datetime

from arbzeit.models.time_entry import MIN_QUALIFYING_BREAK_MINUTES  # noqa: F401 – Re-Export
from arbzeit.models.time_entry import minutes_between

logger = logging.getLogger(__name__)


MAX_WORK_MINUTES  = 600  # §3 ArbZG: 10h absolute Höchstgrenze
WARN_WORK_MINUTES = 480  # §3 ArbZG: 8h regulär
BREAK_THRESHOLD_1 = 360  # §4 ArbZG: > 6h → 30 Min Pause
BREAK_THRESHOLD_2 = 540  # §4 ArbZG: > 9h → 45 Min Pause
REQUIRED_BREAK_1  = 30
REQUIRED_BREAK_2  = 45
MIN_REST_MINUTES  = 660  # §5 ArbZG: 11h Ruhezeit

# Höchste Schwelle zuerst
BREAK_RULES: tuple[tuple[int, int], ...] = (
    (BREAK_THRESHOLD_2, REQUIRED_BREAK_2),
    (BREAK_THRESHOLD_1, REQUIRED_BREAK_1),
)


@dataclass
class ComplianceResult:
    is_compliant: bool = True
    notes: list[str] = field(default_factory=list)

    def add_violation(self, note: str) -> None:
        self.is_compliant = False
        self.notes.append(note)

    def add_note(self, note: str) -> None:
        self.notes.append(note)


@dataclass(frozen=True)
class WorkTimeCalculation:
    """
    Breakdown of a day's work and break time.

    raw_work_minutes        work periods excluding all break time
    qualifying_break_minutes breaks >= 15 min, count toward §4 ArbZG
    short_break_minutes     breaks < 15 min, reduce work time only
    auto_deducted_minutes   deducted because mandatory breaks were not taken
    """
    raw_work_minutes: int
    qualifying_break_minutes: int
    short_break_minutes: int
    auto_deducted_minutes: int

    @property
    def effective_work_minutes(self) -> int:
        return self.raw_work_minutes - self.auto_deducted_minutes

    @property
    def effective_break_minutes(self) -> int:
        return self.qualifying_break_minutes + self.short_break_minutes + self.auto_deducted_minutes

    @property
    def effective_qualifying_break_minutes(self) -> int:
        # Abgezogene Minuten gelten für §4 als genommene Pause
        return self.qualifying_break_minutes + self.auto_deducted_minutes


class ComplianceService:
    """Stateless; one instance can be shared across requests."""

    def required_break_minutes(self, work_minutes: int) -> int:
        for threshold, required in BREAK_RULES:
            if work_minutes > threshold:
                return required
        return 0

    def compute_auto_deduction(self, raw_work_minutes: int, qualifying_break_minutes: int) -> int:
        """
        Minutes to subtract from raw work time for mandatory breaks not taken.

        Start in the band the raw work time falls into. If deducting the
        shortage would drop the day into a lower band, re-evaluate with that
        band's (lighter) requirement. If even that would fall below 6h, cap so
        that effective work lands exactly on 6h.

        6h25m without breaks → 25 (not 30), 9h25m without breaks → 30 (not 45).
        """
        if raw_work_minutes <= BREAK_THRESHOLD_1:
            return 0

        for threshold, required in BREAK_RULES:
            if raw_work_minutes <= threshold:
                continue
            shortage = max(0, required - qualifying_break_minutes)
            if shortage == 0:
                return 0
            if raw_work_minutes - shortage > threshold:
                return shortage

        return raw_work_minutes - BREAK_THRESHOLD_1

    def check_compliance(self, work_minutes: int, break_minutes: int) -> ComplianceResult:
        result = ComplianceResult()

        # 1. Höchstarbeitszeit (§3)
        if work_minutes > MAX_WORK_MINUTES:
            result.add_violation(
                f"§3 ArbZG: Maximum work time of 10 hours exceeded (worked {work_minutes} min)"
            )
        elif work_minutes > WARN_WORK_MINUTES:
            result.add_note(
                f"§3 ArbZG: Regular 8-hour limit exceeded (worked {work_minutes} min); "
                "ensure 6-month average compliance"
            )

        # 2. Pausenpflicht (§4)
        required = self.required_break_minutes(work_minutes)
        if required > 0 and break_minutes < required:
            result.add_violation(
                f"§4 ArbZG: Insufficient break time ({break_minutes} min taken, "
                f"{required} min required for {work_minutes} min of work)"
            )

        return result

    def check_rest_period(
        self,
        previous_day_last_entry: datetime | None,
        current_day_first_entry: datetime | None,
    ) -> bool:
        if previous_day_last_entry is None or current_day_first_entry is None:
            return True
        return minutes_between(previous_day_last_entry, current_day_first_entry) >= MIN_REST_MINUTES

    def evaluate_day(
        self,
        raw_work_minutes: int,
        qualifying_break_minutes: int,
        short_break_minutes: int = 0,
    ) -> tuple[WorkTimeCalculation, ComplianceResult]:
        """Auto-deduction followed by the compliance check on the effective figures."""
        calc = WorkTimeCalculation(
            raw_work_minutes=raw_work_minutes,
            qualifying_break_minutes=qualifying_break_minutes,
            short_break_minutes=short_break_minutes,
            auto_deducted_minutes=self.compute_auto_deduction(raw_work_minutes, qualifying_break_minutes),
        )
        result = self.check_compliance(calc.effective_work_minutes, calc.effective_qualifying_break_minutes)
        if calc.auto_deducted_minutes:
            logger.debug(
                "Auto-deducted %d min (raw work %d min, qualifying breaks %d min)",
                calc.auto_deducted_minutes,
                raw_work_minutes,
                qualifying_break_minutes,
            )
        return calc, result


# Gemeinsame Instanz für Services und API-Dependencies
compliance_service = ComplianceService()
