"""Stage 1: Severance Estimator - statutory and common-law entitlement.

Statutory minimum notice comes from the per-jurisdiction notice rule table.
Statutory severance is Ontario-only and gated on tenure and employer payroll.
Common-law reasonable notice is an age/position/tenure multiplier model
producing a week range; the recommended figure is the range midpoint.

Every amount is ``weeks * annual_salary / 52`` rounded half-up to whole units.
"""

import logging
import math
from typing import Any

from models.schemas.employee_profile import EmployeeProfile
from models.schemas.entitlement_estimate import (
    CommonLawRange,
    EntitlementEstimate,
    WeeksAmount,
)
from services import jurisdictions
from services.money import round_half_up
from services.pipeline.base import BaseStageService

logger = logging.getLogger(__name__)

WEEKS_PER_MONTH = 4.33

AGE_MULTIPLIERS = {
    "under-30": 0.8,
    "30-40": 1.0,
    "41-50": 1.2,
    "51-60": 1.4,
    "60-70": 1.6,
    "70+": 1.8,
}

POSITION_MULTIPLIERS = {
    "upper-management": 1.8,
    "middle-management": 1.5,
    "sales-manager": 1.4,
    "lower-management": 1.3,
    "professional": 1.2,
    "supervisor": 1.1,
    "technical": 1.0,
    "social-services": 1.0,
    "clerical": 0.9,
    "salesperson": 0.9,
    "labourer": 0.8,
}

# Common-law notice bounds, in months
MIN_NOTICE_FLOOR = 0.5
MIN_NOTICE_CAP = 6
MAX_NOTICE_CAP = 24


class InvalidInputError(ValueError):
    """Profile values that cannot produce a meaningful estimate."""


class SeveranceEstimatorService(BaseStageService):
    stage_name = "s1_severance_estimator"

    def load(self) -> None:
        jurisdictions.check_tables()
        logger.info(
            "Severance estimator ready (%d jurisdictions)",
            len(jurisdictions.list_jurisdictions()),
        )

    def run(self, **kwargs: Any) -> EntitlementEstimate:
        self.ensure_loaded()
        profile: EmployeeProfile = kwargs["profile"]
        return estimate(profile)


def validate_profile(profile: EmployeeProfile) -> None:
    """Reject values the schema would reject, for profiles built without validation.

    Raises:
        InvalidInputError: non-positive or non-finite amounts, malformed service duration.
    """
    if profile.annual_salary is None or profile.annual_salary <= 0:
        raise InvalidInputError("Annual salary must be positive")
    for field in ("annual_salary", "employer_payroll", "current_offer"):
        value = getattr(profile, field)
        if value is not None and not math.isfinite(value):
            raise InvalidInputError(f"{field} must be a finite amount")
    if profile.years_of_service < 0:
        raise InvalidInputError("Years of service cannot be negative")
    if not 0 <= profile.months_of_service <= 11:
        raise InvalidInputError("Months of service must be between 0 and 11")


def estimate(profile: EmployeeProfile) -> EntitlementEstimate:
    validate_profile(profile)

    # Collectively-bargained employees are outside common-law analysis.
    if profile.is_union_member:
        logger.debug("Union member profile, returning zero estimate")
        return EntitlementEstimate()

    total_years = profile.total_years
    weekly_salary = profile.weekly_salary

    statutory_weeks = statutory_notice_weeks(profile.jurisdiction, total_years)
    severance_weeks = statutory_severance_weeks(
        profile.jurisdiction, total_years, profile.employer_payroll
    )
    min_weeks, max_weeks = common_law_weeks(
        total_years, profile.age_bracket, profile.job_position
    )
    recommended_weeks = round_half_up((min_weeks + max_weeks) / 2)

    def pay(weeks: int) -> int:
        return round_half_up(weeks * weekly_salary)

    return EntitlementEstimate(
        statutory_minimum=WeeksAmount(weeks=statutory_weeks, amount=pay(statutory_weeks)),
        statutory_severance=(
            WeeksAmount(weeks=severance_weeks, amount=pay(severance_weeks))
            if severance_weeks is not None
            else None
        ),
        common_law_range=CommonLawRange(
            min_weeks=min_weeks,
            max_weeks=max_weeks,
            min_amount=pay(min_weeks),
            max_amount=pay(max_weeks),
        ),
        recommended=WeeksAmount(weeks=recommended_weeks, amount=pay(recommended_weeks)),
    )


# ---------------------------------------------------------------------------
# Statutory rules
# ---------------------------------------------------------------------------

def _standard_notice(total_years: float, cap: int) -> int:
    return min(math.floor(total_years), cap)


def _federal_notice(total_years: float, cap: int) -> int:
    # Two weeks after the first year, then one more week per year.
    if total_years < 1:
        return 0
    return min(2 + math.floor(total_years - 1), cap)


NOTICE_FORMULAS = {
    jurisdictions.FORMULA_STANDARD: _standard_notice,
    jurisdictions.FORMULA_FEDERAL: _federal_notice,
}


def statutory_notice_weeks(jurisdiction: str, total_years: float) -> int:
    formula, cap = jurisdictions.lookup_notice_rule(jurisdiction)
    return NOTICE_FORMULAS[formula](total_years, cap)


def statutory_severance_weeks(
    jurisdiction: str,
    total_years: float,
    employer_payroll: float | None,
) -> int | None:
    """Weeks of statutory severance pay, or None when not applicable."""
    if jurisdiction != jurisdictions.SEVERANCE_JURISDICTION:
        return None
    if employer_payroll is None or employer_payroll < jurisdictions.SEVERANCE_PAYROLL_THRESHOLD:
        return None
    if total_years < jurisdictions.SEVERANCE_MIN_YEARS:
        return None
    return min(math.floor(total_years), jurisdictions.SEVERANCE_CAP_WEEKS)


# ---------------------------------------------------------------------------
# Common-law reasonable notice
# ---------------------------------------------------------------------------

def common_law_months(
    total_years: float,
    age_bracket: str,
    job_position: str,
) -> tuple[float, float]:
    """Reasonable-notice bounds in months before conversion to weeks."""
    base_months = max(1, min(2, total_years))
    adjusted = (
        base_months
        * total_years
        * AGE_MULTIPLIERS[age_bracket]
        * POSITION_MULTIPLIERS[job_position]
    )
    min_months = max(MIN_NOTICE_FLOOR, min(adjusted * 0.6, MIN_NOTICE_CAP))
    max_months = min(adjusted * 1.2, MAX_NOTICE_CAP)
    return min_months, max_months


def common_law_weeks(
    total_years: float,
    age_bracket: str,
    job_position: str,
) -> tuple[int, int]:
    """Reasonable-notice bounds in whole weeks, never inverted."""
    min_months, max_months = common_law_months(total_years, age_bracket, job_position)
    min_weeks = round_half_up(min_months * WEEKS_PER_MONTH)
    max_weeks = round_half_up(max_months * WEEKS_PER_MONTH)
    if min_weeks > max_weeks:
        # Very short service: the 0.5-month floor overshoots the upper bound.
        logger.debug(
            "Clamping inverted common-law range %d > %d weeks (%.2f years)",
            min_weeks, max_weeks, total_years,
        )
        min_weeks = max_weeks
    return min_weeks, max_weeks
