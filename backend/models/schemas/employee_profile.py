"""Stage 1 input: the employee attributes an estimate is computed from."""

from typing import Literal, get_args

from pydantic import BaseModel, Field

AgeBracket = Literal["under-30", "30-40", "41-50", "51-60", "60-70", "70+"]

JobPosition = Literal[
    "upper-management",
    "middle-management",
    "lower-management",
    "sales-manager",
    "professional",
    "supervisor",
    "technical",
    "clerical",
    "salesperson",
    "labourer",
    "social-services",
]

# Youngest first; the common-law age multiplier grows along this order.
AGE_BRACKETS: tuple[str, ...] = get_args(AgeBracket)
JOB_POSITIONS: tuple[str, ...] = get_args(JobPosition)


class EmployeeProfile(BaseModel):
    """Validated employee attributes.

    The jurisdiction is a free-form code so unrecognized values fall through
    to the default notice rule and pricing tier instead of being rejected.
    """
    model_config = {"frozen": True, "allow_inf_nan": False}

    jurisdiction: str = Field(..., min_length=1, max_length=16)
    years_of_service: int = Field(..., ge=0)
    months_of_service: int = Field(0, ge=0, le=11)
    age_bracket: AgeBracket
    job_position: JobPosition
    annual_salary: float = Field(..., gt=0)
    is_union_member: bool = False
    employer_payroll: float | None = Field(None, ge=0)
    current_offer: float | None = Field(None, ge=0)

    @property
    def total_years(self) -> float:
        return self.years_of_service + self.months_of_service / 12

    @property
    def weekly_salary(self) -> float:
        return self.annual_salary / 52
