from pydantic import BaseModel, Field

from models.schemas.cost_analysis import CostOption, CostOverrides
from models.schemas.employee_profile import EmployeeProfile


class AnalyzeRequest(BaseModel):
    model_config = {"allow_inf_nan": False}

    profile: EmployeeProfile
    overrides: CostOverrides = CostOverrides()
    include_tax: bool = Field(True, description="Apply the jurisdiction's sales tax to legal fees")


class LegalCostRequest(BaseModel):
    model_config = {"allow_inf_nan": False}

    jurisdiction: str = Field(..., min_length=1, max_length=16)
    current_offer: float | None = Field(None, ge=0)
    recommended_amount: float = Field(..., ge=0)
    potential_gap: float
    statutory_minimum: float = Field(0, ge=0)
    overrides: CostOverrides = CostOverrides()


class GuidanceRequest(BaseModel):
    model_config = {"allow_inf_nan": False}

    potential_gap: float
    options: list[CostOption] = Field(..., max_length=8)
