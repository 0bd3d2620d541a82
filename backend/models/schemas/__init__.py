"""Inter-stage Pydantic contracts for the entitlement pipeline."""

from models.schemas.employee_profile import AGE_BRACKETS, JOB_POSITIONS, EmployeeProfile
from models.schemas.entitlement_estimate import (
    CommonLawRange,
    EntitlementEstimate,
    WeeksAmount,
)
from models.schemas.jurisdiction_pricing import FeeRange, JurisdictionPricing
from models.schemas.cost_analysis import CostAnalysis, CostOption, CostOverrides
from models.schemas.guidance_entry import GuidanceEntry
from models.schemas.net_take_home import NetTakeHome

__all__ = [
    "AGE_BRACKETS",
    "JOB_POSITIONS",
    "EmployeeProfile",
    "WeeksAmount",
    "CommonLawRange",
    "EntitlementEstimate",
    "FeeRange",
    "JurisdictionPricing",
    "CostOption",
    "CostOverrides",
    "CostAnalysis",
    "GuidanceEntry",
    "NetTakeHome",
]
