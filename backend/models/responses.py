from pydantic import BaseModel

from models.schemas.cost_analysis import CostAnalysis
from models.schemas.entitlement_estimate import EntitlementEstimate
from models.schemas.guidance_entry import GuidanceEntry
from models.schemas.net_take_home import NetTakeHome
from models.schemas.jurisdiction_pricing import JurisdictionPricing


class AnalysisContext(BaseModel):
    is_based_on_offer: bool = False
    potential_upside: float = 0.0  # recommended minus statutory floor, may be negative
    recommended_amount: float = 0.0
    statutory_floor: float = 0.0
    offer_weeks: int | None = None
    tax_label: str = "GST"
    tax_included: bool = True
    jurisdiction_recognized: bool = True
    income_tax_rate: float = 0.0  # estimated on the severance payment, fraction


class AnalysisResponse(BaseModel):
    estimate: EntitlementEstimate
    cost_analysis: CostAnalysis
    guidance: list[GuidanceEntry] = []
    net_take_home: list[NetTakeHome] = []
    context: AnalysisContext = AnalysisContext()


class JurisdictionSummary(BaseModel):
    code: str
    tax_rate: float
    tax_label: str


class PricingResponse(BaseModel):
    pricing: JurisdictionPricing
    tax_rate: float
    recognized: bool = True
