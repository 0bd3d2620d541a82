"""Reference data: legal-fee pricing for one jurisdiction."""

from pydantic import BaseModel


class FeeRange(BaseModel):
    model_config = {"frozen": True}

    min: float
    max: float
    average: float | None = None


class JurisdictionPricing(BaseModel):
    """Legal-fee pricing tiers. Flat-fee and contingency tiers are optional."""
    model_config = {"frozen": True}

    jurisdiction: str
    consultation_fee: FeeRange
    hourly_rate: FeeRange
    flat_fee_range: FeeRange | None = None
    contingency_percentage: float | None = None  # percent units, 25 means 25%
