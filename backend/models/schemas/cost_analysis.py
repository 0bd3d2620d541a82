"""Stage 2/3 output: tax-adjusted legal-cost options and the recommendation."""

from typing import Literal

from pydantic import BaseModel, Field

OptionType = Literal["consultation", "hourly", "flat", "contingency"]

# Canonical display order for option types.
OPTION_TYPES: tuple[str, ...] = ("consultation", "hourly", "flat", "contingency")


class CostOverrides(BaseModel):
    """Caller-supplied replacements for the default cost assumptions.

    Every field is optional and None means "use the default"; an explicit
    0 is a real override (e.g. ``tax_rate=0`` when tax is excluded).
    """
    model_config = {"frozen": True, "allow_inf_nan": False}

    hours: float | None = Field(None, gt=0)
    flat_fee: float | None = Field(None, ge=0)
    contingency_percentage: float | None = Field(None, ge=0, le=100)
    tax_rate: float | None = Field(None, ge=0, le=1)


class CostOption(BaseModel):
    """A single way of engaging a lawyer, with tax and net-benefit projection."""
    model_config = {"frozen": True, "allow_inf_nan": False}

    type: OptionType
    name: str
    description: str
    base_cost: float
    tax: int
    total_cost: int
    estimated_recovery: int | None = None  # contingency only
    net_benefit: int | None = None


class CostAnalysis(BaseModel):
    """Structured output of the Cost-Option Generator + Recommendation Selector."""
    model_config = {"frozen": True, "allow_inf_nan": False}

    options: list[CostOption] = []
    recommended: CostOption
    potential_gap: float = 0.0
    jurisdiction: str

    def option(self, option_type: str) -> CostOption | None:
        return next((o for o in self.options if o.type == option_type), None)
