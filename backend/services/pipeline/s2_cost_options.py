"""Stage 2: Cost-Option Generator - tax-adjusted legal engagement options.

Given the monetary gap worth pursuing and a jurisdiction's pricing, builds
the menu of ways to engage a lawyer:

    consultation   always generated
    hourly         only when there is a gap
    flat           only when there is a gap and the jurisdiction has a flat tier
    contingency    only when there is a gap and the jurisdiction has a contingency tier

Each option carries base cost, tax (rounded half-up), total and net benefit.
"""

import logging
from typing import Any

from models.schemas.cost_analysis import CostOption, CostOverrides
from models.schemas.jurisdiction_pricing import JurisdictionPricing
from services import jurisdictions
from services.money import round_half_up
from services.pipeline.base import BaseStageService

logger = logging.getLogger(__name__)

# Gap thresholds separating simple / moderate / complex negotiations
MODERATE_GAP = 10_000
COMPLEX_GAP = 30_000

BASE_HOURS = {"simple": 5, "moderate": 8, "complex": 12}
COMPLEXITY_MULTIPLIERS = {"simple": 1.0, "moderate": 1.5, "complex": 2.0}


class CostOptionService(BaseStageService):
    stage_name = "s2_cost_options"

    def load(self) -> None:
        # Pure arithmetic over the pricing tables, nothing to prepare.
        logger.info("Cost option generator ready")

    def run(self, **kwargs: Any) -> list[CostOption]:
        self.ensure_loaded()
        return generate_options(
            pricing=kwargs["pricing"],
            potential_gap=kwargs["potential_gap"],
            tax_rate=kwargs["tax_rate"],
            overrides=kwargs.get("overrides"),
        )


def determine_complexity(gap: float) -> str:
    if gap < MODERATE_GAP:
        return "simple"
    if gap < COMPLEX_GAP:
        return "moderate"
    return "complex"


def estimate_hours(gap: float) -> int:
    """Lawyer hours expected for a negotiation of this size."""
    complexity = determine_complexity(gap)
    return round_half_up(BASE_HOURS[complexity] * COMPLEXITY_MULTIPLIERS[complexity])


def effective_tax_rate(jurisdiction: str, overrides: CostOverrides | None = None) -> float:
    if overrides is not None and overrides.tax_rate is not None:
        return overrides.tax_rate
    return jurisdictions.lookup_tax_rate(jurisdiction)


def _taxed(base: float, tax_rate: float) -> tuple[int, int]:
    tax = round_half_up(base * tax_rate)
    return tax, round_half_up(base + tax)


def generate_options(
    pricing: JurisdictionPricing,
    potential_gap: float,
    tax_rate: float,
    overrides: CostOverrides | None = None,
) -> list[CostOption]:
    overrides = overrides or CostOverrides()
    has_value = potential_gap > 0
    options: list[CostOption] = [_consultation(pricing, potential_gap, tax_rate)]

    if not has_value:
        return options

    options.append(_hourly(pricing, potential_gap, tax_rate, overrides.hours))
    if pricing.flat_fee_range is not None:
        options.append(_flat(pricing, potential_gap, tax_rate, overrides.flat_fee))
    if pricing.contingency_percentage is not None:
        options.append(
            _contingency(pricing, potential_gap, tax_rate, overrides.contingency_percentage)
        )

    logger.debug(
        "Generated %d options for gap %.0f at tax rate %.5f",
        len(options), potential_gap, tax_rate,
    )
    return options


# ---------------------------------------------------------------------------
# Option builders
# ---------------------------------------------------------------------------

def _consultation(pricing: JurisdictionPricing, gap: float, tax_rate: float) -> CostOption:
    base = pricing.consultation_fee.average
    if base is None:
        base = (pricing.consultation_fee.min + pricing.consultation_fee.max) / 2
    tax, total = _taxed(base, tax_rate)
    net = round_half_up(gap - total) if gap > 0 else -total
    return CostOption(
        type="consultation",
        name="Initial Consultation Only",
        description="Get legal advice and review your severance package",
        base_cost=base,
        tax=tax,
        total_cost=total,
        net_benefit=net,
    )


def _hourly(
    pricing: JurisdictionPricing,
    gap: float,
    tax_rate: float,
    custom_hours: float | None,
) -> CostOption:
    complexity = determine_complexity(gap)
    hours = custom_hours if custom_hours is not None else estimate_hours(gap)
    rate = pricing.hourly_rate.average
    if rate is None:
        rate = (pricing.hourly_rate.min + pricing.hourly_rate.max) / 2
    base = round_half_up(rate * hours)
    tax, total = _taxed(base, tax_rate)

    if custom_hours is not None:
        name = f"Hourly Rate ({hours:g} hours custom)"
        description = "Pay by the hour for negotiation services"
    else:
        name = f"Hourly Rate ({hours:g} hours estimated)"
        description = f"Pay by the hour for negotiation services ({complexity} case)"

    return CostOption(
        type="hourly",
        name=name,
        description=description,
        base_cost=base,
        tax=tax,
        total_cost=total,
        net_benefit=round_half_up(gap - total),
    )


def _flat(
    pricing: JurisdictionPricing,
    gap: float,
    tax_rate: float,
    custom_fee: float | None,
) -> CostOption:
    base = custom_fee if custom_fee is not None else pricing.flat_fee_range.min
    tax, total = _taxed(base, tax_rate)
    return CostOption(
        type="flat",
        name="Flat Fee Package" + (" (custom)" if custom_fee is not None else ""),
        description="Fixed fee for complete severance negotiation and review",
        base_cost=base,
        tax=tax,
        total_cost=total,
        net_benefit=round_half_up(gap - total),
    )


def _contingency(
    pricing: JurisdictionPricing,
    gap: float,
    tax_rate: float,
    custom_percentage: float | None,
) -> CostOption:
    percentage = (
        custom_percentage if custom_percentage is not None
        else pricing.contingency_percentage
    )
    fee = round_half_up(gap * (percentage / 100))
    tax, total = _taxed(fee, tax_rate)
    recovery = round_half_up(gap - total)
    suffix = " custom" if custom_percentage is not None else ""
    return CostOption(
        type="contingency",
        name=f"Contingency Fee ({percentage:g}%{suffix})",
        description="Pay only if lawyer successfully recovers additional severance",
        base_cost=fee,
        tax=tax,
        total_cost=total,
        estimated_recovery=recovery,
        # Recovery after fees is itself the benefit measure here.
        net_benefit=recovery,
    )
