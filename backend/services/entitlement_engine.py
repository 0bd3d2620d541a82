"""Public entry points of the entitlement and recommendation engine.

Thin, synchronous wrappers around the pipeline stages. Every function is a
pure computation over its arguments and the read-only jurisdiction tables,
so concurrent calls never interact.
"""

import logging
import math

from models.schemas.cost_analysis import CostAnalysis, CostOption, CostOverrides
from models.schemas.employee_profile import EmployeeProfile
from models.schemas.entitlement_estimate import EntitlementEstimate
from models.schemas.guidance_entry import GuidanceEntry
from models.schemas.jurisdiction_pricing import JurisdictionPricing
from services import jurisdictions
from services.pipeline.s1_severance_estimator import InvalidInputError
from services.pipeline.s2_cost_options import effective_tax_rate
from services.pipeline.stage_registry import get_stage

logger = logging.getLogger(__name__)

lookup_tax_rate = jurisdictions.lookup_tax_rate
lookup_pricing = jurisdictions.lookup_pricing


def estimate_severance(profile: EmployeeProfile) -> EntitlementEstimate:
    """Statutory and common-law entitlement for one employee.

    Raises:
        InvalidInputError: non-positive salary or malformed service duration.
    """
    return get_stage("s1_severance_estimator").run(profile=profile)


def compute_potential_gap(
    recommended_amount: float,
    offer: float | None,
    statutory_floor: float,
) -> float:
    """Monetary stake that justifies engaging a lawyer.

    The shortfall against the employer's offer when there is one and it is
    short, otherwise the upside over the statutory floor, otherwise 0.
    An offer of 0 is treated as no offer.
    """
    if offer:
        offer_gap = recommended_amount - offer
        if offer_gap > 0:
            return offer_gap
    upside = recommended_amount - statutory_floor
    return upside if upside > 0 else 0


def analyze_legal_costs(
    pricing: JurisdictionPricing,
    jurisdiction: str,
    offer: float | None,
    recommended_amount: float,
    potential_gap: float,
    statutory_minimum: float = 0,
    overrides: CostOverrides | None = None,
) -> CostAnalysis:
    """Generate the tax-adjusted cost options and pick the recommended one.

    ``offer``, ``recommended_amount`` and ``statutory_minimum`` describe the
    context the gap was derived from; only ``potential_gap`` drives the options.

    Raises:
        InvalidInputError: a non-finite gap.
    """
    if not math.isfinite(potential_gap):
        raise InvalidInputError("Potential gap must be a finite amount")
    tax_rate = effective_tax_rate(jurisdiction, overrides)
    logger.debug(
        "Analyzing legal costs: jurisdiction=%s gap=%.0f recommended=%.0f offer=%s floor=%.0f",
        jurisdiction, potential_gap, recommended_amount, offer, statutory_minimum,
    )
    options: list[CostOption] = get_stage("s2_cost_options").run(
        pricing=pricing,
        potential_gap=potential_gap,
        tax_rate=tax_rate,
        overrides=overrides,
    )
    return get_stage("s3_recommendation").run(
        options=options,
        potential_gap=potential_gap,
        jurisdiction=jurisdiction,
    )


def compose_guidance(potential_gap: float, options: list[CostOption]) -> list[GuidanceEntry]:
    return get_stage("s4_guidance").run(potential_gap=potential_gap, options=options)
