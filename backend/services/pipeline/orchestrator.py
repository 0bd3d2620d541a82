"""Pipeline orchestrator: wires the four stages together.

Flow:
    EmployeeProfile
      └─ S1 estimate_severance(profile)             → EntitlementEstimate
              ↓ recommended amount, statutory floor
         compute_potential_gap(...)                  → potential gap
              ↓
      ├─ S2 generate_options(pricing, gap, tax)     → list[CostOption]
      ├─ S3 select_recommended(options, gap)        → CostAnalysis
      └─ S4 compose(gap, options)                   → list[GuidanceEntry]
         project_all(options, ...)                   → list[NetTakeHome]
                       ↓
         AnalysisResponse (estimate + costs + guidance + take-home + context)
"""

import logging

from models.responses import AnalysisContext, AnalysisResponse
from models.schemas.cost_analysis import CostOverrides
from models.schemas.employee_profile import EmployeeProfile
from services import entitlement_engine, income_tax, jurisdictions
from services.money import round_half_up

logger = logging.getLogger(__name__)


def analyze(
    profile: EmployeeProfile,
    overrides: CostOverrides | None = None,
    include_tax: bool = True,
) -> AnalysisResponse:
    """Run the full pipeline for one profile."""
    overrides = overrides or CostOverrides()
    code = profile.jurisdiction
    recognized = jurisdictions.is_known_jurisdiction(code)
    if not recognized:
        logger.warning(
            "Unrecognized jurisdiction %r, using default notice rule, tax rate and pricing",
            code,
        )

    # --- Stage 1: Entitlement ---
    estimate = entitlement_engine.estimate_severance(profile)
    recommended_amount = estimate.recommended.amount
    statutory_floor = estimate.statutory_floor

    # --- Gap: offer shortfall, else upside over the statutory floor ---
    offer = profile.current_offer
    potential_gap = entitlement_engine.compute_potential_gap(
        recommended_amount, offer, statutory_floor
    )

    # Excluding tax is modelled as a zero tax-rate override.
    if not include_tax:
        overrides = overrides.model_copy(update={"tax_rate": 0.0})

    # --- Stages 2 + 3: Options and recommendation ---
    cost_analysis = entitlement_engine.analyze_legal_costs(
        pricing=entitlement_engine.lookup_pricing(code),
        jurisdiction=code,
        offer=offer,
        recommended_amount=recommended_amount,
        potential_gap=potential_gap,
        statutory_minimum=statutory_floor,
        overrides=overrides,
    )

    # --- Stage 4: Guidance ---
    guidance = entitlement_engine.compose_guidance(potential_gap, cost_analysis.options)

    # --- Net take-home after income tax and lawyer fees, per option ---
    income_tax_rate = income_tax.estimate_income_tax_rate(profile.annual_salary, code)
    net_take_home = income_tax.project_all(
        cost_analysis.options,
        starting_amount=offer or statutory_floor,
        recovered_amount=recommended_amount,
        income_tax_rate=income_tax_rate,
    )

    context = AnalysisContext(
        is_based_on_offer=bool(offer),
        potential_upside=recommended_amount - statutory_floor,
        recommended_amount=recommended_amount,
        statutory_floor=statutory_floor,
        offer_weeks=(
            round_half_up(offer / profile.weekly_salary) if offer else None
        ),
        tax_label=jurisdictions.tax_label(code),
        tax_included=include_tax,
        jurisdiction_recognized=recognized,
        income_tax_rate=income_tax_rate,
    )
    logger.info(
        "Analysis complete: jurisdiction=%s gap=%.0f recommended_option=%s",
        code, potential_gap, cost_analysis.recommended.type,
    )
    return AnalysisResponse(
        estimate=estimate,
        cost_analysis=cost_analysis,
        guidance=guidance,
        net_take_home=net_take_home,
        context=context,
    )
