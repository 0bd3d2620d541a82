"""Stage 4: Guidance Composer - "when to choose" text per cost option.

Template-based, no decision logic of its own: one entry per option type
present, in canonical order. The dollar thresholds in the copy are advisory
and do not influence which options were generated.
"""

import logging
from typing import Any

from models.schemas.cost_analysis import OPTION_TYPES, CostOption
from models.schemas.guidance_entry import GuidanceEntry
from services.money import format_currency, round_half_up
from services.pipeline.base import BaseStageService

logger = logging.getLogger(__name__)


class GuidanceService(BaseStageService):
    stage_name = "s4_guidance"

    def load(self) -> None:
        # No reference data to load, pure template engine
        logger.info("Guidance composer ready (template-based)")

    def run(self, **kwargs: Any) -> list[GuidanceEntry]:
        self.ensure_loaded()
        return compose(kwargs["potential_gap"], kwargs["options"])


def compose(potential_gap: float, options: list[CostOption]) -> list[GuidanceEntry]:
    if potential_gap <= 0:
        return []

    by_type: dict[str, CostOption] = {}
    for option in options:
        by_type.setdefault(option.type, option)

    builders = {
        "consultation": _consultation_guidance,
        "hourly": _hourly_guidance,
        "flat": _flat_guidance,
        "contingency": _contingency_guidance,
    }
    return [
        builders[option_type](by_type[option_type], potential_gap)
        for option_type in OPTION_TYPES
        if option_type in by_type
    ]


# ---------------------------------------------------------------------------
# Template builders
# ---------------------------------------------------------------------------

def _consultation_guidance(option: CostOption, gap: float) -> GuidanceEntry:
    return GuidanceEntry(
        title="Consultation Only",
        description="Get legal advice without full representation",
        when_to_choose=[
            f"Potential gap is small (under {format_currency(5000)})",
            "You want to understand your rights but may negotiate yourself",
            "You're unsure if pursuing legal action is worth it",
            "You need quick advice on a severance package",
        ],
        considerations=[
            f"Cost: {format_currency(option.total_cost)}",
            "You handle negotiations yourself after getting advice",
            "Best for straightforward cases or when gap is minimal",
            "No ongoing legal representation",
        ],
    )


def _hourly_guidance(option: CostOption, gap: float) -> GuidanceEntry:
    return GuidanceEntry(
        title="Hourly Rate",
        description="Pay by the hour for negotiation services",
        when_to_choose=[
            f"Potential gap is moderate ({format_currency(5000)} - {format_currency(25000)})",
            "Case complexity is uncertain",
            "You want flexibility in legal representation",
            "Negotiation may be quick or may require multiple rounds",
        ],
        considerations=[
            f"Estimated cost: {format_currency(option.total_cost)}",
            "Costs can vary based on actual hours needed",
            "You pay regardless of outcome",
            "Good for cases where complexity is hard to predict",
        ],
    )


def _flat_guidance(option: CostOption, gap: float) -> GuidanceEntry:
    return GuidanceEntry(
        title="Flat Fee Package",
        description="Fixed fee for complete negotiation",
        when_to_choose=[
            f"Potential gap is moderate to large ({format_currency(10000)}+)",
            "You want cost certainty upfront",
            "Case appears straightforward or moderately complex",
            "You prefer predictable expenses",
        ],
        considerations=[
            f"Fixed cost: {format_currency(option.total_cost)}",
            "No surprises - you know the total cost upfront",
            "You pay regardless of outcome",
            "Best when case complexity is predictable",
        ],
    )


def _contingency_guidance(option: CostOption, gap: float) -> GuidanceEntry:
    if option.base_cost:
        share = round_half_up(option.base_cost / gap * 100)
        fee_line = f"Fee: {format_currency(option.base_cost)} ({share}% of recovery)"
    else:
        fee_line = "Fee: Percentage of recovery"

    if option.estimated_recovery:
        recovery_line = f"Estimated net recovery: {format_currency(option.estimated_recovery)}"
    else:
        recovery_line = "Estimated net recovery: Varies"

    return GuidanceEntry(
        title="Contingency Fee",
        description="Pay only if lawyer recovers additional severance",
        when_to_choose=[
            f"Potential gap is significant ({format_currency(15000)}+)",
            "You want to minimize financial risk",
            "You're confident there's a strong case",
            "You prefer to share risk with your lawyer",
        ],
        considerations=[
            fee_line,
            recovery_line,
            "No upfront costs - only pay if successful",
            "Lawyer is incentivized to maximize your recovery",
            "Best for larger gaps where risk-sharing makes sense",
        ],
    )
