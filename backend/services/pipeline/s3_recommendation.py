"""Stage 3: Recommendation Selector - pick one cost option.

Two-stage ranking over the actionable options (consultation is never an
actionable recommendation when there is a gap):

    1. rank_by_net_benefit         net benefit, highest first
    2. apply_contingency_preference
                                   a contingency option is promoted ahead of any
                                   higher-ranked option whose net benefit is within
                                   10% of the potential gap

The first option of the final ranking is the recommendation.
"""

import logging
from typing import Any

from models.schemas.cost_analysis import CostAnalysis, CostOption
from services.pipeline.base import BaseStageService

logger = logging.getLogger(__name__)

NEAR_TIE_FRACTION = 0.10


class RecommendationService(BaseStageService):
    stage_name = "s3_recommendation"

    def load(self) -> None:
        logger.info("Recommendation selector ready")

    def run(self, **kwargs: Any) -> CostAnalysis:
        self.ensure_loaded()
        options: list[CostOption] = kwargs["options"]
        potential_gap: float = kwargs["potential_gap"]
        return CostAnalysis(
            options=options,
            recommended=select_recommended(options, potential_gap),
            potential_gap=potential_gap,
            jurisdiction=kwargs["jurisdiction"],
        )


def _net(option: CostOption) -> float:
    return option.net_benefit if option.net_benefit is not None else 0


def rank_by_net_benefit(options: list[CostOption]) -> list[CostOption]:
    """Stable sort, highest net benefit first."""
    return sorted(options, key=_net, reverse=True)


def apply_contingency_preference(
    ranked: list[CostOption],
    potential_gap: float,
) -> list[CostOption]:
    """Promote contingency options over near-tied, higher-ranked options.

    ``ranked`` must already be in descending net-benefit order. Options whose
    net benefit differs from a contingency option's by less than the band
    (10% of the gap) lose to it; options further ahead keep their place.
    """
    band = potential_gap * NEAR_TIE_FRACTION
    result = list(ranked)
    for pos in range(len(result)):
        option = result[pos]
        if option.type != "contingency":
            continue
        target = pos
        while (
            target > 0
            and result[target - 1].type != "contingency"
            and abs(_net(result[target - 1]) - _net(option)) < band
        ):
            target -= 1
        if target != pos:
            result.insert(target, result.pop(pos))
    return result


def select_recommended(options: list[CostOption], potential_gap: float) -> CostOption:
    """Pick exactly one option. ``options[0]`` must be the consultation."""
    consultation = next((o for o in options if o.type == "consultation"), options[0])
    if potential_gap <= 0:
        return consultation

    candidates = [o for o in options if o.type != "consultation"]
    if not candidates:
        logger.warning("No actionable options for gap %.0f, falling back to consultation", potential_gap)
        return consultation

    ranking = apply_contingency_preference(rank_by_net_benefit(candidates), potential_gap)
    logger.debug("Option ranking: %s", [o.type for o in ranking])
    return ranking[0]
