"""Rough income-tax estimate on a severance payment.

The rate is the federal marginal bracket for the employee's salary plus a flat
approximate provincial rate. Tax credits and the progressive provincial
brackets are ignored, so the figure is only a planning aid for comparing how
much of the recovered amount each cost option leaves in hand.
"""

import logging
from types import MappingProxyType

from models.schemas.cost_analysis import CostOption
from models.schemas.net_take_home import NetTakeHome
from services.money import round_half_up

logger = logging.getLogger(__name__)

# (lower bound, marginal rate), 2024 federal brackets, ascending.
FEDERAL_BRACKETS: tuple[tuple[float, float], ...] = (
    (0, 0.15),
    (55_867, 0.205),
    (111_733, 0.26),
    (173_205, 0.29),
    (246_752, 0.33),
)

# Approximate average provincial/territorial rates for 2024.
PROVINCIAL_RATES = MappingProxyType({
    "ON": 0.1316,
    "BC": 0.1229,
    "AB": 0.10,
    "SK": 0.125,
    "MB": 0.1275,
    "NS": 0.1475,
    "NB": 0.14,
    "NL": 0.145,
    "PE": 0.137,
    "NT": 0.117,
    "YT": 0.12,
    "NU": 0.11,
    "QC": 0.20,
    "Federal": 0.15,
})

DEFAULT_PROVINCIAL_RATE = 0.15


def federal_marginal_rate(annual_salary: float) -> float:
    rate = FEDERAL_BRACKETS[0][1]
    for lower, bracket_rate in FEDERAL_BRACKETS:
        if annual_salary < lower:
            break
        rate = bracket_rate
    return rate


def estimate_income_tax_rate(annual_salary: float, jurisdiction: str) -> float:
    """Combined federal marginal plus provincial rate, as a fraction."""
    provincial = PROVINCIAL_RATES.get(jurisdiction, DEFAULT_PROVINCIAL_RATE)
    return round(federal_marginal_rate(annual_salary) + provincial, 4)


def project_net_take_home(
    option: CostOption,
    starting_amount: float,
    recovered_amount: float,
    income_tax_rate: float,
) -> NetTakeHome:
    income_tax = round_half_up(recovered_amount * income_tax_rate)
    net = recovered_amount - income_tax - option.total_cost
    return NetTakeHome(
        option_type=option.type,
        starting_amount=starting_amount,
        recovered_amount=recovered_amount,
        income_tax=income_tax,
        lawyer_fees=option.total_cost,
        net_take_home=net,
        improvement=net - starting_amount,
    )


def project_all(
    options: list[CostOption],
    starting_amount: float,
    recovered_amount: float,
    income_tax_rate: float,
) -> list[NetTakeHome]:
    """Net take-home for every option, in the options' order."""
    projections = [
        project_net_take_home(option, starting_amount, recovered_amount, income_tax_rate)
        for option in options
    ]
    logger.debug(
        "Projected net take-home for %d options at %.2f%% income tax",
        len(projections), income_tax_rate * 100,
    )
    return projections
