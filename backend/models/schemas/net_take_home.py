"""Per-option projection of what the employee keeps after tax and fees."""

from pydantic import BaseModel

from models.schemas.cost_analysis import OptionType


class NetTakeHome(BaseModel):
    model_config = {"frozen": True, "allow_inf_nan": False}

    option_type: OptionType
    starting_amount: float  # current offer, else the statutory floor
    recovered_amount: float  # recommended common-law amount
    income_tax: int
    lawyer_fees: int
    net_take_home: float
    improvement: float  # net_take_home minus starting_amount, may be negative
