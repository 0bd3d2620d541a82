"""Stage 1 output: statutory and common-law entitlement estimate."""

from pydantic import BaseModel


class WeeksAmount(BaseModel):
    model_config = {"frozen": True}

    weeks: int = 0
    amount: int = 0  # whole currency units


class CommonLawRange(BaseModel):
    model_config = {"frozen": True}

    min_weeks: int = 0
    max_weeks: int = 0
    min_amount: int = 0
    max_amount: int = 0


class EntitlementEstimate(BaseModel):
    """Structured output of the Severance Estimator.

    ``statutory_severance`` is None when the jurisdiction or the employer
    size makes it not applicable; it is never reported as a zero amount.
    """
    model_config = {"frozen": True}

    statutory_minimum: WeeksAmount = WeeksAmount()
    statutory_severance: WeeksAmount | None = None
    common_law_range: CommonLawRange = CommonLawRange()
    recommended: WeeksAmount = WeeksAmount()

    @property
    def statutory_floor(self) -> int:
        """Statutory minimum plus statutory severance when it applies."""
        severance = self.statutory_severance.amount if self.statutory_severance else 0
        return self.statutory_minimum.amount + severance
