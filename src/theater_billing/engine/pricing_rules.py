"""
Pricing rule table keyed on play type.

All amounts are in cents. Adding or removing a play type is a change to
PlayType and PRICING_RULES only; the engine has no per-type branches.
"""
from dataclasses import dataclass
from enum import Enum

from .errors import UnknownPlayType


class PlayType(str, Enum):
    """Supported play types."""
    TRAGEDY = "tragedy"
    COMEDY = "comedy"
    HISTORY = "history"
    PASTORAL = "pastoral"

    @classmethod
    def parse(cls, value) -> 'PlayType':
        """Resolve a raw type string, raising UnknownPlayType if unsupported."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise UnknownPlayType(value) from None


@dataclass(frozen=True)
class PricingRule:
    """
    Pricing and credit parameters for one play type.

    amount  = base_amount
            + over_threshold_flat + over_threshold_per_person * (audience - audience_threshold)
              (only when audience > audience_threshold)
            + per_audience * audience
    credits = max(audience - volume_credit_threshold, 0)
            + audience // extra_credit_factor (when extra_credit_factor is set)
    """
    base_amount: int
    audience_threshold: int
    over_threshold_per_person: int
    volume_credit_threshold: int
    over_threshold_flat: int = 0
    per_audience: int = 0
    extra_credit_factor: int = 0


PRICING_RULES: dict[PlayType, PricingRule] = {
    PlayType.TRAGEDY: PricingRule(
        base_amount=40000,
        audience_threshold=30,
        over_threshold_per_person=1000,
        volume_credit_threshold=30,
    ),
    PlayType.COMEDY: PricingRule(
        base_amount=30000,
        audience_threshold=20,
        over_threshold_per_person=500,
        volume_credit_threshold=30,
        over_threshold_flat=10000,
        per_audience=300,
        extra_credit_factor=5,
    ),
    PlayType.HISTORY: PricingRule(
        base_amount=20000,
        audience_threshold=20,
        over_threshold_per_person=1000,
        volume_credit_threshold=20,
    ),
    PlayType.PASTORAL: PricingRule(
        base_amount=40000,
        audience_threshold=20,
        over_threshold_per_person=2500,
        volume_credit_threshold=10,
    ),
}
