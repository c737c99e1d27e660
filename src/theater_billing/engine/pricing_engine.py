"""
Pricing Engine - maps (play type, audience) to a charge and volume credits.

Pure integer arithmetic in cents, driven entirely by a PricingRule table:
- Base amount plus per-person surcharge over the audience threshold
- Optional flat surcharge over the threshold and per-seat charge (comedy)
- Volume credits over a per-type threshold, plus an optional bonus
- Execution trace for every pricing step
"""
from typing import Optional

from .errors import InvalidAudience
from .models import Charge
from .pricing_rules import PRICING_RULES, PlayType, PricingRule
from .currency import format_currency


def _check_audience(audience) -> int:
    # bool is an int subclass but never a seat count
    if isinstance(audience, bool) or not isinstance(audience, int) or audience < 0:
        raise InvalidAudience(audience)
    return audience


class PricingEngine:
    """
    Computes amount and volume credits for a single performance.

    Resolution order:
    1. Parse the play type (UnknownPlayType if unsupported)
    2. Validate the audience (InvalidAudience if negative or not an int)
    3. Look up the PricingRule for the type
    4. Apply base, over-threshold and per-seat terms for the amount
    5. Apply threshold and bonus terms for the credits
    """

    def __init__(self, rules: Optional[dict[PlayType, PricingRule]] = None):
        self.rules = rules if rules is not None else PRICING_RULES

    def amount(self, play_type, audience: int) -> int:
        """Charge in cents for one performance."""
        return self.price(play_type, audience).amount

    def volume_credits(self, play_type, audience: int) -> int:
        """Volume credits earned by one performance."""
        return self.price(play_type, audience).volume_credits

    def price(self, play_type, audience: int) -> Charge:
        """
        Price a performance with full traceability.

        Every trace value is a term of the charged amount or credits.

        Returns:
            Charge with amount, credits and the steps that produced them
        """
        parsed = PlayType.parse(play_type)
        rule = self.rules[parsed]
        audience = _check_audience(audience)

        charge = Charge(play_type=parsed.value, audience=audience, amount=0, volume_credits=0)

        charge.amount += rule.base_amount
        charge.add_trace("Base Amount", f"{parsed.value} base", format_currency(rule.base_amount))

        over = audience - rule.audience_threshold
        if over > 0:
            if rule.over_threshold_flat:
                charge.amount += rule.over_threshold_flat
                charge.add_trace(
                    "Over Threshold",
                    f"Flat surcharge above {rule.audience_threshold} seats",
                    format_currency(rule.over_threshold_flat)
                )
            surcharge = rule.over_threshold_per_person * over
            charge.amount += surcharge
            charge.add_trace(
                "Over Threshold",
                f"{over} seats × {format_currency(rule.over_threshold_per_person)}",
                format_currency(surcharge)
            )
        else:
            charge.add_trace("Over Threshold", f"No surcharge at or below {rule.audience_threshold} seats")

        if rule.per_audience:
            seat_charge = rule.per_audience * audience
            charge.amount += seat_charge
            charge.add_trace(
                "Per Seat",
                f"{audience} seats × {format_currency(rule.per_audience)}",
                format_currency(seat_charge)
            )

        threshold_credits = max(audience - rule.volume_credit_threshold, 0)
        charge.volume_credits += threshold_credits
        charge.add_trace("Volume Credits", f"Seats above {rule.volume_credit_threshold}", str(threshold_credits))

        if rule.extra_credit_factor:
            bonus = audience // rule.extra_credit_factor
            charge.volume_credits += bonus
            charge.add_trace("Volume Credits", f"Bonus of one per {rule.extra_credit_factor} seats", str(bonus))
        return charge


_default_engine = PricingEngine()


def amount(play_type, audience: int) -> int:
    """Charge in cents using the standard rule table."""
    return _default_engine.amount(play_type, audience)


def volume_credits(play_type, audience: int) -> int:
    """Volume credits using the standard rule table."""
    return _default_engine.volume_credits(play_type, audience)
