"""
Pricing Calculator

Computes the amount owed for a single performance, in cents.
"""

from ..models import Performance, Play, PlayType, PricingRules


class PricingEngine:
    """Calculates the charge for one performance based on its play's genre."""

    def __init__(self, rules: PricingRules | None = None):
        self.rules = rules or PricingRules()

    def price(self, performance: Performance, play: Play) -> int:
        """
        Calculate the amount for a performance.

        Tragedy: flat base, plus a per-seat surcharge above the threshold.
        Comedy:  flat base, plus an over-capacity charge above the threshold,
                 plus a per-seat rate on the whole audience.
        """
        if play.type is PlayType.TRAGEDY:
            return self._price_tragedy(performance.audience)
        return self._price_comedy(performance.audience)

    def _price_tragedy(self, audience: int) -> int:
        rules = self.rules
        amount = rules.tragedy_base_amount
        if audience > rules.tragedy_audience_threshold:
            amount += rules.tragedy_amount_per_extra_seat * (audience - rules.tragedy_audience_threshold)
        return amount

    def _price_comedy(self, audience: int) -> int:
        rules = self.rules
        amount = rules.comedy_base_amount
        if audience > rules.comedy_audience_threshold:
            amount += (
                rules.comedy_over_base_capacity_amount
                + rules.comedy_over_base_capacity_per_person * (audience - rules.comedy_audience_threshold)
            )
        # Applies whether or not the over-capacity branch fired
        amount += rules.comedy_amount_per_audience * audience
        return amount
