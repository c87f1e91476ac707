"""
Volume Credit Calculator

Computes loyalty credits earned by a single performance.
"""

from ..models import Performance, Play, PlayType, PricingRules


class CreditEngine:
    """Calculates volume credits for one performance."""

    def __init__(self, rules: PricingRules | None = None):
        self.rules = rules or PricingRules()

    def credits(self, performance: Performance, play: Play) -> int:
        """
        Credits = seats above the base threshold, never negative.
        Comedies earn an extra credit for every `comedy_extra_volume_factor` attendees.
        """
        audience = performance.audience
        result = max(audience - self.rules.base_volume_credit_threshold, 0)

        if play.type is PlayType.COMEDY:
            result += audience // self.rules.comedy_extra_volume_factor

        return result
