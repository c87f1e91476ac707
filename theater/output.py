"""
Output Builder

Presentation layer: currency formatting, the text statement and the
API response built from a StatementResult.
"""

from decimal import Decimal

from .models import StatementResult


def to_money(amount: int) -> float:
    """Convert an amount in cents to dollars with 2 decimal places."""
    return round(float(Decimal(amount) / 100), 2)


def usd(amount: int) -> str:
    """Format an amount in cents as a US dollar string, e.g. $1,234.00."""
    return f"${Decimal(amount) / 100:,.2f}"


class StatementRenderer:
    """Renders the plain-text customer statement."""

    def render(self, result: StatementResult) -> str:
        lines = [f"Statement for {result.customer}"]
        for line in result.lines:
            lines.append(f"  {line.play_name}: {usd(line.amount)} ({line.audience} seats)")
        lines.append(f"Amount owed is {usd(result.total_amount)}")
        lines.append(f"You earned {result.total_volume_credits} credits")
        return "\n".join(lines) + "\n"


class OutputBuilder:
    """Builds the final output response."""

    def __init__(self, renderer: StatementRenderer | None = None):
        self.renderer = renderer or StatementRenderer()

    def build(self, result: StatementResult) -> dict:
        """Construct the complete statement response."""
        return {
            "customer": result.customer,
            "performances": [
                {
                    "play_id": line.play_id,
                    "play_name": line.play_name,
                    "audience": line.audience,
                    "amount_cents": line.amount,
                    "amount": to_money(line.amount),
                    "volume_credits": line.volume_credits,
                }
                for line in result.lines
            ],
            "total_amount_cents": result.total_amount,
            "total_amount": to_money(result.total_amount),
            "total_volume_credits": result.total_volume_credits,
            "statement": self.renderer.render(result),
        }
