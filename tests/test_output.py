"""
Unit Tests for the Presentation Layer
"""

import pytest

from theater.models import PerformanceLine, StatementResult
from theater.output import OutputBuilder, StatementRenderer, to_money, usd


class TestUsd:
    """Test currency formatting of cent amounts."""

    def test_whole_dollars(self):
        assert usd(65000) == "$650.00"

    def test_thousands_separator(self):
        assert usd(173000) == "$1,730.00"

    def test_cents(self):
        assert usd(12345) == "$123.45"

    def test_zero(self):
        assert usd(0) == "$0.00"

    def test_to_money(self):
        assert to_money(46850) == 468.5


@pytest.fixture
def result():
    return StatementResult(
        customer="BigCo",
        lines=(
            PerformanceLine("hamlet", "Hamlet", 65000, 55, 25),
            PerformanceLine("as-like", "As You Like It", 58000, 35, 12),
        ),
        total_amount=123000,
        total_volume_credits=37,
    )


class TestStatementRenderer:
    """Test the plain-text statement layout."""

    def test_render(self, result):
        text = StatementRenderer().render(result)

        assert text == (
            "Statement for BigCo\n"
            "  Hamlet: $650.00 (55 seats)\n"
            "  As You Like It: $580.00 (35 seats)\n"
            "Amount owed is $1,230.00\n"
            "You earned 37 credits\n"
        )

    def test_render_empty(self):
        empty = StatementResult(customer="Nobody", lines=(), total_amount=0, total_volume_credits=0)

        assert StatementRenderer().render(empty) == (
            "Statement for Nobody\n"
            "Amount owed is $0.00\n"
            "You earned 0 credits\n"
        )


class TestOutputBuilder:
    """Test the API response layout."""

    def test_build(self, result):
        output = OutputBuilder().build(result)

        assert output["customer"] == "BigCo"
        assert output["total_amount_cents"] == 123000
        assert output["total_amount"] == 1230.0
        assert output["total_volume_credits"] == 37
        assert output["performances"][0] == {
            "play_id": "hamlet",
            "play_name": "Hamlet",
            "audience": 55,
            "amount_cents": 65000,
            "amount": 650.0,
            "volume_credits": 25,
        }
        assert output["statement"].endswith("You earned 37 credits\n")
