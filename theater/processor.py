"""
Statement Calculator - Main Orchestrator

Prices every performance on an invoice and aggregates the totals.
"""

import json
import logging
from typing import Any, Dict

from .calculators import CreditEngine, PricingEngine
from .errors import StatementError
from .models import (
    Invoice, PerformanceLine, PlayCatalog, PricingRules, StatementInput, StatementResult
)
from .output import OutputBuilder
from .validators import InputValidator

logger = logging.getLogger(__name__)


class StatementCalculator:
    """
    Main orchestrator for statement calculation.

    For each performance, in invoice order:
    1. Resolve the play from the catalog
    2. Price the performance
    3. Compute its volume credits
    4. Accumulate totals

    Any failure aborts the whole invoice; no partial result is returned.
    """

    def __init__(self, rules: PricingRules | None = None):
        self.rules = rules or PricingRules()
        self.validator = InputValidator()
        self.pricing_engine = PricingEngine(self.rules)
        self.credit_engine = CreditEngine(self.rules)
        self.output_builder = OutputBuilder()

    def calculate(self, invoice: Invoice, catalog: PlayCatalog) -> StatementResult:
        """
        Calculate the statement for an invoice.

        Raises:
            UnknownPlayError: a performance references a play not in the catalog
            UnknownPlayTypeError: a play's genre has no pricing rule
        """
        lines = []
        total_amount = 0
        total_credits = 0

        for performance in invoice.performances:
            play = catalog.lookup(performance.play_id)
            amount = self.pricing_engine.price(performance, play)
            credits = self.credit_engine.credits(performance, play)

            total_amount += amount
            total_credits += credits
            lines.append(PerformanceLine(
                play_id=performance.play_id,
                play_name=play.name,
                amount=amount,
                audience=performance.audience,
                volume_credits=credits,
            ))

        logger.debug(
            f"Statement for {invoice.customer}: {len(lines)} performances, "
            f"total {total_amount}, credits {total_credits}"
        )

        return StatementResult(
            customer=invoice.customer,
            lines=tuple(lines),
            total_amount=total_amount,
            total_volume_credits=total_credits,
        )

    def render(self, invoice: Invoice, catalog: PlayCatalog) -> str:
        """Calculate and return the plain-text statement."""
        return self.output_builder.renderer.render(self.calculate(invoice, catalog))

    def process(self, input_data: StatementInput) -> StatementResult:
        """
        Validate input and calculate the statement.

        Rules carried on the input override this calculator's rules.
        """
        self.validator.validate(input_data)
        calculator = self if input_data.rules == self.rules else StatementCalculator(input_data.rules)
        return calculator.calculate(input_data.invoice, input_data.catalog)

    def process_from_dict(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Process a statement from raw dictionary input.

        Convenience method for API usage.
        """
        input_data = StatementInput.from_dict(data)
        result = self.process(input_data)
        return self.output_builder.build(result)


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================

def process_statement_from_dict(input_data: Dict[str, Any]) -> Dict[str, Any]:
    """Process a statement from Python dict and return Python dict."""
    calculator = StatementCalculator()
    return calculator.process_from_dict(input_data)


def error_response(error: Exception) -> Dict[str, Any]:
    """Error envelope shared by the JSON and HTTP entry points."""
    response = {"error": str(error), "status": "validation_failed"}
    if isinstance(error, StatementError):
        response["error"] = error.message
        response["code"] = error.code.value
    return response


def process_statement_from_json(json_input: str) -> str:
    """
    Process a statement from JSON string input and return JSON string output.
    """
    try:
        input_data = json.loads(json_input)
        result = process_statement_from_dict(input_data)
        return json.dumps(result, indent=2)

    except json.JSONDecodeError as e:
        return json.dumps({"error": f"Invalid JSON: {e}", "status": "failed"}, indent=2)

    except (ValueError, KeyError, TypeError) as e:
        return json.dumps(error_response(e), indent=2)

    except Exception as e:
        logger.error(f"Processing error: {e}", exc_info=True)
        return json.dumps({"error": str(e), "status": "failed"}, indent=2)
