"""
Input Validation for the Theater Statement Engine

Validates all input data before calculation begins.
Raises ValueError with clear messages for any constraint violations.
"""

from dataclasses import fields

from .models import Invoice, PlayCatalog, PricingRules, StatementInput


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


class InputValidator:
    """Validates statement input according to business rules."""

    def validate(self, input_data: StatementInput) -> None:
        """
        Run all validations. Raises ValueError if any check fails.
        """
        self._validate_invoice(input_data.invoice)
        self._validate_catalog(input_data.catalog)
        self._validate_rules(input_data.rules)

    def _validate_invoice(self, invoice: Invoice) -> None:
        """Validate invoice-level constraints."""
        if not isinstance(invoice.customer, str) or not invoice.customer.strip():
            raise ValueError(f"customer must be a non-empty string, got: {invoice.customer!r}")

        for i, performance in enumerate(invoice.performances):
            if not isinstance(performance.play_id, str) or not performance.play_id:
                raise ValueError(f"Performance {i} playID must be a non-empty string")
            if not _is_int(performance.audience):
                raise ValueError(
                    f"Performance {i} audience must be an integer, got: {performance.audience!r}"
                )
            if performance.audience < 0:
                raise ValueError(f"Performance {i} audience cannot be negative, got: {performance.audience}")

    def _validate_catalog(self, catalog: PlayCatalog) -> None:
        """Validate play catalog entries."""
        for play_id, play in catalog.plays.items():
            if not isinstance(play.name, str) or not play.name:
                raise ValueError(f"Play {play_id!r} name must be a non-empty string")

    def _validate_rules(self, rules: PricingRules) -> None:
        """Validate pricing rule overrides."""
        for f in fields(rules):
            value = getattr(rules, f.name)
            if not _is_int(value) or value < 0:
                raise ValueError(f"{f.name} must be a non-negative integer, got: {value!r}")

        if rules.comedy_extra_volume_factor == 0:
            raise ValueError("comedy_extra_volume_factor must be positive")
