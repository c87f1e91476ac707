"""
THEATER STATEMENT ENGINE
Prices performances and accrues volume credits for customer invoices.
"""

from .errors import ErrorCode, StatementError, UnknownPlayError, UnknownPlayTypeError
from .models import (
    Invoice, Performance, Play, PlayCatalog, PlayType, PricingRules, StatementInput, StatementResult
)
from .processor import StatementCalculator

__all__ = [
    'StatementCalculator',
    'StatementInput',
    'StatementResult',
    'Invoice',
    'Performance',
    'Play',
    'PlayCatalog',
    'PlayType',
    'PricingRules',
    'ErrorCode',
    'StatementError',
    'UnknownPlayError',
    'UnknownPlayTypeError',
]
