"""
Calculators Package

Provides the per-performance calculation components.
"""

from .credit import CreditEngine
from .pricing import PricingEngine

__all__ = [
    "PricingEngine",
    "CreditEngine",
]
