"""
Domain models and value objects.

Contains BondRecord (входные кандидаты) и результаты расчётов.
"""

from treasury_calc.core.domain.bond import BondRecord, BondType
from treasury_calc.core.domain.result import (
    CalculationMode,
    CalculationResult,
    MarkToMarketResult,
    MaturityResult,
)

__all__ = [
    # Bond model
    "BondRecord",
    "BondType",
    # Results
    "CalculationMode",
    "CalculationResult",
    "MarkToMarketResult",
    "MaturityResult",
]
