"""
Tax modules: ступенчатые таблицы IR/IOF и начисление налогов на прибыль.
"""

from treasury_calc.core.tax.composition import TaxBreakdown, compute_taxes, tax_on_profit
from treasury_calc.core.tax.schedules import (
    INCOME_TAX_SCHEDULE,
    TRANSACTION_TAX_EXEMPT_FROM_DAY,
    TRANSACTION_TAX_SAME_DAY_RATE,
    TRANSACTION_TAX_SCHEDULE,
    TRANSACTION_TAX_TABLE,
    TaxRateStep,
    TaxSchedule,
    income_tax_rate,
    transaction_tax_rate,
)

__all__ = [
    # Schedules
    "INCOME_TAX_SCHEDULE",
    "TRANSACTION_TAX_EXEMPT_FROM_DAY",
    "TRANSACTION_TAX_SAME_DAY_RATE",
    "TRANSACTION_TAX_SCHEDULE",
    "TRANSACTION_TAX_TABLE",
    "TaxRateStep",
    "TaxSchedule",
    "income_tax_rate",
    "transaction_tax_rate",
    # Composition
    "TaxBreakdown",
    "compute_taxes",
    "tax_on_profit",
]
