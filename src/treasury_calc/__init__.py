"""
treasury_calc: расчёт стоимости государственных облигаций после налогов.

Три вопроса:
- сколько позиция будет стоить при погашении (calculate_at_maturity)
- сколько она стоит при продаже сегодня (calculate_mark_to_market)
- сколько даст реинвестирование выручки в другой выпуск (simulate_reinvestment)
"""

from treasury_calc.core.domain import (
    BondRecord,
    BondType,
    CalculationMode,
    CalculationResult,
    MarkToMarketResult,
    MaturityResult,
)
from treasury_calc.core.errors import InvalidDate, InvalidInput, TreasuryCalcError
from treasury_calc.engine import (
    CalculatorConfig,
    PositionAnalysis,
    ReinvestmentOption,
    TreasuryCalculator,
    analyze_position,
    calculate_at_maturity,
    calculate_mark_to_market,
    resolve_reinvestment_rate,
    simulate_reinvestment,
    simulate_reinvestment_options,
)

__version__ = "0.1.0"

__all__ = [
    # Errors
    "TreasuryCalcError",
    "InvalidDate",
    "InvalidInput",
    # Domain
    "BondRecord",
    "BondType",
    "CalculationMode",
    "CalculationResult",
    "MarkToMarketResult",
    "MaturityResult",
    # Engine
    "CalculatorConfig",
    "TreasuryCalculator",
    "calculate_at_maturity",
    "calculate_mark_to_market",
    "simulate_reinvestment",
    "ReinvestmentOption",
    "resolve_reinvestment_rate",
    "simulate_reinvestment_options",
    "PositionAnalysis",
    "analyze_position",
]
