"""
Engine: три режима расчёта и симуляция реинвестирования.
"""

from treasury_calc.engine.analysis import PositionAnalysis, analyze_position
from treasury_calc.engine.calculator import (
    TreasuryCalculator,
    calculate_at_maturity,
    calculate_mark_to_market,
    simulate_reinvestment,
)
from treasury_calc.engine.config import CalculatorConfig
from treasury_calc.engine.reinvestment import (
    ReinvestmentOption,
    resolve_reinvestment_rate,
    simulate_reinvestment_options,
)

__all__ = [
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
