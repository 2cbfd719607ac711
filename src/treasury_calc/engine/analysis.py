"""Position analysis: полный разбор позиции одной операцией.

Последовательность:
1. Стоимость при удержании до погашения
2. Стоимость при продаже на as_of_date
3. Реинвестирование чистой выручки от продажи в каждый из кандидатов,
   начиная с as_of_date
"""

import logging
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Iterable, Optional

from treasury_calc.core.math.date_math import DateLike
from treasury_calc.core.math.numerical_safeguards import Number
from treasury_calc.core.domain.bond import BondRecord
from treasury_calc.core.domain.result import MarkToMarketResult, MaturityResult
from treasury_calc.engine.calculator import TreasuryCalculator
from treasury_calc.engine.reinvestment import ReinvestmentOption, simulate_reinvestment_options

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PositionAnalysis:
    """Результаты всех трёх режимов для одной позиции."""

    at_maturity: MaturityResult
    mark_to_market: MarkToMarketResult
    reinvestment_options: tuple[ReinvestmentOption, ...] = field(default_factory=tuple)

    @property
    def early_exit_cost(self) -> Decimal:
        """На сколько чистая стоимость при погашении выше, чем при продаже сегодня."""
        return self.at_maturity.net_value - self.mark_to_market.net_value


def analyze_position(
    principal: Number,
    contracted_rate_percent: Number,
    market_rate_percent: Number,
    start_date: DateLike,
    maturity_date: DateLike,
    as_of_date: Optional[DateLike] = None,
    bonds: Optional[Iterable[BondRecord]] = None,
    floating_reference_rate: Optional[Number] = None,
    calculator: Optional[TreasuryCalculator] = None,
) -> PositionAnalysis:
    """
    Полный разбор позиции: погашение, продажа сегодня, реинвестирование.

    Для реинвестирования используется net_value результата mark-to-market.
    bonds=None или [] означает отсутствие кандидатов.
    """
    calc = calculator or TreasuryCalculator()

    at_maturity = calc.calculate_at_maturity(
        principal, contracted_rate_percent, start_date, maturity_date
    )
    current = calc.calculate_mark_to_market(
        principal,
        contracted_rate_percent,
        market_rate_percent,
        start_date,
        maturity_date,
        as_of_date,
    )
    options = simulate_reinvestment_options(
        current.net_value,
        bonds,
        current.as_of_date,
        floating_reference_rate=floating_reference_rate,
        calculator=calc,
    )

    logger.debug(
        f"Position analysis: net at maturity={at_maturity.net_value} "
        f"net today={current.net_value} options={len(options)}"
    )
    return PositionAnalysis(
        at_maturity=at_maturity,
        mark_to_market=current,
        reinvestment_options=tuple(options),
    )
