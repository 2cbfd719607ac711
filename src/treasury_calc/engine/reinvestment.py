"""Reinvestment: симуляция вложения выручки в другие выпуски.

Кандидаты приходят из внешнего источника как список BondRecord
(возможно пустой или отсутствующий: это означает "кандидатов нет").

Ставка кандидата приводится к абсолютной годовой ставке явно:
- FLOATING: floating_reference_rate + спред выпуска
- FIXED / INFLATION_INDEXED: котируемая ставка выпуска

Текущая ключевая ставка всегда передаётся аргументом и никогда не
читается из глобального состояния.
"""

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable, Optional

from treasury_calc.core.errors import InvalidInput
from treasury_calc.core.math.date_math import DateLike, to_calendar_date
from treasury_calc.core.math.numerical_safeguards import Number, to_decimal, validate_non_negative
from treasury_calc.core.domain.bond import BondRecord, BondType
from treasury_calc.core.domain.result import MaturityResult
from treasury_calc.engine.calculator import TreasuryCalculator

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReinvestmentOption:
    """Результат симуляции для одного кандидата."""

    bond: BondRecord
    resolved_rate: Decimal  # Абсолютная ставка, % годовых
    result: MaturityResult


def resolve_reinvestment_rate(
    bond: BondRecord,
    floating_reference_rate: Optional[Number] = None,
) -> Decimal:
    """
    Абсолютная годовая ставка выпуска для симуляции.

    Args:
        bond: Кандидат
        floating_reference_rate: Текущая ключевая ставка, % годовых
            (обязательна для FLOATING)

    Raises:
        InvalidInput: FLOATING без floating_reference_rate, отрицательная ставка

    Examples:
        >>> selic = BondRecord(
        ...     name="Tesouro Selic 2029",
        ...     type=BondType.FLOATING,
        ...     rate=Decimal("0.049"),
        ...     maturity_date="2029-03-01",
        ... )
        >>> resolve_reinvestment_rate(selic, "10.75")
        Decimal('10.799')
    """
    spread = to_decimal(bond.rate, f"{bond.name} rate")

    if bond.type != BondType.FLOATING:
        return spread

    if floating_reference_rate is None:
        raise InvalidInput(
            f"{bond.name}: floating_reference_rate is required for floating-rate bonds"
        )

    reference = to_decimal(floating_reference_rate, "floating_reference_rate")
    validate_non_negative(reference, "floating_reference_rate")
    return reference + spread


def simulate_reinvestment_options(
    available_amount: Number,
    bonds: Optional[Iterable[BondRecord]],
    start_date: DateLike,
    floating_reference_rate: Optional[Number] = None,
    calculator: Optional[TreasuryCalculator] = None,
) -> list[ReinvestmentOption]:
    """
    Симуляция реинвестирования доступной суммы в каждый из кандидатов.

    Кандидаты, погашаемые не позже start_date, пропускаются: вложиться
    в них уже нельзя. Порядок результатов совпадает с порядком кандидатов.

    Returns:
        Список ReinvestmentOption; [] для bonds None или []
    """
    if not bonds:
        return []

    calc = calculator or TreasuryCalculator()
    start = to_calendar_date(start_date, "start_date")

    options = []
    for bond in bonds:
        if bond.maturity_date <= start:
            logger.info(
                f"Skipping reinvestment candidate {bond.name}: "
                f"matures {bond.maturity_date.isoformat()} on or before {start.isoformat()}"
            )
            continue

        rate = resolve_reinvestment_rate(bond, floating_reference_rate)
        result = calc.simulate_reinvestment(available_amount, rate, start, bond.maturity_date)
        options.append(ReinvestmentOption(bond=bond, resolved_rate=rate, result=result))

    logger.debug(f"Simulated {len(options)} reinvestment option(s) from {start.isoformat()}")
    return options

