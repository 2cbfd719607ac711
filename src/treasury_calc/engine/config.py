"""Конфигурация расчётного движка."""

from dataclasses import dataclass
from decimal import Decimal

from treasury_calc.core.math.numerical_safeguards import (
    DECIMAL_PRECISION_DEFAULT,
    MONEY_PLACES_DEFAULT,
)


@dataclass(frozen=True)
class CalculatorConfig:
    """Конфигурация TreasuryCalculator.

    Длина года (365.25) намеренно не настраивается: она одна для всех
    режимов, иначе результаты режимов несравнимы.
    """

    # Максимально допустимая ставка, % годовых (ставки выше → InvalidInput)
    max_rate_percent: Decimal = Decimal("100")

    # Знаков после запятой у денежных сумм (gross, налоги)
    money_places: int = MONEY_PLACES_DEFAULT

    # Точность decimal-контекста
    precision: int = DECIMAL_PRECISION_DEFAULT

    def __post_init__(self):
        if self.max_rate_percent <= 0:
            raise ValueError(f"max_rate_percent must be positive, got {self.max_rate_percent}")
        if self.money_places < 0:
            raise ValueError(f"money_places must be non-negative, got {self.money_places}")
        # Суммы до 1e15 с money_places знаками; крупнее → InvalidInput в quantize_money
        if self.precision < self.money_places + 16:
            raise ValueError(
                f"precision {self.precision} too small for money_places {self.money_places}"
            )
