"""
Tax Schedules: Income Tax (IR) & Transaction Tax (IOF)

Две независимые ступенчатые таблицы от целого числа дней удержания:

Income tax (IR), регрессивная по сроку, применяется к прибыли при любом
погашении (в дату погашения или досрочно):
    d ≤ 180        → 22.5%
    181 ≤ d ≤ 360  → 20.0%
    361 ≤ d ≤ 720  → 17.5%
    d > 720        → 15.0%

Transaction tax (IOF), штраф за вывод в первые 30 дней:
    d < 1          → 96%
    1 ≤ d ≤ 29     → TRANSACTION_TAX_TABLE[d - 1]
    d ≥ 30         → 0%

Обе функции тотальны: любой int отображается в ставку, ошибок нет.
Таблица IOF опубликована регулятором и хранится как непрозрачная
константа: шаги не линейны и не выводятся формулой.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Final, Optional

# =============================================================================
# DATA CLASSES
# =============================================================================


@dataclass(frozen=True)
class TaxRateStep:
    """Ступень таблицы: ставка действует для d ≤ upper_bound_days."""

    upper_bound_days: Optional[int]  # None = без верхней границы
    rate: Decimal  # Доля (0.225 = 22.5%)


class TaxSchedule:
    """
    Упорядоченная ступенчатая таблица ставок.

    Lookup: первая ступень, у которой d ≤ upper_bound_days.
    Последняя ступень обязана быть без верхней границы, поэтому
    функция определена для любого d.
    """

    def __init__(self, name: str, steps: tuple[TaxRateStep, ...]):
        if not steps:
            raise ValueError(f"{name}: schedule must have at least one step")

        if steps[-1].upper_bound_days is not None:
            raise ValueError(f"{name}: last step must be unbounded")

        bounds = [s.upper_bound_days for s in steps[:-1]]
        if any(b is None for b in bounds):
            raise ValueError(f"{name}: only the last step may be unbounded")
        if any(b2 <= b1 for b1, b2 in zip(bounds, bounds[1:])):
            raise ValueError(f"{name}: step bounds must be strictly ascending")

        for step in steps:
            if not Decimal("0") <= step.rate <= Decimal("1"):
                raise ValueError(f"{name}: rate {step.rate} outside [0, 1]")

        self.name = name
        self.steps = steps

    def rate_for(self, days: int) -> Decimal:
        """Ставка для `days` дней удержания."""
        for step in self.steps:
            if step.upper_bound_days is None or days <= step.upper_bound_days:
                return step.rate
        # Недостижимо: последняя ступень без границы
        raise AssertionError(f"{self.name}: no step matched {days}")

    @property
    def thresholds(self) -> tuple[int, ...]:
        """Верхние границы всех ограниченных ступеней."""
        return tuple(s.upper_bound_days for s in self.steps[:-1])

    def __repr__(self) -> str:
        return f"TaxSchedule({self.name!r}, steps={len(self.steps)})"


# =============================================================================
# INCOME TAX (IR)
# =============================================================================

INCOME_TAX_SCHEDULE: Final[TaxSchedule] = TaxSchedule(
    "income_tax",
    (
        TaxRateStep(180, Decimal("0.225")),
        TaxRateStep(360, Decimal("0.20")),
        TaxRateStep(720, Decimal("0.175")),
        TaxRateStep(None, Decimal("0.15")),
    ),
)


# =============================================================================
# TRANSACTION TAX (IOF)
# =============================================================================

# Ставка IOF в процентах для дней 1..29 (индекс = d - 1)
TRANSACTION_TAX_TABLE: Final[tuple[int, ...]] = (
    96, 93, 90, 86, 83, 80, 76, 73, 70, 66,
    63, 60, 56, 53, 50, 46, 43, 40, 36, 33,
    30, 26, 23, 20, 16, 13, 10, 6, 0,
)

# Ставка для выкупа в день покупки (d < 1)
TRANSACTION_TAX_SAME_DAY_RATE: Final[Decimal] = Decimal("0.96")

# Начиная с этого дня IOF не взимается
TRANSACTION_TAX_EXEMPT_FROM_DAY: Final[int] = 30

TRANSACTION_TAX_SCHEDULE: Final[TaxSchedule] = TaxSchedule(
    "transaction_tax",
    (
        TaxRateStep(0, TRANSACTION_TAX_SAME_DAY_RATE),
        *(
            TaxRateStep(day, Decimal(pct) / Decimal(100))
            for day, pct in enumerate(TRANSACTION_TAX_TABLE, start=1)
        ),
        TaxRateStep(None, Decimal("0")),
    ),
)


# =============================================================================
# LOOKUP FUNCTIONS
# =============================================================================


def income_tax_rate(days: int) -> Decimal:
    """
    Ставка IR по сроку удержания.

    Examples:
        >>> income_tax_rate(180)
        Decimal('0.225')
        >>> income_tax_rate(181)
        Decimal('0.20')
        >>> income_tax_rate(1461)
        Decimal('0.15')
    """
    return INCOME_TAX_SCHEDULE.rate_for(days)


def transaction_tax_rate(days: int) -> Decimal:
    """
    Ставка IOF по сроку удержания.

    Examples:
        >>> transaction_tax_rate(0)
        Decimal('0.96')
        >>> transaction_tax_rate(5)
        Decimal('0.83')
        >>> transaction_tax_rate(30)
        Decimal('0')
    """
    return TRANSACTION_TAX_SCHEDULE.rate_for(days)
