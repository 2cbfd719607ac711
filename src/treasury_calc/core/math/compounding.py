"""
Compounding: Future Value & Present Value

Модуль обеспечивает наращение и дисконтирование по годовой ставке:
- future_value:  principal × (1 + r/100) ^ years
- present_value: future_value / (1 + r/100) ^ years

Годовое начисление с дробной степенью (years может быть дробным),
а не ежедневная капитализация.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. years == 0 → значение возвращается без изменений
2. rate == 0 → значение возвращается без изменений
3. Domain: 1 + r/100 > 0, иначе CompoundingDomainViolation
4. Вычисления в Decimal-контексте фиксированной точности (детерминированы)
"""

from decimal import Decimal, localcontext

from treasury_calc.core.errors import InvalidInput
from treasury_calc.core.math.numerical_safeguards import (
    DECIMAL_PRECISION_DEFAULT,
    ONE,
    ZERO,
    is_valid_decimal,
    percent_to_fraction,
)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class CompoundingDomainViolation(InvalidInput):
    """
    Нарушение domain для (1 + r/100) ^ years: база степени ≤ 0.

    Ставка -100% и ниже не имеет экономического смысла и делает
    дробную степень неопределённой.
    """


# =============================================================================
# GROWTH FACTOR
# =============================================================================


def safe_growth_base(rate_percent: Decimal) -> Decimal:
    """
    База степени 1 + r/100 с проверкой domain.

    Raises:
        CompoundingDomainViolation: если 1 + r/100 <= 0
        InvalidInput: если rate_percent содержит NaN/Inf

    Examples:
        >>> safe_growth_base(Decimal("13.33"))
        Decimal('1.1333')
    """
    if not is_valid_decimal(rate_percent):
        raise InvalidInput(f"Rate contains NaN/Inf: {rate_percent}")

    base = ONE + percent_to_fraction(rate_percent)

    if base <= ZERO:
        raise CompoundingDomainViolation(
            f"Compounding domain violation: 1 + {rate_percent}/100 = {base} <= 0"
        )

    return base


def growth_factor(
    rate_percent: Decimal,
    years: Decimal,
    precision: int = DECIMAL_PRECISION_DEFAULT,
) -> Decimal:
    """
    Множитель наращения (1 + r/100) ^ years.

    Args:
        rate_percent: Годовая ставка в процентах (13.33 = 13.33% годовых)
        years: Срок в годах (может быть дробным)
        precision: Точность decimal-контекста

    Returns:
        Множитель > 0; ровно 1 при years == 0 или rate == 0

    Examples:
        >>> growth_factor(Decimal("10"), Decimal("2"))
        Decimal('1.21')
        >>> growth_factor(Decimal("0"), Decimal("3.5"))
        Decimal('1')
    """
    base = safe_growth_base(rate_percent)

    if years == ZERO or rate_percent == ZERO:
        return ONE

    with localcontext() as ctx:
        ctx.prec = precision
        return base ** years


# =============================================================================
# FUTURE / PRESENT VALUE
# =============================================================================


def future_value(
    principal: Decimal,
    rate_percent: Decimal,
    years: Decimal,
    precision: int = DECIMAL_PRECISION_DEFAULT,
) -> Decimal:
    """
    Наращенная стоимость: principal × (1 + r/100) ^ years.

    Examples:
        >>> future_value(Decimal("1000"), Decimal("10"), Decimal("2"))
        Decimal('1210.00')
        >>> future_value(Decimal("1000"), Decimal("10"), Decimal("0"))
        Decimal('1000')
    """
    if years == ZERO or rate_percent == ZERO:
        safe_growth_base(rate_percent)
        return principal

    factor = growth_factor(rate_percent, years, precision)

    with localcontext() as ctx:
        ctx.prec = precision
        return principal * factor


def present_value(
    future_amount: Decimal,
    rate_percent: Decimal,
    years: Decimal,
    precision: int = DECIMAL_PRECISION_DEFAULT,
) -> Decimal:
    """
    Дисконтированная стоимость: future_amount / (1 + r/100) ^ years.

    Используется для mark-to-market: контрактная выплата при погашении
    дисконтируется к сегодняшнему дню по текущей рыночной ставке.

    Examples:
        >>> present_value(Decimal("1210.00"), Decimal("10"), Decimal("2"))
        Decimal('1000')
        >>> present_value(Decimal("1210"), Decimal("0"), Decimal("2"))
        Decimal('1210')
    """
    if years == ZERO or rate_percent == ZERO:
        safe_growth_base(rate_percent)
        return future_amount

    factor = growth_factor(rate_percent, years, precision)

    with localcontext() as ctx:
        ctx.prec = precision
        return future_amount / factor
