"""
Numerical Safeguards: Decimal Money Primitives

Модуль обеспечивает корректное представление денежных сумм и ставок:
- Конверсия входов (int/float/str/Decimal) в Decimal без накопления
  ошибки двоичного float (float конвертируется через str)
- Отклонение NaN/Inf, bool и нечисловых значений
- Квантование денежных сумм до фиксированного числа знаков
- Валидация диапазонов с InvalidInput

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Все денежные вычисления выполняются в Decimal
2. NaN/Inf никогда не попадают в расчёт (InvalidInput на входе)
3. Квантование детерминировано (ROUND_HALF_EVEN)
"""

from decimal import ROUND_HALF_EVEN, Decimal, InvalidOperation, getcontext
from typing import Final, Union

from treasury_calc.core.errors import InvalidInput

# =============================================================================
# ПАРАМЕТРЫ ПРЕДСТАВЛЕНИЯ
# =============================================================================

# Число знаков после запятой для денежных сумм по умолчанию.
# Достаточно для сравнения с float-формулами с относительной точностью ~1e-12.
MONEY_PLACES_DEFAULT: Final[int] = 10

# Точность decimal-контекста для compounding
DECIMAL_PRECISION_DEFAULT: Final[int] = 28

ZERO: Final[Decimal] = Decimal("0")
ONE: Final[Decimal] = Decimal("1")
HUNDRED: Final[Decimal] = Decimal("100")

Number = Union[int, float, str, Decimal]


# =============================================================================
# КОНВЕРСИЯ
# =============================================================================


def is_valid_decimal(value: Decimal) -> bool:
    """
    Проверка, является ли Decimal конечным числом (не NaN, не Inf).

    Examples:
        >>> is_valid_decimal(Decimal("1.5"))
        True
        >>> is_valid_decimal(Decimal("NaN"))
        False
    """
    return value.is_finite()


def to_decimal(value: Number, name: str) -> Decimal:
    """
    Конверсия входного значения в Decimal.

    float конвертируется через str(), чтобы 13.33 стало Decimal("13.33"),
    а не двоичным приближением 13.3300000000000000710542735760100185871124267578125.

    Args:
        value: int, float, str или Decimal
        name: Имя параметра (для сообщения об ошибке)

    Returns:
        Конечное Decimal значение

    Raises:
        InvalidInput: bool, нечисловой тип, нераспознанная строка, NaN/Inf

    Examples:
        >>> to_decimal(13.33, "rate")
        Decimal('13.33')
        >>> to_decimal("1000", "principal")
        Decimal('1000')
    """
    # bool является подклассом int, но суммой быть не может
    if isinstance(value, bool):
        raise InvalidInput(f"{name} must be a number, got bool {value!r}")

    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, int):
        result = Decimal(value)
    elif isinstance(value, (float, str)):
        try:
            result = Decimal(str(value).strip())
        except InvalidOperation:
            raise InvalidInput(f"{name} is not a valid number: {value!r}") from None
    else:
        raise InvalidInput(
            f"{name} must be int, float, str or Decimal, got {type(value).__name__}"
        )

    if not is_valid_decimal(result):
        raise InvalidInput(f"{name} must be finite (not NaN/Inf), got {value!r}")

    return result


def quantize_money(value: Decimal, places: int = MONEY_PLACES_DEFAULT) -> Decimal:
    """
    Квантование денежной суммы до `places` знаков после запятой.

    Результат должен помещаться в точность текущего decimal-контекста:
    цифры целой части плюс `places` строго меньше ctx.prec.

    Raises:
        InvalidInput: сумма слишком велика для точности контекста

    Examples:
        >>> quantize_money(Decimal("1.123456789012345"), 10)
        Decimal('1.1234567890')
        >>> quantize_money(Decimal("2.5"), 0)
        Decimal('2')
    """
    if places < 0:
        raise ValueError(f"places must be non-negative, got {places}")

    digits = max(value.adjusted(), 0) + 1 + places
    precision = getcontext().prec
    # Один запасной разряд под перенос при округлении
    if digits >= precision:
        raise InvalidInput(
            f"result magnitude exceeds precision: {value:.6E} needs {digits} digits "
            f"at {places} places, context precision is {precision}"
        )

    return value.quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_EVEN)


def percent_to_fraction(rate_percent: Decimal) -> Decimal:
    """
    Конверсия ставки из процентов в долю: 13.33 → 0.1333.
    """
    return rate_percent / HUNDRED


# =============================================================================
# ВАЛИДАЦИЯ И ПРОВЕРКИ
# =============================================================================


def validate_positive(value: Decimal, name: str) -> None:
    """
    Валидация, что значение строго положительное.

    Raises:
        InvalidInput: Если value <= 0 или NaN/Inf
    """
    if not is_valid_decimal(value):
        raise InvalidInput(f"{name} must be finite (not NaN/Inf), got {value}")

    if value <= ZERO:
        raise InvalidInput(f"{name} must be positive, got {value}")


def validate_non_negative(value: Decimal, name: str) -> None:
    """
    Валидация, что значение неотрицательное.

    Raises:
        InvalidInput: Если value < 0 или NaN/Inf
    """
    if not is_valid_decimal(value):
        raise InvalidInput(f"{name} must be finite (not NaN/Inf), got {value}")

    if value < ZERO:
        raise InvalidInput(f"{name} must be non-negative, got {value}")


def validate_in_range(
    value: Decimal,
    name: str,
    min_value: Decimal | None = None,
    max_value: Decimal | None = None,
) -> None:
    """
    Валидация, что значение в заданном диапазоне [min_value, max_value].

    Raises:
        InvalidInput: Если value вне диапазона или NaN/Inf
    """
    if not is_valid_decimal(value):
        raise InvalidInput(f"{name} must be finite (not NaN/Inf), got {value}")

    if min_value is not None and value < min_value:
        raise InvalidInput(f"{name} must be >= {min_value}, got {value}")

    if max_value is not None and value > max_value:
        raise InvalidInput(f"{name} must be <= {max_value}, got {value}")
