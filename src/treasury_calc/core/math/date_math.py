"""
DateMath: Day Count & Year Fraction

Календарная арифметика дат без времени суток:
- days_between: целое число дней (floor), отрицательное если end < start
- years_between: days_between / 365.25

Время суток всегда отбрасывается, поэтому переходы на летнее время
не влияют на подсчёт дней.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. DAYS_PER_YEAR = 365.25 одинаков для всех режимов расчёта
2. Частичные дни никогда не округляются вверх
3. Нераспознанная дата → InvalidDate
"""

from datetime import date, datetime
from decimal import Decimal
from typing import Final, Union

from treasury_calc.core.errors import InvalidDate

# Фиксированная длина года для аннуализации (без учёта високосных лет)
DAYS_PER_YEAR: Final[Decimal] = Decimal("365.25")

DateLike = Union[date, datetime, str]


def to_calendar_date(value: DateLike, name: str = "date") -> date:
    """
    Нормализация входа к datetime.date.

    Принимает date, datetime (время суток отбрасывается) и ISO строки
    "YYYY-MM-DD" или "YYYY-MM-DDTHH:MM:SS" (формат публичного фида ставок).

    Raises:
        InvalidDate: Если значение не распознано или дата не существует

    Examples:
        >>> to_calendar_date("2028-01-01")
        datetime.date(2028, 1, 1)
        >>> to_calendar_date("2028-01-01T00:00:00")
        datetime.date(2028, 1, 1)
    """
    # datetime является подклассом date, поэтому проверяется первым
    if isinstance(value, datetime):
        return value.date()

    if isinstance(value, date):
        return value

    if isinstance(value, str):
        text = value.strip()
        try:
            return date.fromisoformat(text)
        except ValueError:
            pass
        try:
            return datetime.fromisoformat(text).date()
        except ValueError:
            raise InvalidDate(f"{name} is not a valid ISO date: {value!r}") from None

    raise InvalidDate(
        f"{name} must be date, datetime or ISO string, got {type(value).__name__}"
    )


def days_between(start: DateLike, end: DateLike) -> int:
    """
    Целое число календарных дней от start до end.

    Разность дат без времени суток всегда целая, поэтому floor
    выполняется естественным образом.

    Examples:
        >>> days_between("2024-01-01", "2028-01-01")
        1461
        >>> days_between("2024-01-10", "2024-01-01")
        -9
    """
    start_date = to_calendar_date(start, "start")
    end_date = to_calendar_date(end, "end")
    return (end_date - start_date).days


def years_between(start: DateLike, end: DateLike) -> Decimal:
    """
    Доля года между датами: days_between / 365.25.

    Examples:
        >>> years_between("2024-01-01", "2028-01-01")
        Decimal('4')
    """
    return Decimal(days_between(start, end)) / DAYS_PER_YEAR
