"""
Core math modules для расчётного ядра

Математические примитивы: Decimal-представление денег, календарная
арифметика дат, наращение и дисконтирование.
"""

# Numerical Safeguards
from treasury_calc.core.math.numerical_safeguards import (
    DECIMAL_PRECISION_DEFAULT,
    HUNDRED,
    MONEY_PLACES_DEFAULT,
    ONE,
    ZERO,
    Number,
    is_valid_decimal,
    percent_to_fraction,
    quantize_money,
    to_decimal,
    validate_in_range,
    validate_non_negative,
    validate_positive,
)

# Date Math
from treasury_calc.core.math.date_math import (
    DAYS_PER_YEAR,
    DateLike,
    days_between,
    to_calendar_date,
    years_between,
)

# Compounding
from treasury_calc.core.math.compounding import (
    CompoundingDomainViolation,
    future_value,
    growth_factor,
    present_value,
    safe_growth_base,
)

__all__ = [
    # Numerical Safeguards: Constants
    "DECIMAL_PRECISION_DEFAULT",
    "HUNDRED",
    "MONEY_PLACES_DEFAULT",
    "ONE",
    "ZERO",
    "Number",
    # Numerical Safeguards: Functions
    "is_valid_decimal",
    "percent_to_fraction",
    "quantize_money",
    "to_decimal",
    "validate_in_range",
    "validate_non_negative",
    "validate_positive",
    # Date Math
    "DAYS_PER_YEAR",
    "DateLike",
    "days_between",
    "to_calendar_date",
    "years_between",
    # Compounding
    "CompoundingDomainViolation",
    "future_value",
    "growth_factor",
    "present_value",
    "safe_growth_base",
]
