"""
Tax Composition: налоги только на прибыль

Обе ставки берутся по одному и тому же числу дней и применяются
независимо к одной и той же базе (gross − principal):

    profit = gross_value − principal
    income_tax      = profit × income_tax_rate(days)       если profit > 0, иначе 0
    transaction_tax = profit × transaction_tax_rate(days)  если profit > 0, иначе 0
    net_value       = gross_value − income_tax − transaction_tax

Налог никогда не начисляется на principal и не начисляется на убыток.
"""

from dataclasses import dataclass
from decimal import Decimal

from treasury_calc.core.math.numerical_safeguards import (
    MONEY_PLACES_DEFAULT,
    ZERO,
    quantize_money,
)
from treasury_calc.core.tax.schedules import income_tax_rate, transaction_tax_rate


@dataclass(frozen=True)
class TaxBreakdown:
    """Результат начисления налогов для одного расчёта."""

    days: int  # Срок, по которому выбраны обе ставки
    profit: Decimal  # gross − principal (может быть ≤ 0)
    income_tax_rate: Decimal
    income_tax: Decimal  # ≥ 0
    transaction_tax_rate: Decimal
    transaction_tax: Decimal  # ≥ 0

    @property
    def total(self) -> Decimal:
        return self.income_tax + self.transaction_tax


def tax_on_profit(profit: Decimal, rate: Decimal, places: int = MONEY_PLACES_DEFAULT) -> Decimal:
    """
    Налог по ставке `rate` на положительную прибыль; 0 для прибыли ≤ 0.

    Examples:
        >>> tax_on_profit(Decimal("100"), Decimal("0.225"), 2)
        Decimal('22.50')
        >>> tax_on_profit(Decimal("-5"), Decimal("0.225"), 2)
        Decimal('0')
    """
    if profit <= ZERO:
        return ZERO
    return quantize_money(profit * rate, places)


def compute_taxes(
    principal: Decimal,
    gross_value: Decimal,
    days: int,
    places: int = MONEY_PLACES_DEFAULT,
) -> TaxBreakdown:
    """
    Начисление IR и IOF на прибыль gross_value − principal.

    Ставки возвращаются всегда (в т.ч. при убытке) для отображения,
    суммы налогов при profit ≤ 0 равны ровно 0.
    """
    profit = gross_value - principal
    ir_rate = income_tax_rate(days)
    iof_rate = transaction_tax_rate(days)

    return TaxBreakdown(
        days=days,
        profit=profit,
        income_tax_rate=ir_rate,
        income_tax=tax_on_profit(profit, ir_rate, places),
        transaction_tax_rate=iof_rate,
        transaction_tax=tax_on_profit(profit, iof_rate, places),
    )
