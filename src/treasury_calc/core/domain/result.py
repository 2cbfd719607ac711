"""
CalculationResult: Результаты расчётов

Immutable Pydantic модели результатов трёх режимов расчёта:
- MaturityResult: стоимость при погашении (и симуляция реинвестирования)
- MarkToMarketResult: стоимость при продаже сегодня

Все денежные поля в Decimal. Модель проверяет инварианты при создании:
- income_tax ≥ 0, transaction_tax ≥ 0
- net_value = gross_value − income_tax − transaction_tax (точно)
- net_return = net_value − principal (точно)

Полная совместимость с JSON Schema (treasury_calc/core/contracts/schema/).
"""

from datetime import date
from decimal import Decimal
from enum import Enum

from pydantic import BaseModel, Field, model_validator


# =============================================================================
# ENUMS
# =============================================================================


class CalculationMode(str, Enum):
    """Режим, которым получен результат."""

    AT_MATURITY = "at_maturity"
    MARK_TO_MARKET = "mark_to_market"
    REINVESTMENT = "reinvestment"


# =============================================================================
# BASE RESULT
# =============================================================================


class CalculationResult(BaseModel):
    """
    Общая часть результата любого режима.

    Invariants проверяются model_validator: результат с нарушенным
    тождеством net_value создать нельзя.
    """

    mode: CalculationMode = Field(..., description="Режим расчёта")

    # Входные параметры
    principal: Decimal = Field(..., gt=0, description="Вложенная сумма")
    applied_rate: Decimal = Field(..., ge=0, description="Применённая ставка, % годовых")

    # Стоимость
    gross_value: Decimal = Field(..., description="Стоимость до налогов")
    income_tax: Decimal = Field(..., ge=0, description="IR, сумма")
    transaction_tax: Decimal = Field(..., ge=0, description="IOF, сумма")
    net_value: Decimal = Field(..., description="Стоимость после налогов")
    net_return: Decimal = Field(..., description="net_value − principal")

    # Ставки налогов (доли)
    income_tax_rate: Decimal = Field(..., ge=0, le=1, description="Ставка IR")
    transaction_tax_rate: Decimal = Field(..., ge=0, le=1, description="Ставка IOF")

    model_config = {"frozen": True}  # Immutable

    @model_validator(mode="after")
    def check_value_identities(self) -> "CalculationResult":
        """Проверка тождеств net_value и net_return."""
        expected_net = self.gross_value - self.income_tax - self.transaction_tax
        if self.net_value != expected_net:
            raise ValueError(
                f"net_value {self.net_value} != gross_value - taxes {expected_net}"
            )
        if self.net_return != self.net_value - self.principal:
            raise ValueError(
                f"net_return {self.net_return} != net_value - principal "
                f"{self.net_value - self.principal}"
            )
        if self.gross_value <= self.principal and (self.income_tax or self.transaction_tax):
            raise ValueError("taxes must be zero when there is no profit")
        return self

    @property
    def profit(self) -> Decimal:
        """Валовая прибыль (база налогообложения)."""
        return self.gross_value - self.principal

    @property
    def total_tax(self) -> Decimal:
        return self.income_tax + self.transaction_tax


# =============================================================================
# MODE-SPECIFIC RESULTS
# =============================================================================


class MaturityResult(CalculationResult):
    """
    Стоимость при удержании до погашения.

    Тот же формат у симуляции реинвестирования (mode=REINVESTMENT):
    principal = доступная сумма, applied_rate = ставка нового выпуска.
    """

    start_date: date
    maturity_date: date
    years: Decimal = Field(..., gt=0, description="Срок в годах (days / 365.25)")
    days: int = Field(..., gt=0, description="Срок удержания в днях")


class MarkToMarketResult(CalculationResult):
    """
    Текущая стоимость при досрочной продаже.

    gross_value = контрактная выплата при погашении, дисконтированная
    к as_of_date по рыночной ставке. Налоги по elapsed_days.
    """

    market_rate: Decimal = Field(..., ge=0, description="Рыночная ставка, % годовых")
    start_date: date
    maturity_date: date
    as_of_date: date
    total_years: Decimal = Field(..., gt=0, description="Полный срок выпуска в годах")
    contracted_future_value: Decimal = Field(..., description="Контрактная выплата при погашении")
    remaining_years: Decimal = Field(..., ge=0, description="Остаток срока в годах")
    elapsed_days: int = Field(..., ge=0, description="Дней с даты покупки")
