"""TreasuryCalculator: три режима расчёта стоимости облигации после налогов.

Режимы:
- At-maturity: стоимость при удержании до погашения
- Mark-to-market: стоимость при продаже сегодня (дисконтирование
  контрактной выплаты по текущей рыночной ставке)
- Reinvestment: та же формула, что at-maturity, для новой суммы и ставки

Во всех режимах налоги начисляются только на прибыль (gross − principal),
IR и IOF берутся по одному и тому же числу дней:
- at-maturity / reinvestment: полный срок удержания (start → maturity)
- mark-to-market: прошедшие дни (start → as_of)

Failure (InvalidInput / InvalidDate) обнаруживается до начала расчёта,
частичных результатов нет.
"""

import logging
from datetime import date
from decimal import Decimal, localcontext

from treasury_calc.core.errors import InvalidInput
from treasury_calc.core.math.compounding import future_value, present_value
from treasury_calc.core.math.date_math import (
    DateLike,
    days_between,
    to_calendar_date,
    years_between,
)
from treasury_calc.core.math.numerical_safeguards import (
    ZERO,
    Number,
    quantize_money,
    to_decimal,
    validate_in_range,
    validate_positive,
)
from treasury_calc.core.domain.result import (
    CalculationMode,
    MarkToMarketResult,
    MaturityResult,
)
from treasury_calc.core.tax.composition import compute_taxes
from treasury_calc.engine.config import CalculatorConfig

logger = logging.getLogger(__name__)


class TreasuryCalculator:
    """Расчётный движок.

    Не хранит состояния кроме неизменяемой конфигурации, поэтому один
    экземпляр безопасно использовать из нескольких потоков.
    """

    def __init__(self, config: CalculatorConfig | None = None):
        self.config = config or CalculatorConfig()

    # -------------------------------------------------------------------------
    # Input validation
    # -------------------------------------------------------------------------

    def _amount(self, value: Number, name: str) -> Decimal:
        amount = to_decimal(value, name)
        validate_positive(amount, name)
        return amount

    def _rate(self, value: Number, name: str) -> Decimal:
        rate = to_decimal(value, name)
        validate_in_range(rate, name, min_value=ZERO, max_value=self.config.max_rate_percent)
        return rate

    @staticmethod
    def _period(start_date: DateLike, maturity_date: DateLike, maturity_name: str) -> tuple[date, date]:
        start = to_calendar_date(start_date, "start_date")
        maturity = to_calendar_date(maturity_date, maturity_name)
        if maturity <= start:
            raise InvalidInput(
                f"{maturity_name} {maturity.isoformat()} must be after "
                f"start_date {start.isoformat()}"
            )
        return start, maturity

    # -------------------------------------------------------------------------
    # Modes
    # -------------------------------------------------------------------------

    def calculate_at_maturity(
        self,
        principal: Number,
        contracted_rate_percent: Number,
        start_date: DateLike,
        maturity_date: DateLike,
    ) -> MaturityResult:
        """Стоимость после налогов при удержании до погашения.

        Args:
            principal: Вложенная сумма (> 0)
            contracted_rate_percent: Контрактная ставка, % годовых
            start_date: Дата покупки
            maturity_date: Дата погашения (строго после start_date)

        Raises:
            InvalidInput: principal ≤ 0, ставка вне [0, max], maturity ≤ start
            InvalidDate: дата не распознана
        """
        amount = self._amount(principal, "principal")
        rate = self._rate(contracted_rate_percent, "contracted_rate_percent")
        start, maturity = self._period(start_date, maturity_date, "maturity_date")
        return self._hold_to_maturity(CalculationMode.AT_MATURITY, amount, rate, start, maturity)

    def simulate_reinvestment(
        self,
        available_amount: Number,
        new_rate_percent: Number,
        start_date: DateLike,
        target_maturity_date: DateLike,
    ) -> MaturityResult:
        """Симуляция вложения доступной суммы в новый выпуск до его погашения.

        Для плавающей ставки new_rate_percent должен быть уже
        абсолютной годовой ставкой (см. resolve_reinvestment_rate).
        """
        amount = self._amount(available_amount, "available_amount")
        rate = self._rate(new_rate_percent, "new_rate_percent")
        start, maturity = self._period(start_date, target_maturity_date, "target_maturity_date")
        return self._hold_to_maturity(CalculationMode.REINVESTMENT, amount, rate, start, maturity)

    def calculate_mark_to_market(
        self,
        principal: Number,
        contracted_rate_percent: Number,
        market_rate_percent: Number,
        start_date: DateLike,
        maturity_date: DateLike,
        as_of_date: DateLike | None = None,
    ) -> MarkToMarketResult:
        """Стоимость после налогов при продаже на дату as_of_date.

        1. contracted_fv = future_value(principal, contracted_rate, total_years)
        2. gross = present_value(contracted_fv, market_rate, remaining_years)
        3. Налоги по elapsed_days = days_between(start, as_of)

        При as_of_date == maturity_date результат совпадает с
        calculate_at_maturity независимо от market_rate_percent.

        Raises:
            InvalidInput: как calculate_at_maturity, а также as_of_date
                вне [start_date, maturity_date]
            InvalidDate: дата не распознана
        """
        amount = self._amount(principal, "principal")
        contracted_rate = self._rate(contracted_rate_percent, "contracted_rate_percent")
        market_rate = self._rate(market_rate_percent, "market_rate_percent")
        start, maturity = self._period(start_date, maturity_date, "maturity_date")
        as_of = date.today() if as_of_date is None else to_calendar_date(as_of_date, "as_of_date")

        if not start <= as_of <= maturity:
            raise InvalidInput(
                f"as_of_date {as_of.isoformat()} must be within "
                f"[{start.isoformat()}, {maturity.isoformat()}]"
            )

        places = self.config.money_places
        precision = self.config.precision

        with localcontext() as ctx:
            ctx.prec = precision

            total_years = years_between(start, maturity)
            contracted_fv = future_value(amount, contracted_rate, total_years, precision)

            remaining_years = years_between(as_of, maturity)
            elapsed_days = days_between(start, as_of)

            gross = quantize_money(
                present_value(contracted_fv, market_rate, remaining_years, precision), places
            )
            taxes = compute_taxes(amount, gross, elapsed_days, places)
            net = gross - taxes.income_tax - taxes.transaction_tax

            result = MarkToMarketResult(
                mode=CalculationMode.MARK_TO_MARKET,
                principal=amount,
                applied_rate=contracted_rate,
                gross_value=gross,
                income_tax=taxes.income_tax,
                transaction_tax=taxes.transaction_tax,
                net_value=net,
                net_return=net - amount,
                income_tax_rate=taxes.income_tax_rate,
                transaction_tax_rate=taxes.transaction_tax_rate,
                market_rate=market_rate,
                start_date=start,
                maturity_date=maturity,
                as_of_date=as_of,
                total_years=total_years,
                contracted_future_value=quantize_money(contracted_fv, places),
                remaining_years=remaining_years,
                elapsed_days=elapsed_days,
            )

        logger.debug(
            f"mark_to_market: principal={amount} rate={contracted_rate}% "
            f"market={market_rate}% as_of={as_of} elapsed_days={elapsed_days} "
            f"gross={gross} net={net}"
        )
        return result

    # -------------------------------------------------------------------------
    # Shared formula
    # -------------------------------------------------------------------------

    def _hold_to_maturity(
        self,
        mode: CalculationMode,
        amount: Decimal,
        rate: Decimal,
        start: date,
        maturity: date,
    ) -> MaturityResult:
        """Общая формула at-maturity и reinvestment."""
        places = self.config.money_places
        precision = self.config.precision

        with localcontext() as ctx:
            ctx.prec = precision

            years = years_between(start, maturity)
            days = days_between(start, maturity)

            gross = quantize_money(future_value(amount, rate, years, precision), places)
            taxes = compute_taxes(amount, gross, days, places)
            net = gross - taxes.income_tax - taxes.transaction_tax

            result = MaturityResult(
                mode=mode,
                principal=amount,
                applied_rate=rate,
                gross_value=gross,
                income_tax=taxes.income_tax,
                transaction_tax=taxes.transaction_tax,
                net_value=net,
                net_return=net - amount,
                income_tax_rate=taxes.income_tax_rate,
                transaction_tax_rate=taxes.transaction_tax_rate,
                start_date=start,
                maturity_date=maturity,
                years=years,
                days=days,
            )

        logger.debug(
            f"{mode.value}: principal={amount} rate={rate}% days={days} "
            f"gross={gross} net={net}"
        )
        return result


# =============================================================================
# MODULE-LEVEL API
# =============================================================================

_DEFAULT_CALCULATOR = TreasuryCalculator()


def calculate_at_maturity(
    principal: Number,
    contracted_rate_percent: Number,
    start_date: DateLike,
    maturity_date: DateLike,
) -> MaturityResult:
    """Стоимость после налогов при удержании до погашения (конфигурация по умолчанию)."""
    return _DEFAULT_CALCULATOR.calculate_at_maturity(
        principal, contracted_rate_percent, start_date, maturity_date
    )


def calculate_mark_to_market(
    principal: Number,
    contracted_rate_percent: Number,
    market_rate_percent: Number,
    start_date: DateLike,
    maturity_date: DateLike,
    as_of_date: DateLike | None = None,
) -> MarkToMarketResult:
    """Стоимость после налогов при продаже на дату as_of_date (по умолчанию сегодня)."""
    return _DEFAULT_CALCULATOR.calculate_mark_to_market(
        principal,
        contracted_rate_percent,
        market_rate_percent,
        start_date,
        maturity_date,
        as_of_date,
    )


def simulate_reinvestment(
    available_amount: Number,
    new_rate_percent: Number,
    start_date: DateLike,
    target_maturity_date: DateLike,
) -> MaturityResult:
    """Симуляция реинвестирования (конфигурация по умолчанию)."""
    return _DEFAULT_CALCULATOR.simulate_reinvestment(
        available_amount, new_rate_percent, start_date, target_maturity_date
    )
