"""
Тесты для Tax Schedules и Tax Composition

Проверяемые инварианты:
1. Точные границы IR: 180/181, 360/361, 720/721
2. Точные границы IOF: d < 1 → 96%, таблица 1..29, d ≥ 30 → 0%
3. Монотонность (невозрастание) обеих таблиц
4. Тотальность: любой int отображается в ставку
5. Налоги только на положительную прибыль, IR и IOF независимо
"""

from decimal import Decimal

import pytest

from treasury_calc.core.tax.composition import TaxBreakdown, compute_taxes, tax_on_profit
from treasury_calc.core.tax.schedules import (
    INCOME_TAX_SCHEDULE,
    TRANSACTION_TAX_EXEMPT_FROM_DAY,
    TRANSACTION_TAX_SCHEDULE,
    TRANSACTION_TAX_TABLE,
    TaxRateStep,
    TaxSchedule,
    income_tax_rate,
    transaction_tax_rate,
)


# =============================================================================
# ТЕСТЫ: Income tax (IR)
# =============================================================================


class TestIncomeTaxRate:
    """Тесты ставки IR по сроку удержания."""

    @pytest.mark.parametrize(
        "days, expected",
        [
            (0, "0.225"),
            (1, "0.225"),
            (180, "0.225"),
            (181, "0.20"),
            (360, "0.20"),
            (361, "0.175"),
            (720, "0.175"),
            (721, "0.15"),
            (1461, "0.15"),
        ],
    )
    def test_boundaries(self, days, expected):
        assert income_tax_rate(days) == Decimal(expected)

    def test_negative_days_total(self):
        """Функция тотальна: отрицательные дни попадают в первую ступень."""
        assert income_tax_rate(-10) == Decimal("0.225")

    def test_non_increasing(self):
        rates = [income_tax_rate(d) for d in range(0, 1000)]
        assert all(b <= a for a, b in zip(rates, rates[1:]))

    def test_thresholds(self):
        assert INCOME_TAX_SCHEDULE.thresholds == (180, 360, 720)


# =============================================================================
# ТЕСТЫ: Transaction tax (IOF)
# =============================================================================


class TestTransactionTaxRate:
    """Тесты ставки IOF по сроку удержания."""

    def test_table_shape(self):
        """29 значений, от 96% в день 1 до 0% в день 29."""
        assert len(TRANSACTION_TAX_TABLE) == 29
        assert TRANSACTION_TAX_TABLE[0] == 96
        assert TRANSACTION_TAX_TABLE[-1] == 0

    def test_boundaries(self):
        assert transaction_tax_rate(1) == Decimal("0.96")
        assert transaction_tax_rate(29) == Decimal("0")
        assert transaction_tax_rate(30) == Decimal("0")
        assert TRANSACTION_TAX_EXEMPT_FROM_DAY == 30

    def test_same_day(self):
        """d < 1 → 96%."""
        assert transaction_tax_rate(0) == Decimal("0.96")
        assert transaction_tax_rate(-5) == Decimal("0.96")

    def test_indexed_by_day_minus_one(self):
        """День 5 → пятый элемент таблицы (индекс 4)."""
        assert transaction_tax_rate(5) == Decimal(TRANSACTION_TAX_TABLE[4]) / 100
        assert transaction_tax_rate(5) == Decimal("0.83")
        for day in range(1, 30):
            assert transaction_tax_rate(day) == Decimal(TRANSACTION_TAX_TABLE[day - 1]) / 100

    def test_non_increasing(self):
        rates = [transaction_tax_rate(d) for d in range(1, 40)]
        assert all(b <= a for a, b in zip(rates, rates[1:]))

    def test_zero_from_day_30(self):
        for day in (30, 31, 100, 10_000):
            assert transaction_tax_rate(day) == 0

    def test_steps_not_linear(self):
        """Шаги таблицы 3 или 4 п.п.: опубликованная таблица, не формула."""
        diffs = {a - b for a, b in zip(TRANSACTION_TAX_TABLE, TRANSACTION_TAX_TABLE[1:])}
        assert len(diffs) > 1

    def test_schedule_covers_every_table_day(self):
        assert TRANSACTION_TAX_SCHEDULE.thresholds == tuple(range(0, 30))


# =============================================================================
# ТЕСТЫ: TaxSchedule construction
# =============================================================================


class TestTaxScheduleConstruction:
    """Тесты валидации таблиц при создании."""

    def test_empty_rejected(self):
        with pytest.raises(ValueError, match="at least one step"):
            TaxSchedule("empty", ())

    def test_last_step_must_be_unbounded(self):
        with pytest.raises(ValueError, match="last step must be unbounded"):
            TaxSchedule("bounded", (TaxRateStep(10, Decimal("0.1")),))

    def test_only_last_unbounded(self):
        with pytest.raises(ValueError, match="only the last step"):
            TaxSchedule(
                "two_open",
                (TaxRateStep(None, Decimal("0.1")), TaxRateStep(None, Decimal("0.1"))),
            )

    def test_bounds_ascending(self):
        with pytest.raises(ValueError, match="strictly ascending"):
            TaxSchedule(
                "unordered",
                (
                    TaxRateStep(20, Decimal("0.2")),
                    TaxRateStep(10, Decimal("0.1")),
                    TaxRateStep(None, Decimal("0")),
                ),
            )

    def test_rate_range(self):
        with pytest.raises(ValueError, match="outside"):
            TaxSchedule("too_high", (TaxRateStep(None, Decimal("1.5")),))

    def test_single_open_step(self):
        flat = TaxSchedule("flat", (TaxRateStep(None, Decimal("0.1")),))
        assert flat.rate_for(-1) == flat.rate_for(10**6) == Decimal("0.1")


# =============================================================================
# ТЕСТЫ: Tax composition
# =============================================================================


class TestComputeTaxes:
    """Тесты начисления налогов на прибыль."""

    def test_day_five_profit_100(self):
        """Досрочный выкуп на 5-й день с прибылью 100: IOF 83%, IR 22.5%, оба на 100."""
        taxes = compute_taxes(Decimal("1000"), Decimal("1100"), 5)

        assert isinstance(taxes, TaxBreakdown)
        assert taxes.profit == Decimal("100")
        assert taxes.transaction_tax_rate == Decimal("0.83")
        assert taxes.income_tax_rate == Decimal("0.225")
        assert taxes.transaction_tax == Decimal("83")
        assert taxes.income_tax == Decimal("22.5")
        assert taxes.total == Decimal("105.5")

    def test_long_holding(self):
        taxes = compute_taxes(Decimal("1000"), Decimal("1646.80"), 1461)
        assert taxes.transaction_tax == 0
        assert taxes.income_tax == Decimal("646.80") * Decimal("0.15")

    def test_loss_is_not_taxed(self):
        taxes = compute_taxes(Decimal("1000"), Decimal("900"), 5)
        assert taxes.income_tax == 0
        assert taxes.transaction_tax == 0
        # Ставки всё равно возвращаются
        assert taxes.income_tax_rate == Decimal("0.225")
        assert taxes.transaction_tax_rate == Decimal("0.83")

    def test_zero_profit_is_not_taxed(self):
        taxes = compute_taxes(Decimal("1000"), Decimal("1000"), 0)
        assert taxes.income_tax == 0
        assert taxes.transaction_tax == 0

    def test_tax_quantized(self):
        assert tax_on_profit(Decimal("10.555"), Decimal("0.225"), 2) == Decimal("2.37")

    def test_tax_on_non_positive_profit(self):
        assert tax_on_profit(Decimal("0"), Decimal("0.96")) == 0
        assert tax_on_profit(Decimal("-0.01"), Decimal("0.96")) == 0
