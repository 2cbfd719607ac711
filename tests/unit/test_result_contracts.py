"""
Tests for Result Models and JSON Schema Contract Validators

Покрывает:
- Инварианты CalculationResult (model_validator)
- Immutability (frozen=True)
- JSON сериализация результатов и соответствие JSON Schema
- Детекция нарушений required полей, типов и constraints
"""

from datetime import date
from decimal import Decimal

import pytest
from jsonschema import ValidationError as SchemaValidationError
from pydantic import ValidationError

from treasury_calc import (
    CalculationMode,
    MaturityResult,
    calculate_at_maturity,
    calculate_mark_to_market,
    simulate_reinvestment,
)
from treasury_calc.core.contracts import (
    SCHEMA_DIR,
    SCHEMA_NAMES,
    ResultContract,
    contract_for,
    read_schema,
    result_schema,
    to_contract_json,
    validate_mark_to_market_result,
    validate_maturity_result,
)


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def valid_maturity_data():
    """Валидные поля MaturityResult: прибыль 100, IR 15%."""
    return {
        "mode": CalculationMode.AT_MATURITY,
        "principal": Decimal("1000"),
        "applied_rate": Decimal("5"),
        "gross_value": Decimal("1100"),
        "income_tax": Decimal("15"),
        "transaction_tax": Decimal("0"),
        "net_value": Decimal("1085"),
        "net_return": Decimal("85"),
        "income_tax_rate": Decimal("0.15"),
        "transaction_tax_rate": Decimal("0"),
        "start_date": date(2024, 1, 1),
        "maturity_date": date(2026, 1, 1),
        "years": Decimal(731) / Decimal("365.25"),
        "days": 731,
    }


@pytest.fixture
def maturity_json():
    return calculate_at_maturity(1000, 13.33, "2024-01-01", "2028-01-01").model_dump(mode="json")


@pytest.fixture
def mark_to_market_json():
    return calculate_mark_to_market(
        1000, 13.33, 12, "2024-01-01", "2028-01-01", "2024-01-10"
    ).model_dump(mode="json")


# =============================================================================
# ТЕСТЫ: Result model invariants
# =============================================================================


class TestResultModel:
    """Тесты инвариантов модели результата."""

    def test_valid(self, valid_maturity_data):
        result = MaturityResult(**valid_maturity_data)
        assert result.profit == Decimal("100")
        assert result.total_tax == Decimal("15")

    def test_net_identity_enforced(self, valid_maturity_data):
        data = dict(valid_maturity_data, net_value=Decimal("1086"), net_return=Decimal("86"))
        with pytest.raises(ValidationError, match="net_value"):
            MaturityResult(**data)

    def test_net_return_enforced(self, valid_maturity_data):
        data = dict(valid_maturity_data, net_return=Decimal("100"))
        with pytest.raises(ValidationError, match="net_return"):
            MaturityResult(**data)

    def test_negative_tax_rejected(self, valid_maturity_data):
        data = dict(
            valid_maturity_data,
            income_tax=Decimal("-1"),
            net_value=Decimal("1101"),
            net_return=Decimal("101"),
        )
        with pytest.raises(ValidationError):
            MaturityResult(**data)

    def test_tax_on_loss_rejected(self, valid_maturity_data):
        data = dict(
            valid_maturity_data,
            gross_value=Decimal("900"),
            income_tax=Decimal("15"),
            net_value=Decimal("885"),
            net_return=Decimal("-115"),
        )
        with pytest.raises(ValidationError, match="no profit"):
            MaturityResult(**data)

    def test_non_positive_principal_rejected(self, valid_maturity_data):
        data = dict(valid_maturity_data, principal=Decimal("0"), net_return=Decimal("1085"))
        with pytest.raises(ValidationError):
            MaturityResult(**data)

    def test_frozen(self):
        result = calculate_at_maturity(1000, 10, "2024-01-01", "2025-01-01")
        with pytest.raises(ValidationError, match="frozen"):
            result.net_value = Decimal("0")  # type: ignore[misc]


# =============================================================================
# ТЕСТЫ: Schemas
# =============================================================================


class TestSchemas:
    """Тесты чтения схем."""

    def test_schemas_load_and_are_valid(self):
        for name in set(SCHEMA_NAMES.values()):
            assert result_schema(name)["type"] == "object"

    def test_schema_cached(self):
        assert result_schema("maturity_result") is result_schema("maturity_result")

    def test_every_mode_has_schema(self):
        assert set(SCHEMA_NAMES) == set(CalculationMode)
        assert (SCHEMA_DIR / "maturity_result.json").exists()

    def test_missing_schema(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            read_schema(tmp_path / "does_not_exist.json")

    def test_invalid_schema_file(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text('{"type": 12}', encoding="utf-8")
        with pytest.raises(ValueError, match="Invalid JSON Schema in broken.json"):
            read_schema(path)


# =============================================================================
# ТЕСТЫ: Contracts
# =============================================================================


class TestMaturityResultContract:
    """Тесты контракта maturity_result."""

    def test_calculated_result_valid(self, maturity_json):
        validate_maturity_result(maturity_json)
        assert contract_for(CalculationMode.AT_MATURITY).is_valid(maturity_json)

    def test_reinvestment_result_valid(self):
        data = simulate_reinvestment(1549.78, 13.83, "2025-10-17", "2032-01-01").model_dump(mode="json")
        assert data["mode"] == "reinvestment"
        validate_maturity_result(data)

    def test_serialized_shapes(self, maturity_json):
        assert maturity_json["days"] == 1461
        assert maturity_json["start_date"] == "2024-01-01"
        assert isinstance(maturity_json["gross_value"], str)

    def test_missing_field(self, maturity_json):
        del maturity_json["net_value"]
        with pytest.raises(SchemaValidationError):
            validate_maturity_result(maturity_json)

    def test_extra_field(self, maturity_json):
        maturity_json["unexpected"] = "1"
        assert not contract_for(CalculationMode.AT_MATURITY).is_valid(maturity_json)

    def test_negative_tax(self, maturity_json):
        maturity_json["income_tax"] = "-1.0"
        with pytest.raises(SchemaValidationError, match="income_tax|-1.0"):
            validate_maturity_result(maturity_json)

    def test_wrong_mode(self, maturity_json):
        maturity_json["mode"] = "mark_to_market"
        with pytest.raises(SchemaValidationError):
            validate_maturity_result(maturity_json)

    def test_numeric_money_rejected(self, maturity_json):
        """Денежные суммы сериализуются строкой, не float."""
        maturity_json["gross_value"] = 1649.6
        with pytest.raises(SchemaValidationError):
            validate_maturity_result(maturity_json)


class TestMarkToMarketResultContract:
    """Тесты контракта mark_to_market_result."""

    def test_calculated_result_valid(self, mark_to_market_json):
        validate_mark_to_market_result(mark_to_market_json)
        assert mark_to_market_json["elapsed_days"] == 9
        assert mark_to_market_json["as_of_date"] == "2024-01-10"

    def test_at_maturity_result_valid(self):
        """remaining_years = 0 тоже проходит схему."""
        data = calculate_mark_to_market(
            1000, 13.33, 12, "2024-01-01", "2028-01-01", "2028-01-01"
        ).model_dump(mode="json")
        validate_mark_to_market_result(data)

    def test_maturity_payload_rejected(self, maturity_json):
        assert not contract_for(CalculationMode.MARK_TO_MARKET).is_valid(maturity_json)

    def test_negative_elapsed_days(self, mark_to_market_json):
        mark_to_market_json["elapsed_days"] = -1
        with pytest.raises(SchemaValidationError):
            validate_mark_to_market_result(mark_to_market_json)


# =============================================================================
# ТЕСТЫ: to_contract_json
# =============================================================================


class TestToContractJson:
    """Выдача JSON-представления, проверенного контрактом своего режима."""

    @pytest.mark.parametrize(
        "result",
        [
            calculate_at_maturity(1000, 13.33, "2024-01-01", "2028-01-01"),
            simulate_reinvestment(1000, 10, "2024-01-01", "2024-01-20"),
            calculate_mark_to_market(1000, 13.33, 15, "2024-01-01", "2028-01-01", "2025-03-01"),
        ],
        ids=["at_maturity", "reinvestment", "mark_to_market"],
    )
    def test_each_mode(self, result):
        data = to_contract_json(result)
        assert data == result.model_dump(mode="json")
        assert data["mode"] == result.mode.value

    def test_contract_picked_by_mode(self):
        assert contract_for(CalculationMode.REINVESTMENT).schema_name == "maturity_result"
        assert contract_for(CalculationMode.MARK_TO_MARKET).schema_name == "mark_to_market_result"
        assert contract_for(CalculationMode.AT_MATURITY) is contract_for(CalculationMode.AT_MATURITY)

    def test_mode_mismatch_rejected(self):
        result = calculate_at_maturity(1000, 10, "2024-01-01", "2025-01-01")
        with pytest.raises(ValueError, match="mark_to_market contract cannot dump"):
            ResultContract(CalculationMode.MARK_TO_MARKET).dump(result)
