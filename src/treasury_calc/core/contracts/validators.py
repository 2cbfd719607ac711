"""
Result Contracts: JSON Schema for calculation results

JSON-представление результата (`result.model_dump(mode="json")`:
Decimal строкой, date строкой ISO) проверяется против схемы режима:
- at_maturity, reinvestment → schema/maturity_result.json
- mark_to_market            → schema/mark_to_market_result.json

to_contract_json(result) выдаёт JSON-представление только после
проверки контракта, поэтому наружу не уходит payload, расходящийся
со схемой.
"""

import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Final

from jsonschema import Draft202012Validator, SchemaError

from treasury_calc.core.domain.result import CalculationMode, CalculationResult

SCHEMA_DIR: Final[Path] = Path(__file__).parent / "schema"

# Один контракт на оба режима удержания до погашения
SCHEMA_NAMES: Final[Dict[CalculationMode, str]] = {
    CalculationMode.AT_MATURITY: "maturity_result",
    CalculationMode.REINVESTMENT: "maturity_result",
    CalculationMode.MARK_TO_MARKET: "mark_to_market_result",
}


# =============================================================================
# SCHEMAS
# =============================================================================


def read_schema(path: Path) -> Dict[str, Any]:
    """
    Чтение файла схемы с meta-validation.

    Raises:
        FileNotFoundError: файла нет
        ValueError: файл не является валидной JSON Schema (Draft 2020-12)
    """
    if not path.exists():
        raise FileNotFoundError(f"Schema not found: {path}")

    schema = json.loads(path.read_text(encoding="utf-8"))
    try:
        Draft202012Validator.check_schema(schema)
    except SchemaError as e:
        raise ValueError(f"Invalid JSON Schema in {path.name}: {e.message}") from e
    return schema


@lru_cache(maxsize=None)
def result_schema(schema_name: str) -> Dict[str, Any]:
    """Схема из каталога пакета, читается один раз."""
    return read_schema(SCHEMA_DIR / f"{schema_name}.json")


# =============================================================================
# CONTRACTS
# =============================================================================


class ResultContract:
    """Контракт JSON-представления результатов одного режима."""

    def __init__(self, mode: CalculationMode):
        self.mode = CalculationMode(mode)
        self.schema_name = SCHEMA_NAMES[self.mode]
        self.validator = Draft202012Validator(result_schema(self.schema_name))

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Raises:
            jsonschema.ValidationError: данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return self.validator.is_valid(data)

    def dump(self, result: CalculationResult) -> Dict[str, Any]:
        """JSON-представление результата, проверенное по схеме."""
        if result.mode != self.mode:
            raise ValueError(
                f"{self.mode.value} contract cannot dump a {result.mode.value} result"
            )
        data = result.model_dump(mode="json")
        self.validate(data)
        return data


@lru_cache(maxsize=None)
def contract_for(mode: CalculationMode) -> ResultContract:
    return ResultContract(mode)


def to_contract_json(result: CalculationResult) -> Dict[str, Any]:
    """
    JSON-представление результата любого режима.

    Raises:
        jsonschema.ValidationError: результат нарушает контракт своего режима
    """
    return contract_for(result.mode).dump(result)


def validate_maturity_result(data: Dict[str, Any]) -> None:
    """Проверка payload at_maturity / reinvestment."""
    contract_for(CalculationMode.AT_MATURITY).validate(data)


def validate_mark_to_market_result(data: Dict[str, Any]) -> None:
    """Проверка payload mark_to_market."""
    contract_for(CalculationMode.MARK_TO_MARKET).validate(data)
