"""
Contract Validation Module

Модуль для валидации JSON-представления результатов расчёта.
"""

from .validators import (
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

__all__ = [
    # Schemas
    "SCHEMA_DIR",
    "SCHEMA_NAMES",
    "read_schema",
    "result_schema",
    # Contracts
    "ResultContract",
    "contract_for",
    "to_contract_json",
    "validate_maturity_result",
    "validate_mark_to_market_result",
]
