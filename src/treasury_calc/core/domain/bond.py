"""
BondRecord: Нормализованная запись о государственной облигации

Immutable Pydantic модель записи, которую поставляет внешний источник
данных (публичный фид ставок или статический резервный список).
Ядро не получает и не кэширует эти данные, а только принимает готовые
записи как кандидатов для реинвестирования.
"""

from datetime import date
from decimal import Decimal
from enum import Enum

from pydantic import BaseModel, Field


# =============================================================================
# ENUMS
# =============================================================================


class BondType(str, Enum):
    """
    Режим ставки облигации.

    - FIXED: фиксированная годовая ставка (rate = полная ставка)
    - INFLATION_INDEXED: индекс инфляции + rate (rate = реальная ставка)
    - FLOATING: ключевая ставка + rate (rate = спред)
    """

    FIXED = "fixed"
    INFLATION_INDEXED = "inflation-indexed"
    FLOATING = "floating"


# =============================================================================
# BOND RECORD MODEL
# =============================================================================


class BondRecord(BaseModel):
    """
    Нормализованная запись облигации {name, type, rate, maturityDate, description}.

    Принимает как snake_case поля, так и `maturityDate` внешнего источника.
    """

    name: str = Field(..., description="Название выпуска, например 'Tesouro Prefixado 2028'")
    type: BondType = Field(..., description="Режим ставки")
    rate: Decimal = Field(
        ..., description="Ставка в % годовых (для FLOATING: спред к ключевой ставке)"
    )
    maturity_date: date = Field(..., alias="maturityDate", description="Дата погашения")
    description: str = Field(default="", description="Краткое описание выпуска")

    model_config = {"frozen": True, "populate_by_name": True}  # Immutable

    @property
    def is_floating(self) -> bool:
        return self.type == BondType.FLOATING
