"""
Errors: Исключения расчётного ядра

Все ошибки обнаруживаются синхронно на границе вызова и пробрасываются
вызывающему коду без частичных результатов (fail fast).
"""


class TreasuryCalcError(ValueError):
    """Базовое исключение расчётного ядра."""


class InvalidDate(TreasuryCalcError):
    """
    Дата не распознана или не существует в календаре.

    Примеры: "2024-02-30", "01/02/2024", None, число вместо даты.
    """


class InvalidInput(TreasuryCalcError):
    """
    Некорректные входные параметры расчёта.

    Возникает при:
    - principal / available_amount <= 0
    - отрицательной ставке или ставке выше допустимого максимума
    - NaN/Inf или нечисловом значении суммы/ставки
    - нарушении хронологии дат (maturity <= start, as_of вне [start, maturity])
    """
