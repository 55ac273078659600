"""
Иерархия доменных ошибок

Все нарушения правил домена поднимаются синхронно в точке нарушения.
Частичных мутаций при ошибке не бывает: операция либо применяется целиком,
либо не применяется вовсе.

Ошибки НЕ наследуют ValueError: pydantic оборачивает ValueError из валидаторов
в ValidationError, а доменные ошибки должны доходить до вызывающего как есть.
"""

from typing import Any


class OrderingError(Exception):
    """Базовая ошибка домена заказов"""


class InvalidArgumentError(OrderingError):
    """Пустые, отрицательные или неположительные входные значения"""


class InvalidCurrencyFormatError(OrderingError):
    """Код валюты не соответствует формату ISO 4217 (три заглавные буквы)"""

    def __init__(self, code: Any):
        self.code = code
        super().__init__(f"Invalid currency code: {code!r} (expected 3 uppercase letters)")


class CurrencyMismatchError(OrderingError):
    """Арифметика над суммами в разных валютах"""

    def __init__(self, left: str, right: str):
        self.left = left
        self.right = right
        super().__init__(
            f"Cannot add amounts with different currencies: {left} and {right}"
        )


class InvalidTimestampError(OrderingError):
    """Нераспознаваемая дата или дата в будущем"""

    def __init__(self, value: Any, reason: str):
        self.value = value
        self.reason = reason
        super().__init__(f"{reason}: {value!r}")


class InvalidStateTransitionError(OrderingError):
    """Переход confirm/ship/cancel из недопустимого состояния"""

    def __init__(self, operation: str, current_state: Any):
        self.operation = operation
        self.current_state = current_state
        state = getattr(current_state, "value", current_state)
        super().__init__(f"Cannot {operation} an order that is {state}")


class AddItemNotAllowedError(OrderingError):
    """Добавление позиции в закрытый заказ (SHIPPED/CANCELED)"""

    def __init__(self, current_state: Any):
        self.current_state = current_state
        state = getattr(current_state, "value", current_state)
        super().__init__(f"Cannot add items to an order that is {state}")
