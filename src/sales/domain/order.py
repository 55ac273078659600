"""
Order — Агрегат заказа

Единственная точка мутации заказа и единственный сборщик его позиций.

Жизненный цикл:
- PENDING (начальное) → confirm → CONFIRMED
- CONFIRMED → ship → SHIPPED (терминальное)
- PENDING | CONFIRMED → cancel → CANCELED (терминальное)

Позиции добавляются только в открытых состояниях (PENDING, CONFIRMED).
Однопоточная модель: агрегат не выполняет блокировок, последовательности
read-then-write требуют внешнего взаимного исключения.
"""

from datetime import datetime
from decimal import Decimal
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, Final, FrozenSet, Mapping, Optional, Tuple, Union

from src.core.domain.currency import Currency
from src.core.domain.identity import Clock, IdGenerator, new_identity, utc_now
from src.core.domain.money import Money, Number, to_decimal
from src.core.domain.timestamp import OrderTimestamp
from src.core.errors import (
    AddItemNotAllowedError,
    InvalidArgumentError,
    InvalidCurrencyFormatError,
    InvalidStateTransitionError,
)
from src.sales.domain.order_line_item import OrderLineItem
from src.sales.domain.product_id import ProductId


# =============================================================================
# ENUMS
# =============================================================================


class OrderState(str, Enum):
    """Состояние заказа"""

    PENDING = "PENDING"
    CONFIRMED = "CONFIRMED"
    SHIPPED = "SHIPPED"
    CANCELED = "CANCELED"

    @property
    def is_open(self) -> bool:
        """Открытое состояние: разрешено добавление позиций"""
        return self in OPEN_STATES

    @property
    def is_terminal(self) -> bool:
        """Терминальное состояние: переходов нет"""
        return self in TERMINAL_STATES


OPEN_STATES: Final[FrozenSet[OrderState]] = frozenset(
    {OrderState.PENDING, OrderState.CONFIRMED}
)
TERMINAL_STATES: Final[FrozenSet[OrderState]] = frozenset(
    {OrderState.SHIPPED, OrderState.CANCELED}
)

# operation → {from_state: to_state}; любая пара вне таблицы недопустима
TRANSITIONS: Final[Mapping[str, Mapping[OrderState, OrderState]]] = MappingProxyType({
    "confirm": MappingProxyType({OrderState.PENDING: OrderState.CONFIRMED}),
    "ship": MappingProxyType({OrderState.CONFIRMED: OrderState.SHIPPED}),
    "cancel": MappingProxyType({
        OrderState.PENDING: OrderState.CANCELED,
        OrderState.CONFIRMED: OrderState.CANCELED,
    }),
})


# =============================================================================
# ORDER AGGREGATE
# =============================================================================


class Order:
    """
    Агрегат заказа.

    Инварианты:
    - customer_id непустой
    - currency фиксируется при создании и общая для всех позиций
    - items только растёт и только в открытом состоянии
    - state меняется только через confirm/ship/cancel
    """

    def __init__(
        self,
        customer_id: str,
        currency: Union[Currency, str],
        ordered_at: Union[datetime, str, None] = None,
        id_generator: IdGenerator = new_identity,
        clock: Clock = utc_now,
    ):
        """
        Args:
            customer_id: Идентификатор клиента (непустой)
            currency: Валюта заказа (Currency или код 'USD')
            ordered_at: Момент оформления (datetime / ISO 8601), по умолчанию clock()
            id_generator: Генератор идентификаторов заказа и позиций
            clock: Источник текущего времени

        Raises:
            InvalidArgumentError: Если customer_id пустой
            InvalidCurrencyFormatError: Если код валюты некорректен
            InvalidTimestampError: Если ordered_at не распознан или в будущем
        """
        if not isinstance(customer_id, str) or not customer_id.strip():
            raise InvalidArgumentError(f"Customer ID cannot be empty: {customer_id!r}")
        if isinstance(currency, str):
            currency = Currency.of(currency)
        if not isinstance(currency, Currency):
            raise InvalidCurrencyFormatError(currency)

        self._customer_id = customer_id
        self._currency = currency
        self._ordered_at = OrderTimestamp.create(ordered_at, clock=clock)
        self._id_generator = id_generator
        self._id = id_generator()
        self._items: list[OrderLineItem] = []
        self._state = OrderState.PENDING

    # -------------------------------------------------------------------------
    # Read-only доступ
    # -------------------------------------------------------------------------

    @property
    def id(self) -> str:
        return self._id

    @property
    def customer_id(self) -> str:
        return self._customer_id

    @property
    def currency(self) -> Currency:
        return self._currency

    @property
    def ordered_at(self) -> OrderTimestamp:
        return self._ordered_at

    @property
    def state(self) -> OrderState:
        return self._state

    @property
    def items(self) -> Tuple[OrderLineItem, ...]:
        """Позиции в порядке добавления (снимок, не изменяет агрегат)"""
        return tuple(self._items)

    @property
    def is_open(self) -> bool:
        return self._state.is_open

    @property
    def is_terminal(self) -> bool:
        return self._state.is_terminal

    # -------------------------------------------------------------------------
    # Позиции
    # -------------------------------------------------------------------------

    def add_item(
        self,
        product_id: Union[ProductId, str],
        quantity: int,
        unit_price_amount: Number,
    ) -> None:
        """
        Добавление позиции в заказ.

        Проверки (в порядке приоритета):
        1. Заказ в открытом состоянии → иначе AddItemNotAllowedError
        2. product_id непустой → иначе InvalidArgumentError
        3. quantity > 0 → иначе InvalidArgumentError
        4. unit_price_amount — конечное число >= 0 → иначе InvalidArgumentError

        Args:
            product_id: Идентификатор товара (ProductId или строка)
            quantity: Количество (целое, > 0)
            unit_price_amount: Цена за единицу в валюте заказа
        """
        if not self._state.is_open:
            raise AddItemNotAllowedError(self._state)

        if isinstance(product_id, str):
            product_id = ProductId(value=product_id)
        if not isinstance(product_id, ProductId) or product_id.is_blank():
            raise InvalidArgumentError("Product ID cannot be empty")

        if isinstance(quantity, bool) or not isinstance(quantity, int):
            raise InvalidArgumentError(f"Quantity must be an integer: {quantity!r}")
        if quantity <= 0:
            raise InvalidArgumentError("Quantity must be greater than zero")

        price = to_decimal(unit_price_amount)
        if price < 0:
            raise InvalidArgumentError("Unit price amount cannot be negative")

        item = OrderLineItem(
            order_id=self._id,
            item_id=self._id_generator(),
            product_id=product_id,
            quantity=quantity,
            unit_price=Money(amount=price, currency=self._currency),
        )
        self._items.append(item)

    def calculate_total_amount(self) -> Money:
        """
        Сумма заказа: свёртка стоимостей позиций, начиная с нуля в валюте заказа.

        Returns:
            Money в валюте заказа
        """
        total = Money.zero(self._currency)
        for item in self._items:
            total = total.add(item.calculate_item_total())
        return total

    # -------------------------------------------------------------------------
    # Переходы состояний
    # -------------------------------------------------------------------------

    def confirm(self) -> None:
        """PENDING → CONFIRMED"""
        self._transition("confirm")

    def ship(self) -> None:
        """CONFIRMED → SHIPPED"""
        self._transition("ship")

    def cancel(self) -> None:
        """PENDING | CONFIRMED → CANCELED"""
        self._transition("cancel")

    def _transition(self, operation: str) -> None:
        """Применение перехода по таблице TRANSITIONS, без мутации при ошибке."""
        target = TRANSITIONS[operation].get(self._state)
        if target is None:
            raise InvalidStateTransitionError(operation, self._state)
        self._state = target

    # -------------------------------------------------------------------------
    # Отображение
    # -------------------------------------------------------------------------

    def formatted_ordered_at(self, locale: Optional[str] = None) -> str:
        return self._ordered_at.format(locale)

    def summary(self) -> Dict[str, Any]:
        """
        JSON-совместимое представление заказа для presentation-слоя хоста.

        Соответствует контракту order_summary.json (src.core.contracts).
        """
        return {
            "order_id": self._id,
            "customer_id": self._customer_id,
            "state": self._state.value,
            "currency": self._currency.code,
            "ordered_at": str(self._ordered_at),
            "items": [
                {
                    "item_id": item.item_id,
                    "product_id": item.product_id.value,
                    "quantity": item.quantity,
                    "unit_price": _amount_str(item.unit_price.amount),
                    "total": _amount_str(item.calculate_item_total().amount),
                }
                for item in self._items
            ],
            "total_amount": _amount_str(self.calculate_total_amount().amount),
        }

    def __repr__(self) -> str:
        return (
            f"Order(id={self._id!r}, customer_id={self._customer_id!r}, "
            f"state={self._state.value}, items={len(self._items)})"
        )


def _amount_str(amount: Decimal) -> str:
    """Decimal → строка с двумя знаками ('1200.00')"""
    return f"{amount:.2f}"
