"""
Customer — Клиент

Заказ хранит только идентификатор клиента и не читает его поля.
Цена последнего заказа записывается хостом через record_order_total.
"""

from typing import Optional

from src.core.domain.identity import IdGenerator, new_identity
from src.core.domain.money import Money
from src.core.errors import InvalidArgumentError


class Customer:
    """Клиент с именем и ценой последнего заказа."""

    def __init__(self, name: str, id_generator: IdGenerator = new_identity):
        if not isinstance(name, str) or not name.strip():
            raise InvalidArgumentError(f"Customer name cannot be empty: {name!r}")
        self._id = id_generator()
        self._name = name
        self._last_order_price: Optional[Money] = None

    @property
    def id(self) -> str:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def last_order_price(self) -> Optional[Money]:
        return self._last_order_price

    def record_order_total(self, total: Money) -> None:
        """Фиксация суммы последнего заказа"""
        self._last_order_price = total

    def __repr__(self) -> str:
        return f"Customer(id={self._id!r}, name={self._name!r})"
