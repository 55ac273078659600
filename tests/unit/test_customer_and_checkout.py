"""
Тесты для Customer и сценария checkout

Проверяет:
1. Валидацию имени клиента и запись суммы последнего заказа
2. checkout: подтверждение, расчёт суммы, запись клиенту
3. Проброс доменных ошибок без частичных изменений
4. Демонстрационный сценарий
"""

import pytest

from src.core.domain import Currency, Money
from src.core.errors import InvalidArgumentError, InvalidStateTransitionError
from src.crm import Customer
from src.sales import demo
from src.sales.checkout import checkout
from src.sales.domain import Order, OrderState


class TestCustomer:
    """Тесты для Customer"""

    def test_creation(self, sequential_ids) -> None:
        customer = Customer("John Doe", id_generator=sequential_ids)
        assert customer.id == "id-1"
        assert customer.name == "John Doe"
        assert customer.last_order_price is None

    @pytest.mark.parametrize("name", ["", "  ", None])
    def test_blank_name_rejected(self, name) -> None:
        with pytest.raises(InvalidArgumentError):
            Customer(name)

    def test_record_order_total(self, usd: Currency) -> None:
        customer = Customer("John Doe")
        customer.record_order_total(Money(amount=150, currency=usd))
        assert customer.last_order_price == Money(amount=150, currency=usd)

    def test_no_last_price_setter(self, usd: Currency) -> None:
        customer = Customer("John Doe")
        with pytest.raises(AttributeError):
            customer.last_order_price = Money.zero(usd)  # type: ignore[misc]


class TestCheckout:
    """Тесты сценария checkout"""

    @pytest.fixture
    def customer(self) -> Customer:
        return Customer("John Doe")

    @pytest.fixture
    def order(self, customer: Customer, usd: Currency) -> Order:
        order = Order(customer.id, usd)
        order.add_item("p-1", 2, 100)
        order.add_item("p-2", 20, 50)
        return order

    def test_pending_order_confirmed_and_recorded(self, order: Order, customer: Customer) -> None:
        total = checkout(order, customer)
        assert order.state == OrderState.CONFIRMED
        assert total == Money(amount=1200, currency=order.currency)
        assert customer.last_order_price == total

    def test_confirmed_order_accepted_as_is(self, order: Order, customer: Customer) -> None:
        order.confirm()
        checkout(order, customer)
        assert order.state == OrderState.CONFIRMED
        assert customer.last_order_price is not None

    def test_shipped_order_rejected(self, order: Order, customer: Customer) -> None:
        order.confirm()
        order.ship()
        with pytest.raises(InvalidStateTransitionError, match="SHIPPED"):
            checkout(order, customer)
        assert customer.last_order_price is None

    def test_foreign_order_rejected(self, order: Order) -> None:
        stranger = Customer("Jane Roe")
        with pytest.raises(InvalidArgumentError):
            checkout(order, stranger)
        assert order.state == OrderState.PENDING
        assert stranger.last_order_price is None


class TestDemo:
    """Демонстрационный сценарий завершается ожидаемо"""

    def test_run_returns_zero(self) -> None:
        assert demo.run() == 0
