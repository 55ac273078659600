"""
Демонстрация жизненного цикла заказа.

Запуск: python -m src.sales.demo

Сценарии:
1. Заказ в USD «сейчас»: две позиции, checkout, сумма записывается клиенту
2. Заказ в PEN с прошлой датой: confirm → ship, затем повторный confirm,
   который должен быть отклонён
"""

from src.core.domain.currency import Currency
from src.core.errors import OrderingError
from src.crm.customer import Customer
from src.logging_setup import configure_logging, get_logger
from src.sales.checkout import checkout
from src.sales.domain import Order, ProductId


logger = get_logger(__name__)


def run() -> int:
    """Возвращает код выхода процесса: 0 при ожидаемом поведении."""
    customer = Customer("John Doe")

    # 1. Real-time заказ
    realtime_order = Order(customer.id, Currency.of("USD"))
    realtime_order.add_item(ProductId.new(), 2, 100)
    realtime_order.add_item(ProductId.new(), 20, 50)
    total = checkout(realtime_order, customer)
    logger.info(
        "realtime_order",
        customer=customer.name,
        ordered_at=realtime_order.formatted_ordered_at(),
        state=realtime_order.state.value,
        total=total.format(),
    )

    # 2. Заказ с прошлой датой
    manual_order = Order(customer.id, Currency.of("PEN"), "2023-05-15T10:30:00Z")
    manual_order.add_item(ProductId.new(), 1, 150)
    manual_order.confirm()
    manual_order.ship()
    customer.record_order_total(manual_order.calculate_total_amount())
    logger.info(
        "manual_order",
        customer=customer.name,
        ordered_at=manual_order.formatted_ordered_at(),
        state=manual_order.state.value,
        total=customer.last_order_price.format("es-PE"),
    )

    try:
        manual_order.confirm()
    except OrderingError as e:
        logger.warning("rejected_as_expected", error=str(e), error_kind=type(e).__name__)
        return 0

    logger.error("shipped_order_was_confirmed_again", order_id=manual_order.id)
    return 1


if __name__ == "__main__":
    configure_logging()
    raise SystemExit(run())
