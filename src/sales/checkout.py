"""
Checkout — сценарий оформления заказа на стороне хоста

Подтверждает заказ, считает сумму и записывает её клиенту как цену
последнего заказа. Это оркестрация, а не правило домена: агрегат Order
ничего не знает о Customer.
"""

from src.core.domain.money import Money
from src.core.errors import InvalidArgumentError, OrderingError
from src.crm.customer import Customer
from src.logging_setup import get_logger
from src.sales.domain.order import Order, OrderState


logger = get_logger(__name__)


def checkout(order: Order, customer: Customer) -> Money:
    """
    Оформление заказа клиента.

    PENDING заказ подтверждается, CONFIRMED принимается как есть.

    Args:
        order: Заказ клиента
        customer: Клиент, которому записывается сумма

    Returns:
        Итоговая сумма заказа

    Raises:
        InvalidArgumentError: Если заказ принадлежит другому клиенту
        InvalidStateTransitionError: Если заказ уже SHIPPED/CANCELED
    """
    log = logger.bind(order_id=order.id, customer_id=customer.id)
    try:
        if order.customer_id != customer.id:
            raise InvalidArgumentError(
                f"Order {order.id} belongs to customer {order.customer_id}, not {customer.id}"
            )
        if order.state != OrderState.CONFIRMED:
            # из SHIPPED/CANCELED confirm поднимет InvalidStateTransitionError
            order.confirm()

        total = order.calculate_total_amount()
    except OrderingError as e:
        log.error("checkout_failed", error=str(e), error_kind=type(e).__name__)
        raise

    customer.record_order_total(total)
    log.info(
        "checkout_completed",
        state=order.state.value,
        items=len(order.items),
        total=str(total),
    )
    return total
