"""
OrderLineItem — Позиция заказа

Immutable Pydantic модель. Создаётся только агрегатом Order при add_item
и навсегда привязана к order_id, захваченному при создании.
"""

from pydantic import BaseModel, Field, field_validator

from src.core.domain.identity import new_identity
from src.core.domain.money import Money
from src.core.errors import InvalidArgumentError
from src.sales.domain.product_id import ProductId


class OrderLineItem(BaseModel):
    """
    Позиция заказа: товар, количество, цена за единицу.

    Immutable модель (frozen=True): после создания не изменяется.
    """

    # Идентификация
    order_id: str = Field(..., min_length=1, description="Идентификатор заказа-владельца")
    item_id: str = Field(
        default_factory=new_identity, min_length=1, description="Уникальный идентификатор позиции"
    )
    product_id: ProductId = Field(..., description="Идентификатор товара")

    # Количество и цена
    quantity: int = Field(..., description="Количество (строго положительное)")
    unit_price: Money = Field(..., description="Цена за единицу")

    model_config = {"frozen": True}  # Immutable

    @field_validator("quantity")
    @classmethod
    def validate_quantity_positive(cls, v: int) -> int:
        """Количество <= 0 → InvalidArgumentError"""
        if v <= 0:
            raise InvalidArgumentError(f"Quantity must be greater than zero: {v}")
        return v

    def calculate_item_total(self) -> Money:
        """
        Стоимость позиции.

        Returns:
            unit_price * quantity в валюте unit_price
        """
        return self.unit_price.multiply(self.quantity)
