"""ProductId — непрозрачный идентификатор товара."""

from pydantic import BaseModel, Field

from src.core.domain.identity import IdGenerator, new_identity


class ProductId(BaseModel):
    """Идентификатор товара (value object). Непустота проверяется в Order.add_item."""

    value: str = Field(..., description="Идентификатор товара")

    model_config = {"frozen": True}

    @classmethod
    def new(cls, id_generator: IdGenerator = new_identity) -> "ProductId":
        return cls(value=id_generator())

    def is_blank(self) -> bool:
        return not self.value.strip()

    def __str__(self) -> str:
        return self.value
