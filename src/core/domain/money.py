"""
Money — Денежная сумма в конкретной валюте

Immutable Pydantic модель. Сумма хранится как Decimal и никогда не бывает
отрицательной. Арифметика возвращает новый экземпляр и допускается только
между одинаковыми валютами. Конверсия валют не выполняется.
"""

from decimal import Decimal, InvalidOperation
from typing import Optional, Union

from pydantic import BaseModel, Field, field_validator

from src.core.config import DEFAULT_CONFIG
from src.core.domain.currency import Currency
from src.core.errors import CurrencyMismatchError, InvalidArgumentError


Number = Union[Decimal, int, float]


def to_decimal(value: Number) -> Decimal:
    """
    Decimal без артефактов двоичного float (0.1 → Decimal('0.1')).

    Raises:
        InvalidArgumentError: Если значение не число или не конечно (NaN, inf)
    """
    if isinstance(value, bool):
        raise InvalidArgumentError(f"Not a number: {value!r}")
    try:
        if isinstance(value, Decimal):
            result = value
        elif isinstance(value, float):
            result = Decimal(str(value))
        else:
            result = Decimal(value)
    except (InvalidOperation, TypeError, ValueError) as e:
        raise InvalidArgumentError(f"Not a number: {value!r}") from e

    if not result.is_finite():
        raise InvalidArgumentError(f"Number must be finite: {value!r}")
    return result


class Money(BaseModel):
    """
    Денежная сумма (value object).

    Инвариант: amount >= 0 всегда.
    """

    amount: Decimal = Field(..., description="Сумма (неотрицательная)")
    currency: Currency = Field(..., description="Валюта суммы")

    model_config = {"frozen": True}  # Immutable

    @field_validator("amount")
    @classmethod
    def validate_non_negative(cls, v: Decimal) -> Decimal:
        """Отрицательная сумма → InvalidArgumentError"""
        if v < 0:
            raise InvalidArgumentError(f"Amount cannot be negative: {v}")
        return v

    @classmethod
    def zero(cls, currency: Currency) -> "Money":
        """Нулевая сумма в валюте"""
        return cls(amount=Decimal("0"), currency=currency)

    def add(self, other: "Money") -> "Money":
        """
        Сложение сумм одной валюты.

        Raises:
            CurrencyMismatchError: Если коды валют различаются
        """
        if self.currency.code != other.currency.code:
            raise CurrencyMismatchError(self.currency.code, other.currency.code)
        return Money(amount=self.amount + other.amount, currency=self.currency)

    def multiply(self, factor: Number) -> "Money":
        """
        Умножение на неотрицательный коэффициент.

        Raises:
            InvalidArgumentError: Если factor < 0
        """
        factor_dec = to_decimal(factor)
        if factor_dec < 0:
            raise InvalidArgumentError(f"Factor cannot be negative: {factor}")
        return Money(amount=self.amount * factor_dec, currency=self.currency)

    def format(self, locale: Optional[str] = None) -> str:
        """Отображение с учётом локали, например '$1,200.00'"""
        return self.currency.format_amount(self.amount, locale)

    def __str__(self) -> str:
        digits = DEFAULT_CONFIG.fraction_digits
        return f"{self.currency.code} {self.amount:.{digits}f}"
