"""
Currency — Валюта заказа

Immutable Pydantic модель с трёхбуквенным кодом в формате ISO 4217.
Проверяется только формат кода (три заглавные латинские буквы),
наличие кода в реальном реестре валют не проверяется.
"""

import re
from decimal import Decimal
from typing import Final, Optional, Union

from babel import Locale
from babel.numbers import format_currency
from pydantic import BaseModel, Field, field_validator

from src.core.config import DEFAULT_CONFIG
from src.core.errors import InvalidCurrencyFormatError


CURRENCY_CODE_PATTERN: Final[re.Pattern] = re.compile(r"^[A-Z]{3}$")


def to_babel_locale(locale: str) -> Locale:
    """
    Конверсия локали в Babel Locale.

    Принимает как BCP 47 ('en-US'), так и POSIX ('en_US') форму.
    """
    return Locale.parse(locale.replace("-", "_"))


def currency_pattern(locale: Locale, fraction_digits: int) -> str:
    """Стандартный денежный шаблон локали с фиксированным числом знаков после запятой"""
    pattern = locale.currency_formats["standard"].pattern
    fraction = "." + "0" * fraction_digits if fraction_digits > 0 else ""
    return re.sub(r"\.0+", fraction, pattern)


class Currency(BaseModel):
    """
    Валюта (value object).

    Равенство по коду: Currency(code="USD") == Currency(code="USD").
    """

    code: str = Field(..., description="Код валюты ISO 4217 (например, 'USD')")

    model_config = {"frozen": True}  # Immutable

    @field_validator("code", mode="before")
    @classmethod
    def validate_code_format(cls, v: object) -> str:
        """Три заглавные буквы A-Z, иначе InvalidCurrencyFormatError"""
        if not isinstance(v, str) or not CURRENCY_CODE_PATTERN.fullmatch(v):
            raise InvalidCurrencyFormatError(v)
        return v

    @classmethod
    def of(cls, code: str) -> "Currency":
        """Короткий конструктор: Currency.of("USD")"""
        return cls(code=code)

    def format_amount(
        self,
        amount: Union[Decimal, float, int],
        locale: Optional[str] = None,
        fraction_digits: Optional[int] = None,
    ) -> str:
        """
        Форматирование суммы с учётом валюты и локали.

        Число знаков после запятой задаётся конфигурацией (2 по умолчанию)
        и не зависит от валюты: JPY 1234.5 → '¥1,234.50'.

        Args:
            amount: Сумма
            locale: Локаль ('en-US' по умолчанию)
            fraction_digits: Знаков после запятой (по умолчанию из OrderingConfig)

        Returns:
            Строка вида '$1,234.56' для en-US
        """
        babel_locale = to_babel_locale(locale or DEFAULT_CONFIG.default_locale)
        if fraction_digits is None:
            fraction_digits = DEFAULT_CONFIG.fraction_digits
        return format_currency(
            amount,
            self.code,
            format=currency_pattern(babel_locale, fraction_digits),
            locale=babel_locale,
            currency_digits=False,
        )

    def __str__(self) -> str:
        return self.code
