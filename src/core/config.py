"""Конфигурация отображения сумм и дат."""

from dataclasses import dataclass
from typing import Final


DEFAULT_LOCALE: Final[str] = "en-US"


@dataclass(frozen=True)
class OrderingConfig:
    """Параметры форматирования для presentation-слоя хоста.

    - default_locale: локаль по умолчанию (BCP 47 или POSIX: 'en-US' / 'en_US')
    - fraction_digits: знаков после запятой в строковом представлении Money
    """
    default_locale: str = DEFAULT_LOCALE
    fraction_digits: int = 2


# Конфигурация по умолчанию, используется value-объектами
DEFAULT_CONFIG = OrderingConfig()
