"""
Shared value objects.

Currency, Money, OrderTimestamp и внедряемые источники id/времени.
"""

from src.core.domain.currency import Currency, to_babel_locale
from src.core.domain.identity import Clock, IdGenerator, new_identity, utc_now
from src.core.domain.money import Money, to_decimal
from src.core.domain.timestamp import OrderTimestamp

__all__ = [
    # Currency
    "Currency",
    "to_babel_locale",
    # Money
    "Money",
    "to_decimal",
    # Time
    "OrderTimestamp",
    # Capabilities
    "Clock",
    "IdGenerator",
    "new_identity",
    "utc_now",
]
