"""
Contract Validation Module

Валидация JSON контрактов, которые домен отдаёт хосту.
"""

from .validators import (
    ContractValidator,
    OrderSummaryValidator,
    load_schema,
    validate_order_summary,
)

__all__ = [
    "ContractValidator",
    "OrderSummaryValidator",
    "load_schema",
    "validate_order_summary",
]
