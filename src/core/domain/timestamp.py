"""
OrderTimestamp — Момент оформления заказа

Immutable Pydantic модель вокруг aware datetime (UTC).
Значение не может лежать в будущем относительно переданных часов.
"""

from datetime import datetime, timezone
from typing import Optional, Union

from babel.dates import format_datetime
from pydantic import BaseModel, Field, TypeAdapter, ValidationError

from src.core.config import DEFAULT_CONFIG
from src.core.domain.currency import to_babel_locale
from src.core.domain.identity import Clock, utc_now
from src.core.errors import InvalidTimestampError


_DATETIME_ADAPTER = TypeAdapter(datetime)


class OrderTimestamp(BaseModel):
    """Проверенный момент времени (value object)."""

    value: datetime = Field(..., description="Момент времени (UTC, aware)")

    model_config = {"frozen": True}  # Immutable

    @classmethod
    def create(
        cls,
        value: Union[datetime, str, None] = None,
        clock: Clock = utc_now,
    ) -> "OrderTimestamp":
        """
        Создание метки времени.

        Args:
            value: datetime или ISO 8601 строка; None → clock()
            clock: Источник текущего времени

        Returns:
            OrderTimestamp в UTC

        Raises:
            InvalidTimestampError: Если значение не распознано или в будущем
        """
        now = clock()
        if value is None:
            return cls(value=now.astimezone(timezone.utc))

        try:
            parsed = _DATETIME_ADAPTER.validate_python(value)
        except ValidationError as e:
            raise InvalidTimestampError(value, "Invalid date") from e

        # naive значения считаются UTC
        if parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=timezone.utc)
        parsed = parsed.astimezone(timezone.utc)

        if parsed > now:
            raise InvalidTimestampError(value, "Date cannot be in the future")
        return cls(value=parsed)

    def format(self, locale: Optional[str] = None) -> str:
        """Дата и время для отображения, например 'Jan 1, 2023, 12:00:00 PM'"""
        babel_locale = to_babel_locale(locale or DEFAULT_CONFIG.default_locale)
        return format_datetime(self.value, format="medium", locale=babel_locale, tzinfo=timezone.utc)

    def __str__(self) -> str:
        return self.value.isoformat()
