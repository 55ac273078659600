"""
Identity и Clock — внедряемые источники идентификаторов и текущего времени

Агрегаты и сущности не генерируют id и не читают системное время напрямую:
они получают генератор и часы как зависимости, чтобы тесты могли подставить
детерминированные реализации.
"""

import uuid
from datetime import datetime, timezone
from typing import Callable


# Генератор идентификаторов: без аргументов, возвращает непрозрачную строку
IdGenerator = Callable[[], str]

# Часы: без аргументов, возвращают aware datetime (UTC)
Clock = Callable[[], datetime]


def new_identity() -> str:
    """Уникальный идентификатор (UUID4)."""
    return str(uuid.uuid4())


def utc_now() -> datetime:
    """Текущее время в UTC."""
    return datetime.now(timezone.utc)
