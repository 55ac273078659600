"""Общие фикстуры: детерминированные часы и генератор идентификаторов."""

import itertools
from datetime import datetime, timezone
from typing import Callable

import pytest

from src.core.domain import Currency


FIXED_NOW = datetime(2024, 6, 1, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def fixed_clock() -> Callable[[], datetime]:
    """Часы, всегда возвращающие FIXED_NOW"""
    return lambda: FIXED_NOW


@pytest.fixture
def sequential_ids() -> Callable[[], str]:
    """Генератор id-1, id-2, ..."""
    counter = itertools.count(1)
    return lambda: f"id-{next(counter)}"


@pytest.fixture
def usd() -> Currency:
    return Currency(code="USD")


@pytest.fixture
def pen() -> Currency:
    return Currency(code="PEN")
