"""
Generation — Случайные элементы для property-based тестирования

Один рекурсивный генератор для всех алгебр: каждый целый лист структуры
заполняется независимо выбранным случайным числом.
"""

import random
from dataclasses import dataclass
from typing import Final, Optional

from dickson.core.math.doubling import BaseAlgebra, Component, DoubledAlgebra, Element
from dickson.core.math.integers import IntegerRing

# Ширина случайных компонент по умолчанию (как у Int63)
DEFAULT_RANDOM_BITS: Final[int] = 63


@dataclass(frozen=True)
class GeneratorConfig:
    """Конфигурация генератора случайных компонент."""

    bits: int = DEFAULT_RANDOM_BITS
    signed: bool = True  # знак выбирается независимо для каждой компоненты

    def __post_init__(self) -> None:
        if isinstance(self.bits, bool) or not isinstance(self.bits, int) or self.bits <= 0:
            raise ValueError(f"bits must be a positive int, got {self.bits!r}")


def random_component(rng: random.Random, config: GeneratorConfig) -> int:
    value = rng.getrandbits(config.bits)
    if config.signed and rng.getrandbits(1):
        return -value
    return value


def _random_value(algebra: BaseAlgebra, rng: random.Random, config: GeneratorConfig) -> Component:
    if isinstance(algebra, IntegerRing):
        return random_component(rng, config)
    left = _random_value(algebra.base, rng, config)
    right = _random_value(algebra.base, rng, config)
    return algebra.element(left, right)


def random_element(
    algebra: DoubledAlgebra,
    rng: Optional[random.Random] = None,
    config: Optional[GeneratorConfig] = None,
) -> Element:
    """
    Случайный элемент алгебры.

    Рекурсия идёт по структуре удвоения до целых листьев; каждый лист
    выбирается независимо.

    Args:
        algebra: Целевая алгебра любого уровня
        rng: Источник случайности (default: новый random.Random())
        config: Параметры компонент (default: GeneratorConfig())

    Returns:
        Элемент с dimension независимыми случайными компонентами
    """
    rng = rng or random.Random()
    config = config or GeneratorConfig()
    return _random_value(algebra, rng, config)
