"""
Integers — Базовое кольцо целых чисел для конструкции удвоения

Модуль задаёт контракт базового целого типа, на котором строится вся
башня алгебр Кэли–Диксона:
- Произвольная точность (Python int)
- Усечённое деление (round toward zero), а не floor-деление Python
- Знак и валидация компонент
- IntegerRing — "алгебра нулевого уровня" с тривиальным сопряжением

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Компоненты всегда int (bool запрещён)
2. trunc_div округляет к нулю для любых знаков
3. Деление на ноль не происходит молча (ZeroDivisionError)
4. Все операции детерминированы и не изменяют аргументы
"""

from typing import Callable, Final

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Размерность базового кольца (один целый компонент)
INTEGER_DIMENSION: Final[int] = 1


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def is_integer(value: object) -> bool:
    """
    Проверка, является ли значение допустимым целым компонентом.

    bool формально является подклассом int, но как компонент не допускается.
    """
    return isinstance(value, int) and not isinstance(value, bool)


def validate_integer(value: object, name: str) -> int:
    """
    Валидация целого компонента.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Returns:
        value без изменений

    Raises:
        TypeError: Если value не int (или является bool)
    """
    if not is_integer(value):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}: {value!r}")
    return value  # type: ignore[return-value]


# =============================================================================
# ЗНАК И УСЕЧЁННОЕ ДЕЛЕНИЕ
# =============================================================================


def sign(value: int) -> int:
    """
    Знак целого числа.

    Returns:
        -1, 0 или +1

    Examples:
        >>> sign(-7)
        -1
        >>> sign(0)
        0
        >>> sign(12)
        1
    """
    return (value > 0) - (value < 0)


def trunc_div(numerator: int, denominator: int) -> int:
    """
    Усечённое целочисленное деление (округление к нулю).

    Оператор // в Python округляет к минус бесконечности, поэтому для
    отрицательных частных результат корректируется по знакам.

    Args:
        numerator: Числитель
        denominator: Знаменатель (ненулевой)

    Returns:
        Частное, округлённое к нулю

    Raises:
        ZeroDivisionError: Если denominator == 0

    Examples:
        >>> trunc_div(7, 2)
        3
        >>> trunc_div(-7, 2)
        -3
        >>> trunc_div(7, -2)
        -3
        >>> trunc_div(-7, -2)
        3
    """
    if denominator == 0:
        raise ZeroDivisionError("integer division by zero")

    quotient = abs(numerator) // abs(denominator)
    if sign(numerator) * sign(denominator) < 0:
        return -quotient
    return quotient


# =============================================================================
# БАЗОВОЕ КОЛЬЦО
# =============================================================================


class IntegerRing:
    """
    Кольцо целых чисел как база конструкции удвоения.

    Предоставляет тот же набор операций, что и DoubledAlgebra, чтобы
    рекурсия не различала уровни:
    - conj(a) = a (тривиальное сопряжение)
    - quad(a) = a * a
    """

    doublings: int = 0
    mus: tuple[int, ...] = ()
    dimension: int = INTEGER_DIMENSION
    is_definite: bool = True

    def __eq__(self, other: object) -> bool:
        return isinstance(other, IntegerRing)

    def __hash__(self) -> int:
        return hash(IntegerRing)

    def __repr__(self) -> str:
        return "IntegerRing()"

    def contains(self, value: object) -> bool:
        return is_integer(value)

    def zero(self) -> int:
        return 0

    def one(self) -> int:
        return 1

    def add(self, x: int, y: int) -> int:
        return x + y

    def sub(self, x: int, y: int) -> int:
        return x - y

    def neg(self, x: int) -> int:
        return -x

    def scale(self, x: int, k: int) -> int:
        return x * k

    def mul(self, x: int, y: int) -> int:
        return x * y

    def conj(self, x: int) -> int:
        return x

    def quad(self, x: int) -> int:
        return x * x

    def real(self, x: int) -> int:
        return x

    def is_zero(self, x: int) -> bool:
        return x == 0

    def map_components(self, x: int, fn: Callable[[int], int]) -> int:
        return fn(x)

    def components(self, x: int) -> tuple[int, ...]:
        return (x,)

    def from_components(self, values: tuple[int, ...]) -> int:
        """Упаковка одного компонента (рекурсивное дно from_components)."""
        if len(values) != INTEGER_DIMENSION:
            raise ValueError(f"expected {INTEGER_DIMENSION} component, got {len(values)}")
        return validate_integer(values[0], "component")


# Единственный экземпляр базового кольца
INTEGERS: Final[IntegerRing] = IntegerRing()
