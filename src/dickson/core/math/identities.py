"""
Identities — Коммутатор, ассоциатор и алгебраические тождества

Вспомогательные операции для проверки структуры алгебр:
- commutator(x, y)    = x·y - y·x
- associator(w, x, y) = (w·x)·y - w·(x·y)
- power(x, n), is_nilpotent(x, n)
- Альтернативные законы (left/right alternative) для Cayley

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. commutator == 0 для Complex, Perplex, Infra
2. associator == 0 для всех алгебр ниже уровня Cayley
3. associator(x, x, y) == associator(x, y, y) == 0 для всех алгебр пакета
"""

from dickson.core.math.doubling import Element
from dickson.core.math.integers import validate_integer


# =============================================================================
# КОММУТАТОР И АССОЦИАТОР
# =============================================================================


def commutator(x: Element, y: Element) -> Element:
    """Коммутатор x·y - y·x."""
    algebra = x.algebra
    return algebra.sub(algebra.mul(x, y), algebra.mul(y, x))


def associator(w: Element, x: Element, y: Element) -> Element:
    """Ассоциатор (w·x)·y - w·(x·y)."""
    algebra = w.algebra
    return algebra.sub(
        algebra.mul(algebra.mul(w, x), y),
        algebra.mul(w, algebra.mul(x, y)),
    )


def is_commutative_pair(x: Element, y: Element) -> bool:
    return commutator(x, y).is_zero()


def is_associative_triple(w: Element, x: Element, y: Element) -> bool:
    return associator(w, x, y).is_zero()


def satisfies_alternative_laws(x: Element, y: Element) -> bool:
    """
    Проверка левого и правого альтернативных законов:
        associator(x, x, y) == 0  (left alternative)
        associator(x, y, y) == 0  (right alternative)
    """
    return associator(x, x, y).is_zero() and associator(x, y, y).is_zero()


# =============================================================================
# СТЕПЕНИ И НИЛЬПОТЕНТНОСТЬ
# =============================================================================


def power(x: Element, n: int) -> Element:
    """
    Степень x**n повторным умножением слева.

    Алгебры пакета альтернативны, поэтому степени ассоциативны и порядок
    скобок не влияет на результат.

    Args:
        x: Основание
        n: Неотрицательный показатель

    Returns:
        x**n (power(x, 0) — единица алгебры)

    Raises:
        ValueError: Если n < 0
    """
    validate_integer(n, "n")
    if n < 0:
        raise ValueError(f"power exponent must be non-negative, got {n}")

    algebra = x.algebra
    result = algebra.one()
    for _ in range(n):
        result = algebra.mul(result, x)
    return result


def is_nilpotent(x: Element, n: int) -> bool:
    """True если x == 0 или x**k == 0 для некоторого 1 <= k <= n."""
    validate_integer(n, "n")
    if x.is_zero():
        return True

    algebra = x.algebra
    product = algebra.one()
    for _ in range(n):
        product = algebra.mul(product, x)
        if product.is_zero():
            return True
    return False
