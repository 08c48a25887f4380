"""
Division — Частные и детекция делителей нуля

Деление в целочисленных алгебрах Кэли–Диксона определено через сопряжение:
    quo(x, y)      = mul(x, conj(y)) / quad(y)     (правое частное)
    quo_left(x, y) = mul(conj(y), x) / quad(y)     (левое частное)
где каждая целая компонента делится усечённо (round toward zero).

Это псевдо-обратное: точное равенство mul(quo(x, y), y) == x над целыми
не гарантируется. Для x = mul(w, y) всегда quo(x, y) == w, так как
mul(mul(w, y), conj(y)) = quad(y)·w во всех алгебрах пакета.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Definite алгебры: делитель нуля невозможен, отказ только при y == 0
2. Остальные алгебры: отказ при quad(y) == 0 (включая y == 0)
3. При отказе ZeroDenominatorError, частичный результат не возвращается
"""

import logging

from dickson.core.math.doubling import DoubledAlgebra, Element
from dickson.core.math.integers import trunc_div

logger = logging.getLogger(__name__)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class ZeroDenominatorError(ZeroDivisionError):
    """
    Деление на необратимый элемент.

    Нарушение контракта вызывающей стороны (ноль или делитель нуля в
    знаменателе), а не временное состояние: повтор бессмысленен.
    """

    pass


# =============================================================================
# ДЕЛИТЕЛИ НУЛЯ
# =============================================================================


def is_zero_divisor(x: Element) -> bool:
    """
    Проверка, является ли x делителем нуля.

    Для definite алгебр (Complex, Hamilton, Cayley) нетривиальных делителей
    нуля нет, результат всегда False. Для split и нильпотентных семейств
    x является делителем нуля тогда и только тогда, когда quad(x) == 0.
    """
    if x.algebra.is_definite:
        return False
    return x.quad() == 0


def is_invertible(y: Element) -> bool:
    """True если y допустим как знаменатель quo/quo_left."""
    if y.algebra.is_definite:
        return not y.is_zero()
    return not is_zero_divisor(y)


def _common_algebra(x: Element, y: Element) -> DoubledAlgebra:
    if not isinstance(x, Element):
        raise TypeError(f"{x!r} is not an algebra element")
    x.algebra.require(y)
    return x.algebra


def _validated_quadrance(y: Element) -> int:
    if y.algebra.is_definite:
        if y.is_zero():
            logger.debug("rejected division by zero in %r", y.algebra)
            raise ZeroDenominatorError("zero denominator")
    elif is_zero_divisor(y):
        logger.debug("rejected division by zero divisor %s in %r", y, y.algebra)
        raise ZeroDenominatorError(f"zero divisor denominator: {y}")
    return y.quad()


# =============================================================================
# ЧАСТНЫЕ
# =============================================================================


def quo(x: Element, y: Element) -> Element:
    """
    Правое частное x / y с усечённым делением компонент.

    Args:
        x: Делимое
        y: Делитель той же алгебры

    Returns:
        mul(x, conj(y)) с каждой компонентой, усечённо делённой на quad(y)

    Raises:
        ZeroDenominatorError: Если y не обратим (ноль или делитель нуля)
        TypeError: Если x и y из разных алгебр
    """
    algebra = _common_algebra(x, y)
    quadrance = _validated_quadrance(y)
    product = algebra.mul(x, algebra.conj(y))
    return algebra.map_components(product, lambda value: trunc_div(value, quadrance))


def quo_left(x: Element, y: Element) -> Element:
    """
    Левое частное: mul(conj(y), x) / quad(y).

    Совпадает с quo в коммутативных алгебрах.
    """
    algebra = _common_algebra(x, y)
    quadrance = _validated_quadrance(y)
    product = algebra.mul(algebra.conj(y), x)
    return algebra.map_components(product, lambda value: trunc_div(value, quadrance))


# Явное имя правого частного (парное к quo_left)
quo_right = quo
