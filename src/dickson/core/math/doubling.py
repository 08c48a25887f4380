"""
Doubling — Конструкция удвоения Кэли–Диксона

Единственная конструкция, порождающая все алгебры пакета: по базовой
алгебре B (с сопряжением и квадратичной формой) и параметру удвоения
mu ∈ {-1, 0, +1} строится алгебра пар (a, b) ∈ B × B удвоенной размерности.

ФОРМУЛЫ (x = (a, b), y = (c, d)):
    add(x, y)   = (a + c, b + d)
    conj(x)     = (conj(a), -b)
    mul(x, y)   = (a·c + mu·conj(d)·b,  d·a + b·conj(c))
    quad(x)     = quad(a) - mu·quad(b)

    mu = -1: definite удвоение (Complex, Hamilton, Cayley)
    mu = +1: split удвоение (Perplex, Cockle)
    mu =  0: нильпотентное/дуальное удвоение (Infra, Supra, ...)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. mu принадлежит алгебре, а не элементу
2. Оба компонента элемента принадлежат одной и той же базовой алгебре
3. Глубина удвоения не превышает MAX_DOUBLINGS
4. Элементы неизменяемы: каждая операция возвращает новое значение
5. quad(mul(x, y)) == quad(x) * quad(y) на всех уровнях
"""

from dataclasses import dataclass, field
from typing import Callable, Final, Iterable, Union

from dickson.core.math.integers import INTEGERS, IntegerRing, validate_integer

# =============================================================================
# ПАРАМЕТРЫ УДВОЕНИЯ
# =============================================================================

# Definite удвоение: форма остаётся положительно определённой
MU_DEFINITE: Final[int] = -1

# Нильпотентное удвоение: новая единица в квадрате даёт ноль
MU_NILPOTENT: Final[int] = 0

# Split удвоение: появляются настоящие делители нуля
MU_SPLIT: Final[int] = 1

VALID_MUS: Final[frozenset[int]] = frozenset({MU_DEFINITE, MU_NILPOTENT, MU_SPLIT})

# Максимальное число удвоений (Cayley = 3, размерность 8)
MAX_DOUBLINGS: Final[int] = 3


Component = Union[int, "Element"]
BaseAlgebra = Union[IntegerRing, "DoubledAlgebra"]


# =============================================================================
# АЛГЕБРА
# =============================================================================


@dataclass(frozen=True)
class DoubledAlgebra:
    """
    Алгебра, полученная удвоением базовой алгебры с параметром mu.

    Равенство структурное: сравниваются только (base, mu). Поля name и
    symbols являются метками, поэтому внутренняя алгебра Hamilton
    равна Complex.
    """

    base: BaseAlgebra
    mu: int
    name: str = field(default="", compare=False)
    symbols: tuple[str, ...] = field(default=(), compare=False)

    def __post_init__(self) -> None:
        if not isinstance(self.base, (IntegerRing, DoubledAlgebra)):
            raise TypeError(f"base must be an algebra, got {type(self.base).__name__}")
        if isinstance(self.mu, bool) or self.mu not in VALID_MUS:
            raise ValueError(f"mu must be one of {sorted(VALID_MUS)}, got {self.mu!r}")
        if self.base.doublings >= MAX_DOUBLINGS:
            raise ValueError(
                f"cannot double beyond {MAX_DOUBLINGS} levels "
                f"(base already has {self.base.doublings})"
            )
        if self.symbols and len(self.symbols) != self.dimension:
            raise ValueError(
                f"expected {self.dimension} unit symbols, got {len(self.symbols)}"
            )

    def __repr__(self) -> str:
        label = self.name or "DoubledAlgebra"
        return f"<{label} mus={self.mus}>"

    # -------------------------------------------------------------------------
    # Структура
    # -------------------------------------------------------------------------

    @property
    def doublings(self) -> int:
        return self.base.doublings + 1

    @property
    def dimension(self) -> int:
        return 2 * self.base.dimension

    @property
    def mus(self) -> tuple[int, ...]:
        """Последовательность mu от базы к внешнему уровню."""
        return self.base.mus + (self.mu,)

    @property
    def is_definite(self) -> bool:
        """True если все удвоения definite (mu = -1 на каждом уровне)."""
        return self.mu == MU_DEFINITE and self.base.is_definite

    def contains(self, value: object) -> bool:
        return isinstance(value, Element) and (
            value.algebra is self or value.algebra == self
        )

    def require(self, *values: object) -> None:
        for value in values:
            if not self.contains(value):
                raise TypeError(f"{value!r} is not an element of {self!r}")

    # -------------------------------------------------------------------------
    # Конструирование элементов
    # -------------------------------------------------------------------------

    def element(self, left: Component, right: Component) -> "Element":
        """Элемент из пары компонент базовой алгебры."""
        return Element(self, left, right)

    def zero(self) -> "Element":
        return Element(self, self.base.zero(), self.base.zero())

    def one(self) -> "Element":
        return Element(self, self.base.one(), self.base.zero())

    def from_components(self, values: Iterable[int]) -> "Element":
        """
        Упаковка плоского списка целых в вложенную структуру пар.

        Args:
            values: Ровно dimension целых компонент (в порядке unit symbols)

        Returns:
            Элемент алгебры

        Raises:
            ValueError: Если число компонент не равно dimension
            TypeError: Если компонент не int

        Examples:
            >>> doubling_chain([-1, -1]).from_components([1, 2, 3, 4]).components()
            (1, 2, 3, 4)
        """
        values = tuple(values)
        if len(values) != self.dimension:
            raise ValueError(
                f"{self.name or 'algebra'} expects {self.dimension} components, "
                f"got {len(values)}"
            )
        half = self.base.dimension
        return Element(
            self,
            self.base.from_components(values[:half]),
            self.base.from_components(values[half:]),
        )

    def new(self, *values: int) -> "Element":
        return self.from_components(values)

    def unit(self, index: int) -> "Element":
        """
        Базисный элемент с единицей на позиции index.

        unit(0) — единица алгебры, unit(1..dimension-1) — мнимые единицы
        в порядке symbols (например i, j, k для Hamilton).
        """
        validate_integer(index, "index")
        if not 0 <= index < self.dimension:
            raise ValueError(f"unit index must be in [0, {self.dimension}), got {index}")
        values = [0] * self.dimension
        values[index] = 1
        return self.from_components(values)

    def basis(self) -> tuple["Element", ...]:
        return tuple(self.unit(index) for index in range(self.dimension))

    # -------------------------------------------------------------------------
    # Доступ к компонентам
    # -------------------------------------------------------------------------

    def components(self, x: "Element") -> tuple[int, ...]:
        self.require(x)
        return self.base.components(x.left) + self.base.components(x.right)

    def real(self, x: "Element") -> int:
        """Вещественная (первая) целая компонента."""
        self.require(x)
        return self.base.real(x.left)

    def map_components(self, x: "Element", fn: Callable[[int], int]) -> "Element":
        """Применение fn к каждой целой компоненте (листу рекурсии)."""
        self.require(x)
        return Element(
            self,
            self.base.map_components(x.left, fn),
            self.base.map_components(x.right, fn),
        )

    def is_zero(self, x: "Element") -> bool:
        self.require(x)
        return self.base.is_zero(x.left) and self.base.is_zero(x.right)

    def equals(self, x: "Element", y: "Element") -> bool:
        self.require(x, y)
        return x == y

    # -------------------------------------------------------------------------
    # Покомпонентные операции
    # -------------------------------------------------------------------------

    def add(self, x: "Element", y: "Element") -> "Element":
        self.require(x, y)
        base = self.base
        return Element(self, base.add(x.left, y.left), base.add(x.right, y.right))

    def sub(self, x: "Element", y: "Element") -> "Element":
        self.require(x, y)
        base = self.base
        return Element(self, base.sub(x.left, y.left), base.sub(x.right, y.right))

    def neg(self, x: "Element") -> "Element":
        self.require(x)
        return Element(self, self.base.neg(x.left), self.base.neg(x.right))

    def scale(self, x: "Element", k: int) -> "Element":
        self.require(x)
        validate_integer(k, "scale factor")
        return Element(self, self.base.scale(x.left, k), self.base.scale(x.right, k))

    # -------------------------------------------------------------------------
    # Сопряжение, умножение, квадратичная форма
    # -------------------------------------------------------------------------

    def conj(self, x: "Element") -> "Element":
        """conj((a, b)) = (conj(a), -b). Инволюция."""
        self.require(x)
        return Element(self, self.base.conj(x.left), self.base.neg(x.right))

    def mul(self, x: "Element", y: "Element") -> "Element":
        """
        Произведение (a, b)·(c, d) = (a·c + mu·conj(d)·b, d·a + b·conj(c)).

        Порядок множителей существенен: начиная с Hamilton база
        некоммутативна, начиная с Cayley — неассоциативна.
        """
        self.require(x, y)
        base = self.base
        a, b = x.left, x.right
        c, d = y.left, y.right

        left = base.mul(a, c)
        if self.mu != MU_NILPOTENT:
            twisted = base.mul(base.conj(d), b)
            if self.mu == MU_SPLIT:
                left = base.add(left, twisted)
            else:
                left = base.sub(left, twisted)

        right = base.add(base.mul(d, a), base.mul(b, base.conj(c)))
        return Element(self, left, right)

    def quad(self, x: "Element") -> int:
        """
        Квадранс quad((a, b)) = quad(a) - mu·quad(b).

        Для definite алгебр неотрицателен и равен нулю только у нуля;
        для split и нильпотентных удвоений может быть любого знака.
        """
        self.require(x)
        return self.base.quad(x.left) - self.mu * self.base.quad(x.right)


# =============================================================================
# ЭЛЕМЕНТ
# =============================================================================


@dataclass(frozen=True, repr=False)
class Element:
    """
    Неизменяемый элемент удвоенной алгебры: пара (left, right).

    Арифметика делегируется алгебре; операнды разных алгебр не смешиваются
    (операторы возвращают NotImplemented, что даёт TypeError).
    """

    algebra: DoubledAlgebra
    left: Component
    right: Component

    def __post_init__(self) -> None:
        """Компоненты обязаны принадлежать базе алгебры (без смешивания уровней)."""
        if not isinstance(self.algebra, DoubledAlgebra):
            raise TypeError(f"{self.algebra!r} is not a DoubledAlgebra")
        base = self.algebra.base
        if not (base.contains(self.left) and base.contains(self.right)):
            raise TypeError(
                f"components of {self.algebra!r} must belong to {base!r}, "
                f"got {self.left!r} and {self.right!r}"
            )

    def _same_algebra(self, other: object) -> bool:
        return isinstance(other, Element) and (
            other.algebra is self.algebra or other.algebra == self.algebra
        )

    def __add__(self, other: object) -> "Element":
        if not self._same_algebra(other):
            return NotImplemented
        return self.algebra.add(self, other)  # type: ignore[arg-type]

    def __sub__(self, other: object) -> "Element":
        if not self._same_algebra(other):
            return NotImplemented
        return self.algebra.sub(self, other)  # type: ignore[arg-type]

    def __neg__(self) -> "Element":
        return self.algebra.neg(self)

    def __mul__(self, other: object) -> "Element":
        if self._same_algebra(other):
            return self.algebra.mul(self, other)  # type: ignore[arg-type]
        if isinstance(other, int) and not isinstance(other, bool):
            return self.algebra.scale(self, other)
        return NotImplemented

    def __rmul__(self, other: object) -> "Element":
        # int * element; element * element всегда идёт через __mul__
        if isinstance(other, int) and not isinstance(other, bool):
            return self.algebra.scale(self, other)
        return NotImplemented

    def conj(self) -> "Element":
        return self.algebra.conj(self)

    def quad(self) -> int:
        return self.algebra.quad(self)

    def components(self) -> tuple[int, ...]:
        return self.algebra.components(self)

    def real(self) -> int:
        return self.algebra.real(self)

    def is_zero(self) -> bool:
        return self.algebra.is_zero(self)

    def __repr__(self) -> str:
        label = self.algebra.name or "Element"
        return f"{label}({', '.join(str(value) for value in self.components())})"

    def __str__(self) -> str:
        """
        Строка вида "(a+bi+cj+dk)" с unit symbols алгебры.

        Без symbols мнимые единицы обозначаются e1, e2, ...
        """
        values = self.components()
        symbols = self.algebra.symbols or ("",) + tuple(
            f"e{index}" for index in range(1, len(values))
        )
        parts = [str(values[0])]
        for value, symbol in zip(values[1:], symbols[1:]):
            parts.append(f"{value:+d}{symbol}")
        return "(" + "".join(parts) + ")"


def double(base: BaseAlgebra, mu: int, name: str = "", symbols: Iterable[str] = ()) -> DoubledAlgebra:
    """Одно удвоение базовой алгебры."""
    return DoubledAlgebra(base=base, mu=mu, name=name, symbols=tuple(symbols))


def doubling_chain(mus: Iterable[int]) -> BaseAlgebra:
    """
    Безымянная цепочка удвоений целых чисел по последовательности mu.

    Examples:
        >>> doubling_chain([-1, -1]).dimension
        4
    """
    algebra: BaseAlgebra = INTEGERS
    for mu in mus:
        algebra = double(algebra, mu)
    return algebra
