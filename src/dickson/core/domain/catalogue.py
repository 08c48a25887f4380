"""
Catalogue — Каталог именованных алгебр

Каждый именованный тип — это лишь выбор последовательности mu для
конструкции удвоения (от базы к внешнему уровню):

    Complex       [-1]          Hamilton      [-1, -1]
    Perplex       [+1]          Cockle        [-1, +1]
    Infra         [ 0]          InfraComplex  [-1,  0]
                                InfraPerplex  [+1,  0]
                                Supra         [ 0,  0]
    Cayley        [-1, -1, -1]

Никакой другой логики здесь нет: только параметры, unit symbols и
именованные конструкторы, упаковывающие целые компоненты.
"""

import logging
from typing import Final, Optional

from pydantic import BaseModel, Field, StrictInt, field_validator, model_validator

from dickson.core.math.doubling import (
    MAX_DOUBLINGS,
    VALID_MUS,
    BaseAlgebra,
    DoubledAlgebra,
    Element,
    double,
)
from dickson.core.math.integers import INTEGERS

logger = logging.getLogger(__name__)


# =============================================================================
# ALGEBRA SPEC MODEL
# =============================================================================


class AlgebraSpec(BaseModel):
    """
    Строка таблицы параметров: имя, последовательность mu и unit symbols.

    Immutable модель (frozen=True).
    """

    name: str = Field(..., min_length=1, description="Имя алгебры (например, 'Hamilton')")
    mus: tuple[StrictInt, ...] = Field(
        ...,
        min_length=1,
        max_length=MAX_DOUBLINGS,
        description="Параметры удвоения от базы к внешнему уровню",
    )
    symbols: tuple[str, ...] = Field(
        ..., description="Unit symbols, первый (вещественный) пустой"
    )

    model_config = {"frozen": True}  # Immutable

    @field_validator("mus")
    @classmethod
    def validate_mus(cls, v: tuple[int, ...]) -> tuple[int, ...]:
        for mu in v:
            if mu not in VALID_MUS:
                raise ValueError(f"mu must be one of {sorted(VALID_MUS)}, got {mu}")
        return v

    @model_validator(mode="after")
    def validate_symbols(self) -> "AlgebraSpec":
        dimension = 2 ** len(self.mus)
        if len(self.symbols) != dimension:
            raise ValueError(
                f"{self.name}: expected {dimension} symbols, got {len(self.symbols)}"
            )
        if self.symbols[0] != "":
            raise ValueError(f"{self.name}: first (real) symbol must be empty")
        return self

    @property
    def dimension(self) -> int:
        return 2 ** len(self.mus)


# =============================================================================
# ТАБЛИЦА ПАРАМЕТРОВ
# =============================================================================

COMPLEX_SPEC: Final[AlgebraSpec] = AlgebraSpec(name="Complex", mus=(-1,), symbols=("", "i"))
PERPLEX_SPEC: Final[AlgebraSpec] = AlgebraSpec(name="Perplex", mus=(1,), symbols=("", "s"))
INFRA_SPEC: Final[AlgebraSpec] = AlgebraSpec(name="Infra", mus=(0,), symbols=("", "α"))

HAMILTON_SPEC: Final[AlgebraSpec] = AlgebraSpec(
    name="Hamilton", mus=(-1, -1), symbols=("", "i", "j", "k")
)
COCKLE_SPEC: Final[AlgebraSpec] = AlgebraSpec(
    name="Cockle", mus=(-1, 1), symbols=("", "i", "t", "u")
)
INFRA_COMPLEX_SPEC: Final[AlgebraSpec] = AlgebraSpec(
    name="InfraComplex", mus=(-1, 0), symbols=("", "i", "β", "γ")
)
INFRA_PERPLEX_SPEC: Final[AlgebraSpec] = AlgebraSpec(
    name="InfraPerplex", mus=(1, 0), symbols=("", "s", "τ", "υ")
)
SUPRA_SPEC: Final[AlgebraSpec] = AlgebraSpec(
    name="Supra", mus=(0, 0), symbols=("", "α", "β", "γ")
)

CAYLEY_SPEC: Final[AlgebraSpec] = AlgebraSpec(
    name="Cayley", mus=(-1, -1, -1), symbols=("", "i", "j", "k", "m", "n", "p", "q")
)

# Порядок важен: база каждой алгебры должна идти раньше неё
CATALOGUE_SPECS: Final[tuple[AlgebraSpec, ...]] = (
    COMPLEX_SPEC,
    PERPLEX_SPEC,
    INFRA_SPEC,
    HAMILTON_SPEC,
    COCKLE_SPEC,
    INFRA_COMPLEX_SPEC,
    INFRA_PERPLEX_SPEC,
    SUPRA_SPEC,
    CAYLEY_SPEC,
)


# =============================================================================
# ПОСТРОЕНИЕ
# =============================================================================


def build_algebra(
    spec: AlgebraSpec, known: Optional[dict[tuple[int, ...], DoubledAlgebra]] = None
) -> DoubledAlgebra:
    """
    Построение алгебры по строке таблицы.

    Если алгебра для префикса mu уже построена (передана в known), она
    используется как база, так что база Cayley — это объект Hamilton.
    Иначе база строится безымянной цепочкой удвоений.

    Args:
        spec: Строка таблицы параметров
        known: Уже построенные алгебры по последовательности mu

    Returns:
        Именованная DoubledAlgebra с unit symbols из spec
    """
    known = known or {}
    prefix = spec.mus[:-1]

    base: BaseAlgebra = INTEGERS
    for depth in range(1, len(prefix) + 1):
        base = known.get(prefix[:depth]) or double(base, prefix[depth - 1])

    algebra = double(base, spec.mus[-1], name=spec.name, symbols=spec.symbols)
    logger.debug("built %s: mus=%s dimension=%d", spec.name, spec.mus, algebra.dimension)
    return algebra


def build_catalogue(specs: tuple[AlgebraSpec, ...] = CATALOGUE_SPECS) -> dict[str, DoubledAlgebra]:
    """Построение всех алгебр таблицы (имя → алгебра)."""
    by_mus: dict[tuple[int, ...], DoubledAlgebra] = {}
    catalogue: dict[str, DoubledAlgebra] = {}
    for spec in specs:
        if spec.name in catalogue:
            raise ValueError(f"duplicate algebra name: {spec.name}")
        algebra = build_algebra(spec, by_mus)
        by_mus.setdefault(spec.mus, algebra)
        catalogue[spec.name] = algebra
    return catalogue


CATALOGUE: Final[dict[str, DoubledAlgebra]] = build_catalogue()

COMPLEX: Final[DoubledAlgebra] = CATALOGUE["Complex"]
PERPLEX: Final[DoubledAlgebra] = CATALOGUE["Perplex"]
INFRA: Final[DoubledAlgebra] = CATALOGUE["Infra"]
HAMILTON: Final[DoubledAlgebra] = CATALOGUE["Hamilton"]
COCKLE: Final[DoubledAlgebra] = CATALOGUE["Cockle"]
INFRA_COMPLEX: Final[DoubledAlgebra] = CATALOGUE["InfraComplex"]
INFRA_PERPLEX: Final[DoubledAlgebra] = CATALOGUE["InfraPerplex"]
SUPRA: Final[DoubledAlgebra] = CATALOGUE["Supra"]
CAYLEY: Final[DoubledAlgebra] = CATALOGUE["Cayley"]


def get_algebra(name: str) -> DoubledAlgebra:
    """
    Алгебра каталога по имени.

    Raises:
        KeyError: Если имя неизвестно
    """
    try:
        return CATALOGUE[name]
    except KeyError:
        raise KeyError(f"unknown algebra {name!r}; known: {sorted(CATALOGUE)}") from None


# =============================================================================
# ИМЕНОВАННЫЕ КОНСТРУКТОРЫ
# =============================================================================


def new_complex(a: int, b: int) -> Element:
    """a + bi"""
    return COMPLEX.new(a, b)


def new_perplex(a: int, b: int) -> Element:
    """a + bs"""
    return PERPLEX.new(a, b)


def new_infra(a: int, b: int) -> Element:
    """a + bα"""
    return INFRA.new(a, b)


def new_hamilton(a: int, b: int, c: int, d: int) -> Element:
    """a + bi + cj + dk"""
    return HAMILTON.new(a, b, c, d)


def new_cockle(a: int, b: int, c: int, d: int) -> Element:
    """a + bi + ct + du"""
    return COCKLE.new(a, b, c, d)


def new_infra_complex(a: int, b: int, c: int, d: int) -> Element:
    return INFRA_COMPLEX.new(a, b, c, d)


def new_infra_perplex(a: int, b: int, c: int, d: int) -> Element:
    return INFRA_PERPLEX.new(a, b, c, d)


def new_supra(a: int, b: int, c: int, d: int) -> Element:
    return SUPRA.new(a, b, c, d)


def new_cayley(a: int, b: int, c: int, d: int, e: int, f: int, g: int, h: int) -> Element:
    """a + bi + cj + dk + em + fn + gp + hq"""
    return CAYLEY.new(a, b, c, d, e, f, g, h)
