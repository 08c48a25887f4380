"""
Core math modules для dickson

Базовое кольцо целых чисел, конструкция удвоения Кэли–Диксона, деление,
алгебраические тождества и генерация случайных элементов.
"""

# Base integer contract
from dickson.core.math.integers import (
    INTEGER_DIMENSION,
    INTEGERS,
    IntegerRing,
    is_integer,
    sign,
    trunc_div,
    validate_integer,
)

# Doubling construction
from dickson.core.math.doubling import (
    MAX_DOUBLINGS,
    MU_DEFINITE,
    MU_NILPOTENT,
    MU_SPLIT,
    VALID_MUS,
    DoubledAlgebra,
    Element,
    double,
    doubling_chain,
)

# Division
from dickson.core.math.division import (
    ZeroDenominatorError,
    is_invertible,
    is_zero_divisor,
    quo,
    quo_left,
    quo_right,
)

# Identities
from dickson.core.math.identities import (
    associator,
    commutator,
    is_associative_triple,
    is_commutative_pair,
    is_nilpotent,
    power,
    satisfies_alternative_laws,
)

# Random generation
from dickson.core.math.generation import (
    DEFAULT_RANDOM_BITS,
    GeneratorConfig,
    random_component,
    random_element,
)

__all__ = [
    # Integers
    "INTEGER_DIMENSION",
    "INTEGERS",
    "IntegerRing",
    "is_integer",
    "sign",
    "trunc_div",
    "validate_integer",
    # Doubling
    "MAX_DOUBLINGS",
    "MU_DEFINITE",
    "MU_NILPOTENT",
    "MU_SPLIT",
    "VALID_MUS",
    "DoubledAlgebra",
    "Element",
    "double",
    "doubling_chain",
    # Division
    "ZeroDenominatorError",
    "is_invertible",
    "is_zero_divisor",
    "quo",
    "quo_left",
    "quo_right",
    # Identities
    "associator",
    "commutator",
    "is_associative_triple",
    "is_commutative_pair",
    "is_nilpotent",
    "power",
    "satisfies_alternative_laws",
    # Generation
    "DEFAULT_RANDOM_BITS",
    "GeneratorConfig",
    "random_component",
    "random_element",
]
