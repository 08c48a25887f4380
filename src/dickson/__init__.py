"""
dickson — целочисленные алгебры Кэли–Диксона

Гауссовы целые, perplex и дуальные целые, целочисленные кватернионы
(Hamilton, Cockle), октонионы Cayley и вырожденные гибриды, построенные
одной рекурсивной конструкцией удвоения.
"""

__version__ = "0.1.0"

from dickson.core.domain import (
    CATALOGUE,
    CAYLEY,
    COCKLE,
    COMPLEX,
    HAMILTON,
    INFRA,
    INFRA_COMPLEX,
    INFRA_PERPLEX,
    PERPLEX,
    SUPRA,
    AlgebraSpec,
    get_algebra,
    new_cayley,
    new_cockle,
    new_complex,
    new_hamilton,
    new_infra,
    new_infra_complex,
    new_infra_perplex,
    new_perplex,
    new_supra,
)
from dickson.core.math import (
    DoubledAlgebra,
    Element,
    GeneratorConfig,
    ZeroDenominatorError,
    associator,
    commutator,
    is_invertible,
    is_nilpotent,
    is_zero_divisor,
    power,
    quo,
    quo_left,
    quo_right,
    random_element,
)

__all__ = [
    "__version__",
    # Construction
    "DoubledAlgebra",
    "Element",
    "AlgebraSpec",
    # Algebras
    "CATALOGUE",
    "COMPLEX",
    "PERPLEX",
    "INFRA",
    "HAMILTON",
    "COCKLE",
    "INFRA_COMPLEX",
    "INFRA_PERPLEX",
    "SUPRA",
    "CAYLEY",
    "get_algebra",
    # Constructors
    "new_complex",
    "new_perplex",
    "new_infra",
    "new_hamilton",
    "new_cockle",
    "new_infra_complex",
    "new_infra_perplex",
    "new_supra",
    "new_cayley",
    # Operations
    "ZeroDenominatorError",
    "is_zero_divisor",
    "is_invertible",
    "quo",
    "quo_left",
    "quo_right",
    "commutator",
    "associator",
    "power",
    "is_nilpotent",
    # Generation
    "GeneratorConfig",
    "random_element",
]
