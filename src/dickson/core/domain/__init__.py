"""
Domain: каталог именованных целочисленных алгебр.

Complex, Perplex, Infra, Hamilton, Cockle, InfraComplex, InfraPerplex,
Supra, Cayley.
"""

from dickson.core.domain.catalogue import (
    CATALOGUE,
    CATALOGUE_SPECS,
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
    build_algebra,
    build_catalogue,
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

__all__ = [
    # Spec model
    "AlgebraSpec",
    "CATALOGUE_SPECS",
    "build_algebra",
    "build_catalogue",
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
]
