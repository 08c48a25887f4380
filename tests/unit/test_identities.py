"""
Тесты для модуля Identities — коммутатор, ассоциатор, степени

Проверяет:
1. Коммутатор и ассоциатор на базисных элементах
2. Альтернативные законы Cayley
3. power и is_nilpotent
"""

import pytest

from dickson.core.domain.catalogue import (
    CAYLEY,
    COMPLEX,
    HAMILTON,
    INFRA,
    SUPRA,
    new_cockle,
    new_complex,
    new_infra,
)
from dickson.core.math.identities import (
    associator,
    commutator,
    is_associative_triple,
    is_commutative_pair,
    is_nilpotent,
    power,
    satisfies_alternative_laws,
)

# =============================================================================
# ТЕСТЫ КОММУТАТОРА И АССОЦИАТОРА
# =============================================================================


class TestCommutator:
    """Тесты для commutator"""

    def test_hamilton_units(self) -> None:
        """[i, j] = ij - ji = 2k"""
        _, i, j, k = HAMILTON.basis()
        assert commutator(i, j) == k * 2
        assert not is_commutative_pair(i, j)

    def test_complex_commutes(self) -> None:
        assert commutator(new_complex(3, 4), new_complex(-1, 7)) == COMPLEX.zero()
        assert is_commutative_pair(new_complex(3, 4), new_complex(-1, 7))

    def test_anti_symmetric(self) -> None:
        _, i, _, k = HAMILTON.basis()
        assert commutator(i, k) == -commutator(k, i)


class TestAssociator:
    """Тесты для associator"""

    def test_cayley_i_j_m(self) -> None:
        """(ij)m - i(jm) = q - (-q) = 2q"""
        units = CAYLEY.basis()
        i, j, m, q = units[1], units[2], units[4], units[7]
        assert associator(i, j, m) == q * 2
        assert not is_associative_triple(i, j, m)

    def test_hamilton_basis_associative(self) -> None:
        basis = HAMILTON.basis()
        for w in basis:
            for x in basis:
                for y in basis:
                    assert is_associative_triple(w, x, y)

    def test_cayley_basis_alternative(self) -> None:
        basis = CAYLEY.basis()
        for x in basis:
            for y in basis:
                assert satisfies_alternative_laws(x, y)


# =============================================================================
# ТЕСТЫ СТЕПЕНЕЙ И НИЛЬПОТЕНТНОСТИ
# =============================================================================


class TestPower:
    """Тесты для power"""

    def test_zero_exponent_is_one(self) -> None:
        assert power(new_complex(5, 5), 0) == COMPLEX.one()

    def test_units(self) -> None:
        i = COMPLEX.unit(1)
        assert power(i, 2) == -COMPLEX.one()
        assert power(i, 4) == COMPLEX.one()

    def test_cayley_unit_square(self) -> None:
        assert power(CAYLEY.unit(6), 2) == -CAYLEY.one()

    def test_matches_repeated_product(self) -> None:
        x = new_complex(2, 1)
        assert power(x, 3) == x * x * x

    def test_negative_exponent_raises(self) -> None:
        with pytest.raises(ValueError, match="non-negative"):
            power(new_complex(1, 1), -1)


class TestIsNilpotent:
    """Тесты для is_nilpotent"""

    def test_infra_unit(self) -> None:
        """α² = 0"""
        assert is_nilpotent(new_infra(0, 3), 2)
        assert not is_nilpotent(new_infra(0, 3), 1)

    def test_zero_always_nilpotent(self) -> None:
        assert is_nilpotent(INFRA.zero(), 0)

    def test_cockle_nilpotent(self) -> None:
        """(i + t)² = -1 + u - u + 1 = 0"""
        assert is_nilpotent(new_cockle(0, 1, 1, 0), 2)
        assert not is_nilpotent(new_cockle(1, 1, 1, 0), 8)

    def test_supra_units(self) -> None:
        for unit in SUPRA.basis()[1:]:
            assert is_nilpotent(unit, 2)

    def test_complex_units_not_nilpotent(self) -> None:
        assert not is_nilpotent(COMPLEX.unit(1), 8)
