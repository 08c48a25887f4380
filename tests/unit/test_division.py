"""
Тесты для модуля Division — частные и делители нуля

Проверяет:
1. Правое и левое частное (quo, quo_left)
2. Усечённое деление компонент (round toward zero)
3. ZeroDenominatorError для нуля (definite) и делителей нуля (split/нильпотентные)
4. Детекцию делителей нуля по семействам
"""

import logging

import pytest

from dickson.core.domain.catalogue import (
    CAYLEY,
    COCKLE,
    COMPLEX,
    HAMILTON,
    INFRA,
    INFRA_COMPLEX,
    INFRA_PERPLEX,
    PERPLEX,
    SUPRA,
    new_cockle,
    new_complex,
    new_infra,
    new_infra_complex,
    new_infra_perplex,
    new_perplex,
    new_supra,
)
from dickson.core.math.division import (
    ZeroDenominatorError,
    is_invertible,
    is_zero_divisor,
    quo,
    quo_left,
    quo_right,
)

# =============================================================================
# ТЕСТЫ ЧАСТНЫХ
# =============================================================================


class TestQuo:
    """Тесты для quo / quo_left"""

    def test_complex_exact(self) -> None:
        """(11-2i) / (1-2i) = 3+4i"""
        assert quo(new_complex(11, -2), new_complex(1, -2)) == new_complex(3, 4)

    def test_perplex_exact(self) -> None:
        """3 / (2-s) = 2+s, так как (2+s)(2-s) = 3"""
        assert quo(new_perplex(3, 0), new_perplex(2, -1)) == new_perplex(2, 1)

    def test_negative_quadrance(self) -> None:
        """Perplex с quad < 0: 3 / (1+2s) = -1+2s"""
        y = new_perplex(1, 2)
        assert y.quad() == -3
        assert quo(new_perplex(3, 0), y) == new_perplex(-1, 2)

    def test_infra(self) -> None:
        x = new_infra(2, 3) * new_infra(5, -7)
        assert quo(x, new_infra(5, -7)) == new_infra(2, 3)

    def test_truncation_toward_zero(self) -> None:
        """Компоненты делятся с округлением к нулю"""
        # 7·2 / 4 = 3.5 → 3
        assert quo(new_complex(7, 0), new_complex(2, 0)) == new_complex(3, 0)
        # -7·2 / 4 = -3.5 → -3 (floor дал бы -4)
        assert quo(new_complex(-7, 0), new_complex(2, 0)) == new_complex(-3, 0)

    def test_pseudo_inverse_is_approximate(self) -> None:
        """quo не является точным обратным над целыми"""
        x, y = new_complex(1, 0), new_complex(1, 1)
        q = quo(x, y)
        assert q == new_complex(0, 0)
        assert q * y != x

    def test_left_and_right_differ_in_hamilton(self) -> None:
        """i / j: справа -k, слева +k"""
        _, i, j, k = HAMILTON.basis()
        assert quo(i, j) == -k
        assert quo_left(i, j) == k

    def test_left_equals_right_when_commutative(self) -> None:
        x, y = new_complex(10, 3), new_complex(2, -1)
        assert quo_left(x, y) == quo(x, y)

    def test_quo_right_alias(self) -> None:
        assert quo_right is quo

    def test_cayley_left_quotient(self) -> None:
        _, i, _, _, m, n, _, _ = CAYLEY.basis()
        # i·m = n, поэтому n / m справа даёт i, а слева conj(m)·n = -m·n = -i
        assert quo(n, m) == i
        assert quo_left(n, m) == -i

    def test_mixed_algebras_raise(self) -> None:
        with pytest.raises(TypeError):
            quo(new_complex(1, 1), new_perplex(1, 0))


class TestZeroDenominator:
    """ZeroDenominatorError при необратимом знаменателе"""

    @pytest.mark.parametrize(
        "algebra",
        [COMPLEX, PERPLEX, INFRA, HAMILTON, COCKLE, INFRA_COMPLEX, INFRA_PERPLEX, SUPRA, CAYLEY],
        ids=lambda algebra: algebra.name,
    )
    def test_zero_denominator(self, algebra) -> None:
        x = algebra.one()
        with pytest.raises(ZeroDenominatorError):
            quo(x, algebra.zero())
        with pytest.raises(ZeroDenominatorError):
            quo_left(x, algebra.zero())

    def test_is_zero_division_error(self) -> None:
        """ZeroDenominatorError — подкласс ZeroDivisionError"""
        with pytest.raises(ZeroDivisionError, match="zero denominator"):
            quo(new_complex(1, 2), COMPLEX.zero())

    def test_perplex_zero_divisor_denominator(self) -> None:
        with pytest.raises(ZeroDenominatorError, match="zero divisor"):
            quo(new_perplex(5, 5), new_perplex(1, 1))
        with pytest.raises(ZeroDenominatorError):
            quo(new_perplex(5, 5), new_perplex(3, -3))

    def test_infra_nilpotent_denominator(self) -> None:
        with pytest.raises(ZeroDenominatorError):
            quo(new_infra(1, 1), new_infra(0, 4))

    def test_cockle_zero_divisor_denominator(self) -> None:
        with pytest.raises(ZeroDenominatorError):
            quo(COCKLE.one(), new_cockle(3, 4, 5, 0))

    def test_failure_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.DEBUG, logger="dickson.core.math.division")
        with pytest.raises(ZeroDenominatorError):
            quo(new_perplex(1, 0), new_perplex(2, 2))
        assert "zero divisor" in caplog.text


# =============================================================================
# ТЕСТЫ ДЕЛИТЕЛЕЙ НУЛЯ
# =============================================================================


class TestIsZeroDivisor:
    """Тесты для is_zero_divisor и is_invertible"""

    def test_perplex(self) -> None:
        assert is_zero_divisor(new_perplex(1, 1))
        assert is_zero_divisor(new_perplex(-4, 4))
        assert not is_zero_divisor(new_perplex(2, 1))

    def test_perplex_zero_divisor_product(self) -> None:
        """(1+s)(1-s) = 0"""
        assert new_perplex(1, 1) * new_perplex(1, -1) == PERPLEX.zero()

    def test_infra_real_part_zero(self) -> None:
        assert is_zero_divisor(new_infra(0, 7))
        assert is_zero_divisor(INFRA.zero())
        assert not is_zero_divisor(new_infra(1, 7))

    def test_definite_families_have_none(self) -> None:
        """Definite алгебры: делителей нуля нет, даже у нуля"""
        for algebra in (COMPLEX, HAMILTON, CAYLEY):
            assert not is_zero_divisor(algebra.zero())
            assert not is_zero_divisor(algebra.one())

    def test_zero_is_zero_divisor_in_indefinite_families(self) -> None:
        for algebra in (PERPLEX, INFRA, COCKLE, INFRA_COMPLEX, INFRA_PERPLEX, SUPRA):
            assert is_zero_divisor(algebra.zero())

    def test_cockle(self) -> None:
        assert is_zero_divisor(new_cockle(1, 0, 1, 0))
        assert is_zero_divisor(new_cockle(3, 4, 5, 0))
        assert not is_zero_divisor(new_cockle(1, 1, 1, 0))

    def test_degenerate_hybrids(self) -> None:
        """Делитель нуля ⇔ ведущая компонента вырождена"""
        assert is_zero_divisor(new_infra_complex(0, 0, 3, 4))
        assert not is_zero_divisor(new_infra_complex(0, 1, 3, 4))
        assert is_zero_divisor(new_infra_perplex(2, 2, 1, 1))
        assert not is_zero_divisor(new_infra_perplex(2, 1, 1, 1))
        assert is_zero_divisor(new_supra(0, 5, 1, 1))
        assert not is_zero_divisor(new_supra(1, 5, 1, 1))

    def test_is_invertible(self) -> None:
        assert not is_invertible(COMPLEX.zero())
        assert is_invertible(new_complex(0, 1))
        assert not is_invertible(new_perplex(1, -1))
        assert is_invertible(new_perplex(1, 0))
