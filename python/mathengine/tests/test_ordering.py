# MathEngine - Canonical Ordering Tests
# Copyright (c) 2024 MathEngine Contributors. All rights reserved.

"""
Tests for canonical ordering of commutative chains.
"""

import pytest

import mpmath

from mathengine import var, const, log, power, simplify, order, UnsupportedExpressionError
from mathengine.expr import Add, Mul, Sub, Div, Negate
from mathengine.ordering import weight


x, y, z = var('x'), var('y'), var('z')


def canonical(expr):
    return order(simplify(expr))


class TestWeight:
    """Test term weights."""

    def test_constant_weighs_its_value(self):
        """Test constant weight."""
        assert weight(const(5)) == 5

    def test_variable_weighs_its_code_point(self):
        """Test variable weight."""
        assert weight(x) == ord('x')

    def test_compound_terms(self):
        """Compound weights evaluate the term."""
        assert weight(x + 1) == ord('x') + 1
        assert weight(2 * y) == 2 * ord('y')
        assert weight(-x) == -ord('x')

    def test_zero_divisor(self):
        """A zero divisor weighs inf."""
        assert weight(x / 0) == mpmath.inf

    def test_complex_power_uses_real_part(self):
        """Complex powers weigh their real part."""
        assert abs(float(weight(power(-4, 0.5)))) < 1e-20

    def test_log_unsupported(self):
        """Logarithms cannot be weighed."""
        with pytest.raises(UnsupportedExpressionError):
            weight(log(2, x))


class TestOrder:
    """Test the ordering pass itself."""

    def test_sum_sorted_descending(self):
        """Test sum ordering."""
        assert order(x + z + 2) == Add(z, Add(x, const(2)))

    def test_product_sorted_descending(self):
        """Test product ordering."""
        assert order(2 * x * y) == Mul(y, Mul(x, const(2)))

    def test_ties_keep_original_order(self):
        """Equal weights keep their relative order."""
        # x * 2 and 240 weigh the same
        assert order(const(240) + x * 2) == Add(const(240), Mul(x, const(2)))
        assert order(x * 2 + 240) == Add(Mul(x, const(2)), const(240))

    def test_other_nodes_keep_shape(self):
        """Non-commutative nodes keep their shape."""
        assert order(Sub(x, z)) == Sub(x, z)
        assert order(Div(x, z + y)) == Div(x, Add(z, y))
        assert order(Negate(x + z)) == Negate(Add(z, x))

    def test_log_children_ordered(self):
        """Chains inside a logarithm are ordered."""
        assert order(log(x + z, y)) == log(Add(z, x), y)

    def test_log_inside_sum_unsupported(self):
        """A logarithm in a sum cannot be ordered."""
        with pytest.raises(UnsupportedExpressionError):
            order(log(2, x) + 1)


class TestCommutativeCanonicalization:
    """Reorderings of the same terms become identical."""

    def test_three_term_sum(self):
        """Test x + y + z in any order."""
        assert canonical(x + y + z) == canonical(x + z + y) == canonical(z + y + x)

    def test_three_factor_product(self):
        """Test x * y * z in any order."""
        assert canonical(x * y * z) == canonical(x * z * y) == canonical(z * y * x)

    def test_product_with_sum_factor(self):
        """Test x * (y + z) = (y + z) * x."""
        assert canonical(x * (y + z)) == canonical((y + z) * x)

    def test_mixed_constants(self):
        """Constants and coefficients in any order."""
        assert canonical(2 + x * 3 + y) == canonical(y + 3 * x + 2)


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
