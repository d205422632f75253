# MathEngine - Simplification Tests
# Copyright (c) 2024 MathEngine Contributors. All rights reserved.

"""
Tests for symbolic simplification.
"""

import pytest
from fractions import Fraction

from mathengine import (
    var, const, log, power, simplify, order,
    Constant, Variable, Add, Sub, Mul, Div, Pow, Negate,
    NumberKind, DivisionByZeroError, UnsupportedExpressionError,
)
from mathengine.expr import Expr


x, y, z = var('x'), var('y'), var('z')


class TestConstantFolding:
    """Test that constants are folded."""

    def test_sum(self):
        """Test constant sum."""
        assert simplify(const(2) + const(3)) == const(5)

    def test_integer_division_is_exact(self):
        """5 / 2 folds to 5/2."""
        result = simplify(const(5) / const(2))
        assert result == const(Fraction(5, 2))
        assert result.value.kind is NumberKind.RATIONAL

    def test_floats_are_sticky(self):
        """A Float constant makes the folded result a Float."""
        result = simplify(const(1) + const(Fraction(1, 2)) + const(0.5))
        assert result.value.kind is NumberKind.FLOAT
        assert result == const(2)

    def test_power_of_constants(self):
        """Test constant powers."""
        assert simplify(power(2, 10)) == const(1024)

    def test_division_by_zero(self):
        """Folding c / 0 raises."""
        with pytest.raises(DivisionByZeroError):
            simplify(const(1) / const(0))

    def test_complex_power_stays_symbolic(self):
        """(-8)^(1/2) is left as a power."""
        result = simplify(power(-8, Fraction(1, 2)))
        assert result == Pow(const(-8), const(Fraction(1, 2)))


class TestIdentities:
    """Test identity removal and zero propagation."""

    def test_add_zero(self):
        """Test x + 0 = x."""
        assert simplify(x + 0) == x
        assert simplify(0 + x) == x

    def test_one_times_x(self):
        """No literal 1 wrapper survives."""
        assert simplify(1 * x) == x
        assert simplify(x * 1) == x

    def test_zero_times_x(self):
        """Test x * 0 = 0."""
        assert simplify(x * 0) == const(0)
        assert simplify(x * y * 0 * z) == const(0)

    def test_one_plus_x_minus_one(self):
        """Test 1 + x - 1 = x."""
        assert simplify(1 + x - 1) == x

    def test_self_subtraction(self):
        """Test x - x = 0."""
        assert simplify(x - x) == const(0)

    def test_power_one(self):
        """Test x^1 = x."""
        assert simplify(x ** 1) == x

    def test_power_zero(self):
        """Test x^0 = 1."""
        assert simplify(x ** 0) == const(1)

    def test_whole_expression_constant_is_bare(self):
        """A fully constant expression is a bare Constant."""
        assert simplify(const(1) * const(1)) == const(1)
        assert simplify(const(0) + const(0)) == const(0)


class TestNegation:
    """Test negation pushing and cancellation."""

    def test_triple_negation(self):
        """Test ---x = -x."""
        assert simplify(-(-(-x))) == simplify(-x) == Negate(x)

    def test_negated_constant(self):
        """Negated constants fold."""
        assert simplify(-const(3)) == const(-3)

    def test_distribute_over_sum(self):
        """Test -(x + y) = -x + -y."""
        assert simplify(-(x + y)) == simplify(-x + -y)

    def test_distribute_over_difference(self):
        """Test -(x - 2) = 2 + -x."""
        assert simplify(-(x - 2)) == Add(const(2), Negate(x))

    def test_push_onto_product(self):
        """Negation moves into the coefficient."""
        assert simplify(-(2 * x)) == Mul(const(-2), x)

    def test_push_onto_numerator(self):
        """Negation moves onto the numerator."""
        assert simplify(-(x / y)) == Div(Negate(x), y)

    def test_times_minus_one(self):
        """Test x * -1 = -x."""
        assert simplify(x * -1) == Negate(x)


class TestLikeTerms:
    """Test like term and like factor collection."""

    def test_repeated_variable(self):
        """Test x + x + x = 3 * x."""
        assert simplify(x + x + x) == simplify(3 * x) == Mul(const(3), x)

    def test_coefficients_merge(self):
        """Test 3x + 5x = 8x."""
        assert simplify(3 * x + x * 5) == simplify(8 * x)

    def test_coefficient_one_is_bare(self):
        """Test 2x - x = x."""
        assert simplify(2 * x - x) == x

    def test_cancelling_terms_drop(self):
        """Terms with coefficient zero disappear."""
        assert simplify(x + y - x) == y

    def test_constant_goes_first(self):
        """Folded constants lead the sum."""
        assert simplify(x + 2 + y + 3) == Add(const(5), Add(x, y))

    def test_first_appearance_order(self):
        """Collected terms keep their first position."""
        assert simplify(y + x + y) == Add(Mul(const(2), y), x)

    def test_compound_terms(self):
        """Compound terms collect like variables."""
        assert simplify(x * y + 2 * (x * y)) == Mul(const(3), Mul(x, y))

    def test_reordered_compound_terms(self):
        """Test x*y + y*x = 2xy."""
        assert simplify(x * y + y * x) == Mul(const(2), Mul(x, y))

    def test_reordered_factor_bases(self):
        """Bases that differ only in operand order collect."""
        assert simplify(power(x + y, 2) * (y + x)) == Pow(Add(x, y), const(3))

    def test_repeated_factor(self):
        """Test x * x * x = x^3."""
        assert simplify(x * x * x) == simplify(power(x, 3)) == Pow(x, const(3))

    def test_powers_merge(self):
        """Test x^3 * x = x^4."""
        assert simplify(power(x, 3) * x) == simplify(power(x, 4))

    def test_powers_cancel(self):
        """Test x^2 * x^-2 = 1."""
        assert simplify(power(x, 2) * power(x, -2)) == const(1)

    def test_symbolic_exponents(self):
        """Symbolic exponents are summed."""
        assert simplify(power(x, y) * x) == Pow(x, Add(const(1), y))

    def test_constant_leads_product(self):
        """Folded constants lead the product."""
        assert simplify(x * 2 * y * 3) == Mul(const(6), Mul(x, y))


class TestStructuralRules:
    """Test per-node rules."""

    def test_subtraction_never_survives(self):
        """Test x - y becomes x + -y."""
        result = simplify(x - y)
        assert result == Add(x, Negate(y))

    def test_nested_power(self):
        """Test (x^y)^z = x^(z*y)."""
        assert simplify(power(power(x, y), z)) == Pow(x, Mul(z, y))

    def test_nested_constant_powers(self):
        """Test (x^2)^3 = x^6."""
        assert simplify(power(power(x, 2), 3)) == Pow(x, const(6))

    def test_division_not_cancelled(self):
        """x^2 / x is left alone."""
        assert simplify(power(x, 2) / x) == Div(Pow(x, const(2)), x)

    def test_log_children_simplified(self):
        """Both logarithm children are simplified."""
        assert simplify(log(1 + 1, x + 0)) == log(2, x)

    def test_unknown_node(self):
        """Unknown node kinds raise with the supported kinds listed."""
        class Unknown(Expr):
            def children(self):
                return ()

        with pytest.raises(UnsupportedExpressionError) as exc_info:
            simplify(Unknown())
        assert "Supported kinds are: const, var" in exc_info.value.suggestion


class TestIdempotence:
    """simplify(simplify(e)) == simplify(e)."""

    @pytest.mark.parametrize("expr", [
        x + x + x,
        3 * x + x * 5 - 2,
        -(x + y * 2) - (z - 1),
        x * x * y * x / 2,
        power(x, 2) * power(x, y) * 3,
        -(-(-x)) * -1,
        log(2, x + x) + 4,
        power(power(x, 2), Fraction(1, 2)),
        (x - y) * (x + y),
        2 / x - y / 3,
    ])
    def test_idempotent(self, expr):
        """Simplifying twice changes nothing."""
        once = simplify(expr)
        assert simplify(once) == once

    @pytest.mark.parametrize("expr", [
        x * y + y * x,
        x * y * z + z * y * x - x,
        (x + y) * (y + x),
        3 * (y * x) + x * y * 2 + 1,
    ])
    def test_canonical_form_is_fixed_point(self, expr):
        """order(simplify(e)) is stable, even after adding zero."""
        canonical = order(simplify(expr))
        assert order(simplify(canonical)) == canonical
        assert order(simplify(canonical + 0)) == canonical


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
