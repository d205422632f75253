# Tests for rational.py - exact and human-friendly conversions

import pytest
from fractions import Fraction

import mpmath


class TestToFraction:
    """Tests for to_fraction() - human-friendly conversion."""

    def test_integer_conversion(self):
        """Test converting integers."""
        from mathengine.rational import to_fraction

        assert to_fraction(0) == Fraction(0)
        assert to_fraction(-5) == Fraction(-5)
        assert to_fraction(42) == Fraction(42)

    def test_fraction_passthrough(self):
        """Fractions are returned unchanged."""
        from mathengine.rational import to_fraction

        f = Fraction(1, 3)
        assert to_fraction(f) is f

    def test_simple_decimals(self):
        """Floats are read through their decimal repr."""
        from mathengine.rational import to_fraction

        assert to_fraction(0.1) == Fraction(1, 10)
        assert to_fraction(0.25) == Fraction(1, 4)
        assert to_fraction(-3.14) == Fraction(-157, 50)
        assert to_fraction(10.1) == Fraction(101, 10)

    def test_decimal_strings(self):
        """Decimal strings convert exactly."""
        from mathengine.rational import to_fraction

        assert to_fraction("2.50") == Fraction(5, 2)
        assert to_fraction(" 0.001 ") == Fraction(1, 1000)

    def test_mpf(self):
        """mpf values convert through their decimal form."""
        from mathengine.rational import to_fraction

        with mpmath.workprec(100):
            value = mpmath.mpf("0.1")
        assert to_fraction(value) == Fraction(1, 10)

    def test_scientific_notation(self):
        """Test scientific notation strings."""
        from mathengine.rational import to_fraction

        assert to_fraction(1e-10) == Fraction(1, 10**10)
        assert to_fraction(1e10) == Fraction(10**10)

    def test_fine_values_limited(self):
        """Values finer than max_denom fall back to limit_denominator."""
        from mathengine.rational import to_fraction

        result = to_fraction(1e-20, max_denom=10**12)
        assert result.denominator <= 10**12

    def test_non_finite_rejected(self):
        """inf and nan cannot become fractions."""
        from mathengine.rational import to_fraction

        with pytest.raises(ValueError):
            to_fraction(float('nan'))
        with pytest.raises(ValueError):
            to_fraction(mpmath.inf)


class TestExactFraction:
    """Tests for exact_fraction() - the true binary value."""

    def test_binary_value_of_float(self):
        """Floats give their exact binary value."""
        from mathengine.rational import exact_fraction

        assert exact_fraction(0.1) == Fraction(0.1)
        assert exact_fraction(0.1) != Fraction(1, 10)

    def test_mpf_values(self):
        """mpf values give their exact binary value."""
        from mathengine.rational import exact_fraction

        assert exact_fraction(mpmath.mpf(0.5)) == Fraction(1, 2)
        assert exact_fraction(mpmath.mpf(-3)) == Fraction(-3)
        assert exact_fraction(mpmath.mpf(1024)) == Fraction(1024)
        assert exact_fraction(mpmath.mpf(0)) == Fraction(0)

    def test_non_finite_rejected(self):
        """inf and nan cannot become fractions."""
        from mathengine.rational import exact_fraction

        with pytest.raises(ValueError):
            exact_fraction(mpmath.nan)


class TestToMpf:
    """Tests for to_mpf()."""

    def test_fraction(self):
        """Fractions round to mpf."""
        from mathengine.rational import to_mpf

        assert to_mpf(Fraction(3, 4), 53) == mpmath.mpf(0.75)

    def test_float_uses_decimal(self):
        """Floats are read through their decimal repr."""
        from mathengine.rational import to_mpf, exact_fraction

        # At 100 bits the decimal 0.1 differs from the double 0.1
        assert exact_fraction(to_mpf(0.1, 100)) != Fraction(0.1)

    def test_precision_applied(self):
        """The requested precision is used."""
        from mathengine.rational import to_mpf

        with mpmath.workprec(200):
            third = mpmath.mpf(1) / 3
        assert to_mpf(third, 53) == mpmath.mpf(1) / 3


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
