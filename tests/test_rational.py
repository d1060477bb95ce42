from fractions import Fraction

import pytest

from ratapprox import Rational, to_float, to_string


def test_rational():
    r = Rational(6, 4)
    assert r.numerator == 6
    assert r.denominator == 4
    assert Rational(3) == Rational(3, 1)
    # Terms are kept as given.
    assert Rational(6, 4) != Rational(3, 2)
    assert r.to_fraction() == Fraction(3, 2)
    assert tuple(r) == (6, 4)
    n, d = Rational(-1, 7)
    assert (n, d) == (-1, 7)
    assert len({Rational(1, 2), Rational(1, 2), Rational(2, 4)}) == 2
    assert repr(r) == "Rational(6, 4)"
    # Check exceptions raised on invalid arguments.
    with pytest.raises(ValueError):
        Rational(1, 0)
    with pytest.raises(ValueError):
        Rational(1, -2)


def test_to_float():
    assert to_float(Rational(0, 1)) == 0.0
    assert to_float(Rational(1, 4)) == 0.25
    assert to_float(Rational(-7, 2)) == -3.5
    assert to_float(Rational(1, 3)) == 1.0 / 3.0
    assert float(Rational(355, 113)) == 355 / 113
    assert to_float(Rational(2**62, 2**61)) == 2.0


def test_to_string():
    assert to_string(Rational(0, 1)) == "0/1"
    assert to_string(Rational(4, 1)) == "4/1"
    assert to_string(Rational(-13, 4)) == "-13/4"
    assert str(Rational(6, 4)) == "6/4"
