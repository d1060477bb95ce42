from __future__ import annotations

from fractions import Fraction


class Rational(object):
    """The number numerator/denominator, with denominator > 0.

    Unlike `fractions.Fraction`, a `Rational` keeps the exact terms it was
    built from and is never reduced: the mediant search forms new bounds by
    adding numerator and denominator vectors, and those terms are the result.
    """

    __slots__ = ("numerator", "denominator")

    def __init__(self, numerator: int, denominator: int = 1):
        if not denominator > 0:
            msg = f"Rational: `denominator` ({denominator}) must be > 0."
            raise ValueError(msg)
        self.numerator = int(numerator)
        self.denominator = int(denominator)

    def __iter__(self):
        yield self.numerator
        yield self.denominator

    def __eq__(self, other):
        if isinstance(other, Rational):
            return tuple(self) == tuple(other)
        return NotImplemented

    def __hash__(self):
        return hash(tuple(self))

    def __repr__(self):
        return f"Rational({self.numerator}, {self.denominator})"

    def __str__(self):
        return to_string(self)

    def __float__(self):
        return to_float(self)

    def to_fraction(self) -> Fraction:
        """Return the exact value as a (reduced) `Fraction`."""
        return Fraction(self.numerator, self.denominator)


def to_float(r: Rational) -> float:
    """Return numerator / denominator as a float."""
    return r.numerator / r.denominator


def to_string(r: Rational) -> str:
    """Render as "numerator/denominator"."""
    return f"{r.numerator}/{r.denominator}"
