from __future__ import annotations

import enum
import logging
import math
from typing import Callable, NamedTuple

import numpy as np

from ratapprox.integers import IntType, OutOfRangeError, as_int_type
from ratapprox.rational import Rational, to_float

# Bounds are compared in floating point, so once the denominators get large
# a bound may land a few ulps on the wrong side of the target.
BOUNDS_TOLERANCE = 1e-12


class StopReason(enum.Enum):
    PRECISION_HIGH = "precision_high"
    PRECISION_LOW = "precision_low"
    OVERFLOW = "overflow"
    MAX_ITERS = "max_iters"

    @property
    def precision_met(self) -> bool:
        return self in (StopReason.PRECISION_HIGH, StopReason.PRECISION_LOW)


class SearchStep(NamedTuple):
    """Search state at the top of one iteration, as passed to a trace sink."""

    iteration: int
    low: Rational
    high: Rational
    test_low: float
    test_high: float

    def __str__(self):
        return (
            f"iteration {self.iteration}: low = {self.low} (test {self.test_low:.6g}), "
            f"high = {self.high} (test {self.test_high:.6g})"
        )


class Approximation(NamedTuple):
    fraction: Rational
    reason: StopReason
    iterations: int


def machine_epsilon(value) -> float:
    """Return the machine epsilon of the floating point format of `value`.

    numpy floating scalars (e.g. `np.float32`) use their own format; anything
    else is treated as a 64-bit float.
    """
    if isinstance(value, np.floating):
        return float(np.finfo(value.dtype).eps)
    return float(np.finfo(np.float64).eps)


def log_trace(step: SearchStep) -> None:
    """Trace sink that writes every search step to the debug log."""
    logging.debug(f"approximate: {step}")


def _mediant(int_type: IntType, a: Rational, b: Rational, n: int = 1) -> Rational | None:
    """Return (a.num + n*b.num) / (a.den + n*b.den), or None on overflow."""
    terms = list()
    for x, y in ((a.numerator, b.numerator), (a.denominator, b.denominator)):
        t = int_type.checked_mul(n, y)
        if t is not None:
            t = int_type.checked_add(x, t)
        if t is None:
            return None
        terms.append(t)
    return Rational(*terms)


class RationalApproximator(object):
    def __init__(
        self,
        int_type=np.int64,
        max_iters: int = 100,
        trace: Callable[[SearchStep], None] | None = None,
    ):
        """Converts floats to fractions by mediant (Stern-Brocot) search.

        The fractional part of the input is bracketed by two fractions, low
        and high, starting from 0/1 and 1/1. Each iteration replaces both
        bounds by mediants `a + n*b`, where the step count `n` is the integer
        part of the larger of the two ratios between the bounds' distances to
        the target. This takes a whole run of Stern-Brocot steps at once and
        lands on the continued fraction convergents in few iterations.

        The search stops as soon as one bound is within the precision, high
        bound first. It also stops, returning the current high bound, when
        the next step would not fit the integer type or after `max_iters`
        steps; the precision is not met in those cases. A bound whose
        numerator would overflow once the integer part of the input is added
        back is never returned: the closest earlier bound that fits is used
        instead.

        Args:
            int_type: The signed integer type of the numerator and
                denominator. See `as_int_type`.
            max_iters: The maximum number of refinement steps.
            trace: Optional callable that receives a `SearchStep` at the top
                of every iteration, e.g. `log_trace`.

        Raises:
            ValueError: if `max_iters` is negative or `int_type` is invalid.
        """
        if max_iters < 0:
            msg = f"RationalApproximator: `max_iters` ({max_iters}) must be non-negative."
            raise ValueError(msg)
        self.int_type = as_int_type(int_type)
        self.max_iters = max_iters
        self.trace = trace

    def approximate(self, value, precision: float | None = None) -> Rational:
        """Return a fraction that approximates `value`.

        Args:
            value: A finite real number.
            precision: Maximum absolute difference between the fractional
                parts of `value` and of the result. If None, the machine
                epsilon of the format of `value` is used.

        Returns:
            The fraction, with the integer part of `value` folded into the
            numerator. It is not necessarily in lowest terms.

        Raises:
            ValueError: if `value` is not finite or `precision` is not > 0.
            OutOfRangeError: if the integer part of `value` does not fit the
                integer type.
        """
        if precision is None:
            precision = machine_epsilon(value)
        value = float(value)
        precision = float(precision)
        if not math.isfinite(value):
            msg = f"approximate: `value` ({value}) must be finite."
            raise ValueError(msg)
        if not (math.isfinite(precision) and precision > 0):
            msg = f"approximate: `precision` ({precision}) must be > 0."
            raise ValueError(msg)

        sign = -1 if value < 0 else 1
        magnitude = abs(value)
        int_part = self.int_type.require(math.trunc(magnitude), "approximate: integer part")
        frac = magnitude - int_part
        if abs(frac) > 1:
            msg = f"approximate: fraction cannot be larger than +/-{self.int_type.max_value}."
            raise OutOfRangeError(msg)

        result = self.search(frac, precision, int_part)
        if not result.reason.precision_met:
            logging.warning(
                f"approximate: precision {precision} not met for {value}; "
                f"search stopped ({result.reason.value}) after {result.iterations} iterations."
            )

        fraction = result.fraction
        return Rational(sign * self._fold(int_part, fraction), fraction.denominator)

    def search(self, frac: float, precision: float, int_part: int = 0) -> Approximation:
        """Approximate a number in [0, 1] by a fraction.

        Args:
            frac: The number to approximate, 0 <= frac <= 1.
            precision: Stop once a bound is within this distance of `frac`,
                measured as |denominator * frac - numerator|.
            int_part: The integer part that will be folded back into the
                numerator. If the final bound cannot take it without
                overflowing, the closest bound that could is returned.

        Returns:
            An `Approximation` holding the fraction, why the search stopped
            and the number of refinement steps taken.
        """
        if not 0 <= frac <= 1:
            msg = f"search: `frac` ({frac}) must be in [0, 1]."
            raise ValueError(msg)
        max_value = float(self.int_type.max_value)
        low = Rational(0, 1)
        high = Rational(1, 1)
        fallback = self._closest_fitting(low, high, frac, int_part)
        iteration = 0

        while True:
            test_low = low.denominator * frac - low.numerator
            test_high = high.numerator - high.denominator * frac
            if self.trace is not None:
                self.trace(SearchStep(iteration, low, high, test_low, test_high))
            assert to_float(low) <= frac + BOUNDS_TOLERANCE, f"search: low bound {low} above {frac}"
            assert to_float(high) >= frac - BOUNDS_TOLERANCE, f"search: high bound {high} below {frac}"

            # on a tie the high bound wins
            if test_high < precision:
                fraction, reason = high, StopReason.PRECISION_HIGH
                break
            if test_low < precision:
                fraction, reason = low, StopReason.PRECISION_LOW
                break
            if iteration >= self.max_iters:
                fraction, reason = high, StopReason.MAX_ITERS
                break

            x1 = test_high / test_low
            x2 = test_low / test_high

            # take the largest step available, then put the other bound one
            # step further along
            new_low = new_high = None
            if x1 > x2:
                if (x1 + 1) * low.denominator + high.denominator <= max_value:
                    new_high = _mediant(self.int_type, high, low, int(x1))
                    new_low = None if new_high is None else _mediant(self.int_type, new_high, low)
            else:
                if low.denominator + (x2 + 1) * high.denominator <= max_value:
                    new_low = _mediant(self.int_type, low, high, int(x2))
                    new_high = None if new_low is None else _mediant(self.int_type, new_low, high)
            if new_low is None or new_high is None:
                fraction, reason = high, StopReason.OVERFLOW
                break
            low, high = new_low, new_high
            closest = self._closest_fitting(low, high, frac, int_part)
            if closest is not None:
                fallback = closest
            iteration += 1

        if self._fold(int_part, fraction) is None:
            fraction, reason = fallback, StopReason.OVERFLOW
        return Approximation(fraction, reason, iteration)

    def _fold(self, int_part: int, fraction: Rational) -> int | None:
        """Return int_part * denominator + numerator, or None if it does not fit."""
        numerator = self.int_type.checked_mul(int_part, fraction.denominator)
        if numerator is not None:
            numerator = self.int_type.checked_add(numerator, fraction.numerator)
        return numerator

    def _closest_fitting(self, low: Rational, high: Rational, frac: float, int_part: int) -> Rational | None:
        """Return whichever bound is closer to `frac` and still fits once
        `int_part` is folded back, high on a tie."""
        best = None
        for bound in (low, high):
            if self._fold(int_part, bound) is None:
                continue
            if best is None or abs(to_float(bound) - frac) <= abs(to_float(best) - frac):
                best = bound
        return best


def approximate(
    value,
    precision: float | None = None,
    int_type=np.int64,
    max_iters: int = 100,
    trace: Callable[[SearchStep], None] | None = None,
) -> Rational:
    """Return a fraction that approximates `value`.

    Shorthand for `RationalApproximator(int_type, max_iters, trace)
    .approximate(value, precision)`.
    """
    return RationalApproximator(int_type, max_iters, trace).approximate(value, precision)
