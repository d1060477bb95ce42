from __future__ import annotations

import numpy as np

# Note: the approximator works in signed magnitude, so the usable range of
# an integer type is the symmetric interval [-max_value, max_value].


class OutOfRangeError(ValueError):
    """A magnitude cannot be represented by the chosen integer type."""


class IntType(object):
    def __init__(self, dtype=np.int64):
        """Fixed-width signed integer used for numerators and denominators.

        Python integers never overflow, so the width is only a range: every
        operation that builds a new numerator or denominator goes through
        `checked_add` or `checked_mul`, which report overflow instead of
        wrapping around.

        Args:
            dtype: A signed numpy integer type, e.g. `np.int32`.

        Raises:
            ValueError: if `dtype` is not a signed integer type.
        """
        try:
            info = np.iinfo(dtype)
        except ValueError:
            msg = f"IntType: `dtype` ({dtype}) is not an integer type."
            raise ValueError(msg)
        if info.min >= 0:
            msg = f"IntType: `dtype` ({info.dtype}) must be signed."
            raise ValueError(msg)
        self.dtype = info.dtype
        self.bits = info.bits
        self.max_value = int(info.max)
        self.min_value = int(info.min)

    def __repr__(self):
        return f"IntType({self.dtype.name})"

    def __eq__(self, other):
        return isinstance(other, IntType) and self.dtype == other.dtype

    def __hash__(self):
        return hash(self.dtype)

    def contains(self, x: int) -> bool:
        return self.min_value <= x <= self.max_value

    def checked_add(self, a: int, b: int) -> int | None:
        """Return a + b, or None if the sum does not fit."""
        c = a + b
        return c if self.contains(c) else None

    def checked_mul(self, a: int, b: int) -> int | None:
        """Return a * b, or None if the product does not fit."""
        c = a * b
        return c if self.contains(c) else None

    def require(self, x: int, what: str = "value") -> int:
        """Return `x` if its magnitude fits.

        Raises:
            OutOfRangeError: if |x| > max_value.
        """
        if abs(x) > self.max_value:
            msg = f"{what} ({x}) cannot be larger than +/-{self.max_value} for {self.dtype.name}."
            raise OutOfRangeError(msg)
        return x


def as_int_type(x) -> IntType:
    """Return `x` as an `IntType`.

    Args:
        x: An `IntType`, a numpy integer type or dtype, or a dtype name such
            as "int32".
    """
    if isinstance(x, IntType):
        return x
    try:
        dtype = np.dtype(x)
    except TypeError:
        msg = f"as_int_type: cannot interpret {x!r} as an integer type."
        raise ValueError(msg)
    return IntType(dtype)


def int_type_for_bits(bits: int) -> IntType:
    """Return the signed integer type with the given width (8, 16, 32 or 64)."""
    if bits not in (8, 16, 32, 64):
        msg = f"int_type_for_bits: `bits` ({bits}) must be one of 8, 16, 32, 64."
        raise ValueError(msg)
    return IntType(np.dtype(f"int{bits}"))
