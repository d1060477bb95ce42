from __future__ import annotations

import math

from ratapprox.approximator import approximate
from ratapprox.rational import to_float

# (value, precision); precision None means the machine epsilon of the value.
CHECK_VALUES = [
    (0.1, None),
    (0.99999997, None),
    ((0x40000000 - 1.0) / (0x40000000 + 1.0), None),
    (1.0 / 3.0, None),
    (1.0 / (0x40000000 - 1.0), None),
    (320.0 / 240.0, None),
    (6.0 / 7.0, None),
    (320.0 / 241.0, None),
    (720.0 / 577.0, None),
    (2971.0 / 3511.0, None),
    (3041.0 / 7639.0, None),
    (1.0 / math.sqrt(2), 1e-9),
    (math.pi, 1e-9),
]


def run_checks(int_type, tolerance: float = 1e-9) -> list[str]:
    """Approximate every value in `CHECK_VALUES` with the given integer type.

    Args:
        int_type: The integer type to use. See `as_int_type`.
        tolerance: The largest accepted |value - result|.

    Returns:
        One message per value whose result is not within `tolerance`.
    """
    failures = list()
    for value, precision in CHECK_VALUES:
        fraction = approximate(value, precision, int_type=int_type)
        error = abs(value - to_float(fraction))
        if not error < tolerance:
            failures.append(f"{value!r}: got {fraction}, off by {error:.3g}")
    return failures
