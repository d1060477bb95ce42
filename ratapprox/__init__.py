from .integers import IntType, OutOfRangeError, as_int_type, int_type_for_bits
from .rational import Rational, to_float, to_string
from .approximator import (
    Approximation,
    RationalApproximator,
    SearchStep,
    StopReason,
    approximate,
    log_trace,
    machine_epsilon,
)
from .check import CHECK_VALUES, run_checks
