from __future__ import annotations

import argparse
import logging
import sys

from ratapprox.approximator import approximate, log_trace
from ratapprox.check import run_checks
from ratapprox.integers import int_type_for_bits


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="ratapprox", description="Convert a decimal number to a fraction.")
    parser.add_argument("value", nargs="?", type=float, help="the number to convert")
    parser.add_argument("--precision", type=float, default=None, help="tolerance (default: machine epsilon)")
    parser.add_argument("--bits", type=int, action="append", help="integer width, 8/16/32/64 (default: 64)")
    parser.add_argument("--max-iters", type=int, default=100)
    parser.add_argument("--trace", action="store_true", help="log every search step to stderr")
    parser.add_argument("--self-test", action="store_true", help="run the built-in checks")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.trace else logging.WARNING, stream=sys.stderr)

    if args.self_test:
        ok = True
        for bits in args.bits or [32, 64]:
            for failure in run_checks(int_type_for_bits(bits)):
                print(f"int{bits}: {failure}")
                ok = False
        print("All tests passed!" if ok else "Some tests failed.")
        return 0 if ok else 1

    if args.value is None:
        parser.error("a value is required unless --self-test is given")
    bits = args.bits[-1] if args.bits else 64
    try:
        fraction = approximate(
            args.value,
            args.precision,
            int_type=int_type_for_bits(bits),
            max_iters=args.max_iters,
            trace=log_trace if args.trace else None,
        )
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2
    print(fraction)
    return 0


if __name__ == "__main__":
    sys.exit(main())
