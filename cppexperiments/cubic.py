"""Solve cubic equations and measure how much precision the round trip loses."""

from __future__ import annotations

import argparse
import math
from collections.abc import Callable, Sequence
from typing import NamedTuple

from cppexperiments import interval
from cppexperiments.interval import DoubleInterval

GRID_STEPS = 11

EXAMPLE_ROOTS = (
    (1., 2., 3.),
    (0.1, 2., 30.),
    (0.01, 2., 300.),
    (0.001, 2., 3000.),
    (0.0001, 2., 30000.),
    (0.00001, 2., 300000.),
    (0.000001, 2., 3000000.),
    (0.0000001, 2., 30000000.),
    (0.00000001, 2., 300000000.),
    (0.000000001, 2., 3000000000.),
)


def _safe(fun: Callable[[float], float]) -> Callable[[float], float]:
    def call(v: float) -> float:
        try:
            return fun(v)
        except (ValueError, OverflowError):
            return math.nan

    return call


def _cbrt(v: float) -> float:
    if math.isnan(v) or v < 0:
        return math.nan
    return v ** (1.0 / 3.0)


class _Ops(NamedTuple):
    lift: Callable
    sqrt: Callable
    acos: Callable
    cos: Callable
    fabs: Callable
    cbrt: Callable
    nan: Callable


_FLOAT_OPS = _Ops(
    lift=float,
    sqrt=_safe(math.sqrt),
    acos=_safe(math.acos),
    cos=_safe(math.cos),
    fabs=math.fabs,
    cbrt=_cbrt,
    nan=lambda: math.nan,
)

_INTERVAL_OPS = _Ops(
    lift=lambda v: v if isinstance(v, DoubleInterval) else DoubleInterval.exact(v),
    sqrt=interval.sqrt,
    acos=interval.acos,
    cos=interval.cos,
    fabs=interval.fabs,
    cbrt=lambda v: interval.sampled(v, _cbrt),
    nan=interval.quiet_nan,
)


def _ops_for(values: Sequence) -> _Ops:
    if any(isinstance(v, DoubleInterval) for v in values):
        return _INTERVAL_OPS
    return _FLOAT_OPS


def solve_cubic(coefficients: Sequence) -> list:
    """Roots of a·x³ + b·x² + c·x + d = 0 for ``(a, b, c, d)``.

    With one real root the other two are NaN. Works on floats and on
    :class:`DoubleInterval` values alike.
    """
    if len(coefficients) != 4:
        raise ValueError("a cubic needs four coefficients")
    ops = _ops_for(coefficients)
    a, b, c, d = (ops.lift(v) for v in coefficients)
    if float(a) == 0:
        raise ValueError("the leading coefficient must not be zero")
    pi = ops.lift(math.atan(1.0) * 4.0)

    a1 = b / a
    a2 = c / a
    a3 = d / a
    q = (a1 * a1 - 3.0 * a2) / 9.0
    sq = -2.0 * ops.sqrt(q)
    r = (2.0 * a1 * a1 * a1 - 9.0 * a1 * a2 + 27.0 * a3) / 54.0
    z = r * r - q * q * q

    if z <= 0.0:
        t = ops.acos(r / ops.sqrt(q * q * q))
        return [
            sq * ops.cos(t / 3.0) - a1 / 3.0,
            sq * ops.cos((t + 2.0 * pi) / 3.0) - a1 / 3.0,
            sq * ops.cos((t + 4.0 * pi) / 3.0) - a1 / 3.0,
        ]

    root = ops.cbrt(ops.sqrt(z) + ops.fabs(r))
    root = root + q / root
    if not r < 0.0:
        root = -root
    root = root - a1 / 3.0
    return [root, ops.nan(), ops.nan()]


def cubic_for_roots(roots: Sequence) -> list:
    """Coefficients ``(1, b, c, d)`` of the monic cubic with the given three roots."""
    if len(roots) != 3:
        raise ValueError("a cubic has three roots")
    ops = _ops_for(roots)
    x0, x1, x2 = (ops.lift(v) for v in roots)
    return [
        ops.lift(1.0),
        -(x0 + x1 + x2),
        x0 * x1 + x1 * x2 + x2 * x0,
        -(x0 * x1 * x2),
    ]


def _lift_all(roots: Sequence) -> list[DoubleInterval]:
    return [_INTERVAL_OPS.lift(v) for v in roots]


def round_trip(roots: Sequence) -> tuple[list[DoubleInterval], list[DoubleInterval]]:
    """Sort the roots, build their cubic, solve it; return both sorted lists."""
    ordered = sorted(_lift_all(roots))
    back = sorted(solve_cubic(cubic_for_roots(ordered)))
    return ordered, back


def _solve_back(roots: Sequence) -> tuple[list[DoubleInterval], list[DoubleInterval]] | None:
    lifted = _lift_all(roots)
    if any(v.original == 0 for v in lifted):
        raise ValueError("relative errors need non-zero roots")
    back = solve_cubic(cubic_for_roots(lifted))
    if any(interval.isnan(v) for v in back):
        return None
    return sorted(lifted), sorted(back)


def real_worst_relative_error(roots: Sequence) -> float:
    """Largest relative difference between the roots and the solved ones; -1 if a root is lost."""
    solved = _solve_back(roots)
    if solved is None:
        return -1.0
    worst = 0.0
    for root, found in zip(*solved):
        worst = max(worst, abs(root.original - found.original) / root.original)
    return worst


def prognosed_worst_relative_error(roots: Sequence) -> float:
    """Largest interval width of a solved root relative to the root; -1 if a root is lost."""
    solved = _solve_back(roots)
    if solved is None:
        return -1.0
    worst = 0.0
    for root, found in zip(*solved):
        worst = max(worst, abs(found.high - found.low) / root.original)
    return worst


def error_grid(measure: Callable[[list[float]], float]) -> list[list[list[float]]]:
    """Apply ``measure`` to roots 1·100^(i-5), 2·100^(j-5), 3·100^(k-5) for i, j, k in 0..10."""
    return [
        [
            [
                measure([1.0 * 100.0 ** (i1 - 5),
                         2.0 * 100.0 ** (i2 - 5),
                         3.0 * 100.0 ** (i3 - 5)])
                for i3 in range(GRID_STEPS)
            ]
            for i2 in range(GRID_STEPS)
        ]
        for i1 in range(GRID_STEPS)
    ]


def _format_grid(grid: list[list[list[float]]]) -> str:
    last = GRID_STEPS - 1
    parts: list[str] = []
    for i1, plane in enumerate(grid):
        parts.append("[\n")
        for i2, row in enumerate(plane):
            parts.append("[" + ",\t".join(f"{v:g}" for v in row) + "]")
            parts.append(", \n" if i2 < last else "\n")
        parts.append("]")
        parts.append(", \n" if i1 < last else "\n")
    return "".join(parts)


def _describe_round_trip(roots: Sequence[float]) -> str:
    before, after = round_trip(roots)

    def join(values: Sequence[float]) -> str:
        return " ".join(f"{v:g}" for v in values)

    return (
        f"roots before: {join([v.original for v in before])}\n"
        f"roots after: {join([v.original for v in after])}\n"
        f"factual error: {join([abs(a.original - b.original) for a, b in zip(after, before)])}\n"
        f"prognosed error: {join([v.high - v.low for v in after])}\n"
    )


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Measure precision loss of a cubic solver.")
    parser.add_argument("demo", nargs="?", default="roots",
                        choices=("roots", "real", "prognosed"))
    args = parser.parse_args(argv)

    if args.demo == "roots":
        for roots in EXAMPLE_ROOTS:
            print(_describe_round_trip(roots))
    elif args.demo == "real":
        print(_format_grid(error_grid(real_worst_relative_error)), end="")
    else:
        print(_format_grid(error_grid(prognosed_worst_relative_error)), end="")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())