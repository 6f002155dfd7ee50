"""Count runs of a repeated value in a sequence, with several equivalent predicates."""

from __future__ import annotations

import argparse
import math
import random
import time
from collections.abc import Iterable, Iterator, Sequence

DEFAULT_SIZE = 16 * 10_000_000
DEFAULT_WIDTH = 4


def random_digits(size: int, seed: int = 0) -> list[int]:
    """Return ``size`` pseudo-random zeros and ones drawn from a seeded generator."""
    if size < 0:
        raise ValueError("size must not be negative")
    rng = random.Random(seed)
    return [rng.randint(0, 1) for _ in range(size)]


def _windows(xs: Iterable[float], width: int) -> Iterator[tuple[float, ...]]:
    if width < 1:
        raise ValueError("width must be at least 1")
    seq = list(xs)
    return zip(*(seq[k:] for k in range(width)))


def count_runs(xs: Iterable[float], target: float = 1, width: int = DEFAULT_WIDTH) -> int:
    """Count windows of ``width`` consecutive items that all equal ``target``."""
    return sum(all(v == target for v in window) for window in _windows(xs, width))


def _count_runs_bitwise(xs: Iterable[float], target: float = 1, width: int = DEFAULT_WIDTH) -> int:
    """Same count, evaluating every comparison of a window without short-circuiting."""
    count = 0
    for window in _windows(xs, width):
        hit = True
        for v in window:
            hit &= v == target
        count += hit
    return count


def count_runs_product(xs: Iterable[float], target: float = 1, width: int = DEFAULT_WIDTH) -> int:
    """Same count, multiplying the comparison results of a window."""
    return sum(
        1 for window in _windows(xs, width) if math.prod(v == target for v in window)
    )


def count_runs_abs_sum(xs: Iterable[float], target: float = 1, width: int = DEFAULT_WIDTH) -> int:
    """Same count, testing that the absolute differences of a window sum to zero."""
    return sum(
        1 for window in _windows(xs, width) if sum(abs(v - target) for v in window) == 0
    )


def count_runs_square_sum(xs: Iterable[float], target: float = 1, width: int = DEFAULT_WIDTH) -> int:
    """Same count, testing that the squared differences of a window sum to zero."""
    return sum(
        1 for window in _windows(xs, width) if sum((v - target) ** 2 for v in window) == 0
    )


_METHODS = {
    "andand": count_runs,
    "and": _count_runs_bitwise,
    "mul": count_runs_product,
    "abs": count_runs_abs_sum,
    "square": count_runs_square_sum,
}


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Time counting runs of equal digits.")
    parser.add_argument("--size", type=int, default=DEFAULT_SIZE)
    parser.add_argument("--seed", type=int, default=0)
    parser.add_argument("--target", type=int, choices=(0, 1), default=1)
    parser.add_argument("--width", type=int, default=DEFAULT_WIDTH)
    parser.add_argument("--method", choices=sorted(_METHODS), default="andand")
    parser.add_argument("--float", dest="as_float", action="store_true",
                        help="store the digits as floating-point numbers")
    args = parser.parse_args(argv)

    xs: list[float] = list(random_digits(args.size, args.seed))
    if args.as_float:
        xs = [float(x) for x in xs]

    counter = _METHODS[args.method]
    start = time.perf_counter()
    found = counter(xs, args.target, args.width)
    elapsed = time.perf_counter() - start

    label = str(args.target) * args.width + "s"
    print(f"time: {elapsed:g}  {label}: {found}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())