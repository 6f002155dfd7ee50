"""Show the bit layout of small integers and single-precision floats."""

from __future__ import annotations

import argparse
import math
import struct
import sys
from collections.abc import Iterator, Sequence


def _float32_word(x: float) -> int:
    try:
        packed = struct.pack(">f", x)
    except OverflowError:
        packed = struct.pack(">f", math.copysign(math.inf, x))
    return int.from_bytes(packed, "big")


def _to_float32(x: float) -> float:
    return struct.unpack(">f", _float32_word(x).to_bytes(4, "big"))[0]


def _float32_from_word(word: int) -> float:
    return struct.unpack(">f", word.to_bytes(4, "big"))[0]


def float32_bits(x: float) -> str:
    """Return the 32 bits of ``x`` as a single-precision float."""
    return f"{_float32_word(x):032b}"


def float_to_bin(x: float) -> str:
    """Return sign, exponent and significand bits of ``x`` as a float, space separated."""
    bits = float32_bits(x)
    return f"{bits[0]} {bits[1:9]} {bits[9:]} "


def int8_bits(value: int) -> str:
    """Return the eight two's-complement bits of a signed byte."""
    if not -128 <= value <= 127:
        raise ValueError("value does not fit in a signed byte")
    return f"{value & 0xFF:08b}"


def all_int8_bits() -> Iterator[str]:
    """Yield the bits of every signed byte from -128 up to 127."""
    for value in range(-128, 128):
        yield int8_bits(value)


def rounds_to_float_one(x: float) -> bool:
    """Tell whether ``x`` becomes exactly 1 when stored as a single-precision float."""
    return _to_float32(x) == 1.0


def stepped_range(stop: float, step: float) -> Iterator[float]:
    """Yield 0, step, 2*step, ... while the running sum differs from ``stop``.

    Raises ValueError once the sum passes ``stop`` without landing on it.
    """
    if step <= 0:
        raise ValueError("step must be positive")
    i = 0.0
    while i != stop:
        if i > stop:
            raise ValueError(f"adding {step!r} never reaches {stop!r} exactly")
        yield i
        i += step


def _rounding_lines() -> list[str]:
    next_float_up = _float32_from_word(_float32_word(1.0) + 1)
    checks = [
        math.nextafter(1.0, 2.0),
        math.nextafter(1.0, 0.0),
        (next_float_up - 1.0) / 2.0 + 1.0,
        (next_float_up - 1.0) / 2.0 + sys.float_info.epsilon + 1.0,
    ]
    return ["one" if rounds_to_float_one(x) else "not one" for x in checks]


def _present(x: float) -> str:
    return f"{x:g}\t - {float_to_bin(x)}"


def _float_table() -> list[str]:
    groups = [
        [0.0, -0.0, 1.0, -1.0],
        [float(n) for n in range(1, 9)],
        [n + 0.5 for n in range(1, 9)],
        [n + 0.25 for n in range(1, 9)],
    ]
    lines: list[str] = []
    for group in groups:
        lines.extend(_present(x) for x in group)
        lines.append("")
    for x in (15.0, 255.0 / 16.0, 255.0 / 16.0 - 15.0,
              math.inf, -math.inf, math.inf * 0.0, math.nan, math.nan):
        lines.append(_present(x))
    return lines


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Show how numbers look in bits.")
    parser.add_argument("demo", nargs="?", default="floats",
                        choices=("floats", "int8", "rounding", "loop"))
    args = parser.parse_args(argv)

    if args.demo == "floats":
        print("\n".join(_float_table()))
    elif args.demo == "int8":
        print("\n".join(all_int8_bits()))
    elif args.demo == "rounding":
        print("\n".join(_rounding_lines()))
    else:
        print("".join(f"{i:g} " for i in stepped_range(4, 0.25)), end="")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())