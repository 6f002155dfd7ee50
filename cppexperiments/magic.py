"""Recognise 3x3 magic squares written as nine-digit strings, in several ways."""

from __future__ import annotations

import argparse
import itertools
import time
from collections.abc import Callable, Iterator, Sequence

DIGITS = "123456789"
MAGIC_SUM = 15
PAIR_SUM = 10

ALL_MAGIC_SQUARES = (
    "816357492", "492357816", "618753294", "294753618",
    "834159672", "672159834", "438951276", "276951438",
)
_MAGIC_SQUARE_SET = frozenset(ALL_MAGIC_SQUARES)

MAGIC_NUMBERS = frozenset({
    3545515123101087289, 3690191062107239479,
    3544956562637535289, 3978984379655991859,
    3689073941180135479, 4123101758198592049,
    3977867258728887859, 4122543197735040049,
})

_LINES = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),
    (0, 3, 6), (1, 4, 7), (2, 5, 8),
    (0, 4, 8), (2, 4, 6),
)
_LINES_WITHOUT_LAST_ROW_AND_COLUMN = tuple(
    line for line in _LINES if line not in ((6, 7, 8), (2, 5, 8))
)
_EVEN_CELLS = (0, 2, 6, 8)
_ODD_CELLS = (1, 3, 4, 5, 7)
_IDEAL_CHAR_MAP = 0x1FF << 49


def _digits(square: str) -> list[int]:
    if len(square) != 9 or any(c not in DIGITS for c in square):
        raise ValueError(f"not nine digits from 1 to 9: {square!r}")
    return [int(c) for c in square]


def _lines_sum(digits: Sequence[int], lines: Sequence[tuple[int, ...]]) -> bool:
    return all(sum(digits[k] for k in line) == MAGIC_SUM for line in lines)


def _each_digit_once(digits: Sequence[int]) -> bool:
    counts = [0] * 9
    for d in digits:
        counts[d - 1] += 1
    return all(c == 1 for c in counts)


def _char_map_clear(square: str) -> bool:
    char_map = _IDEAL_CHAR_MAP
    for c in square:
        char_map ^= 1 << ord(c)
    return char_map == 0


def _parity_fits(digits: Sequence[int]) -> bool:
    return (all(digits[k] % 2 == 0 for k in _EVEN_CELLS)
            and all(digits[k] % 2 == 1 for k in _ODD_CELLS))


def is_magic_naive(square: str) -> bool:
    """Check every row, column and diagonal, then that each digit appears once."""
    digits = _digits(square)
    return _lines_sum(digits, _LINES) and _each_digit_once(digits)


def _is_magic_reversed(square: str) -> bool:
    """Check that each digit appears once before checking the sums."""
    digits = _digits(square)
    return _each_digit_once(digits) and _lines_sum(digits, _LINES)


def is_magic_less_code(square: str) -> bool:
    """Skip the last row and column, which the other sums already imply."""
    digits = _digits(square)
    return (_lines_sum(digits, _LINES_WITHOUT_LAST_ROW_AND_COLUMN)
            and _each_digit_once(digits))


def is_magic_numbers(square: str) -> bool:
    """Check the sums, then clear one bit per character from a map of 1 to 9."""
    digits = _digits(square)
    return _lines_sum(digits, _LINES) and _char_map_clear(square)


def is_magic_five_heuristic(square: str) -> bool:
    """Require a 5 in the centre, then check the sums around it."""
    digits = _digits(square)
    if digits[4] != 5:
        return False
    if not _lines_sum(digits, ((0, 1, 2), (6, 7, 8), (0, 3, 6), (2, 5, 8))):
        return False
    pairs = ((3, 5), (1, 7), (0, 8), (2, 6))
    if any(digits[i] + digits[j] != PAIR_SUM for i, j in pairs):
        return False
    return _char_map_clear(square)


def is_magic_oddity(square: str) -> bool:
    """Require even corners and odd edges and centre before the full check."""
    digits = _digits(square)
    return (_parity_fits(digits) and _lines_sum(digits, _LINES)
            and _char_map_clear(square))


def is_magic_permutation_shifts(square: str) -> bool:
    """Check the sums, then that the digits' bit flags make up all nine."""
    digits = _digits(square)
    if not _lines_sum(digits, ((0, 1, 2), (6, 7, 8), (0, 3, 6), (2, 5, 8),
                               (0, 4, 8), (2, 4, 6))):
        return False
    if any(digits[i] + digits[j] != PAIR_SUM for i, j in ((3, 5), (1, 7))):
        return False
    char_map = 0
    for d in digits:
        char_map ^= 1 << (d - 1)
    return char_map == 0x1FF


def is_magic_words(square: str) -> bool:
    """Look the square up among the eight known magic squares."""
    _digits(square)
    return square in _MAGIC_SQUARE_SET


def is_magic_words_oddity(square: str) -> bool:
    """Check the parity pattern, then look the square up."""
    digits = _digits(square)
    return _parity_fits(digits) and square in _MAGIC_SQUARE_SET


def magic_number(square: str) -> int:
    """Pack characters 0-3 into the high and 5-8 into the low 32 bits, little-endian."""
    raw = square.encode("ascii")
    if len(raw) < 9:
        raise ValueError("a square needs nine characters")
    high = int.from_bytes(raw[0:4], "little")
    low = int.from_bytes(raw[5:9], "little")
    return (high << 32) + low


def is_magic_64bits(square: str) -> bool:
    """Require a 5 in the centre, then look up the packed number."""
    _digits(square)
    if square[4] != "5":
        return False
    return magic_number(square) in MAGIC_NUMBERS


def candidates() -> Iterator[str]:
    """Yield every nine-digit string of 1 to 9, the first character changing fastest."""
    for combo in itertools.product(DIGITS, repeat=9):
        yield "".join(reversed(combo))


def find_magic(check: Callable[[str], bool]) -> list[str]:
    """Return every candidate that ``check`` accepts, in generation order."""
    return [square for square in candidates() if check(square)]


_CHECKERS: dict[str, Callable[[str], bool]] = {
    "naive": is_magic_naive,
    "naive_less_code": is_magic_less_code,
    "naive_reversed": _is_magic_reversed,
    "numbers": is_magic_numbers,
    "numbers_5_heuristic": is_magic_five_heuristic,
    "numbers_oddity_heuristic": is_magic_oddity,
    "numbers_permutation_shifts": is_magic_permutation_shifts,
    "words": is_magic_words,
    "words_oddity_heuristic": is_magic_words_oddity,
    "64bits": is_magic_64bits,
}


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Search all nine-digit strings for magic squares and time it.")
    parser.add_argument("--method", choices=sorted(_CHECKERS), default="naive")
    args = parser.parse_args(argv)

    check = _CHECKERS[args.method]
    start = time.perf_counter()
    found = find_magic(check)
    elapsed = time.perf_counter() - start
    print("".join(f"{square} " for square in found), end="")
    print(f"{elapsed:g}\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())