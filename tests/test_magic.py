import itertools
import random

import pytest

from cppexperiments.magic import (
    ALL_MAGIC_SQUARES,
    MAGIC_NUMBERS,
    candidates,
    is_magic_64bits,
    is_magic_five_heuristic,
    is_magic_less_code,
    is_magic_naive,
    is_magic_numbers,
    is_magic_oddity,
    is_magic_permutation_shifts,
    is_magic_words,
    is_magic_words_oddity,
    magic_number,
)

CHECKERS = [
    is_magic_naive,
    is_magic_less_code,
    is_magic_numbers,
    is_magic_five_heuristic,
    is_magic_oddity,
    is_magic_permutation_shifts,
    is_magic_words,
    is_magic_words_oddity,
    is_magic_64bits,
]


@pytest.mark.parametrize("check", CHECKERS)
@pytest.mark.parametrize("square", ALL_MAGIC_SQUARES)
def test_accepts_every_magic_square(check, square):
    assert check(square) is True
    assert is_magic_naive(square) is True


@pytest.mark.parametrize("check", CHECKERS)
def test_rejects_ordered_digits(check):
    assert check("123456789") is False
    assert is_magic_naive("123456789") is False


@pytest.mark.parametrize("check", CHECKERS)
def test_rejects_repeated_fives(check):
    # every line sums to fifteen, but the digits are not distinct
    assert check("555555555") is False
    assert is_magic_naive("555555555") is False


@pytest.mark.parametrize("check", CHECKERS)
@pytest.mark.parametrize("square", ["12345678", "1234567890", "012345678", "12345678a"])
def test_rejects_malformed_input(check, square):
    with pytest.raises(ValueError):
        check(square)
    with pytest.raises(ValueError):
        is_magic_naive(square)


def test_naive_finds_exactly_the_known_squares_among_permutations():
    found = {
        "".join(p) for p in itertools.permutations("123456789") if is_magic_naive("".join(p))
    }
    assert found == set(ALL_MAGIC_SQUARES)


@pytest.mark.parametrize("check", CHECKERS[1:])
def test_checkers_agree_with_naive_on_random_squares(check):
    rng = random.Random(0)
    squares = ["".join(rng.choice("123456789") for _ in range(9)) for _ in range(3000)]
    squares += list(ALL_MAGIC_SQUARES)
    assert [check(s) for s in squares] == [is_magic_naive(s) for s in squares]


@pytest.mark.parametrize("check", CHECKERS[1:])
def test_checkers_agree_with_naive_on_permutations(check):
    perms = ["".join(p) for p in itertools.islice(itertools.permutations("123456789"), 0, None, 37)]
    perms += list(ALL_MAGIC_SQUARES)
    assert [check(s) for s in perms] == [is_magic_naive(s) for s in perms]


def test_magic_number_packs_little_endian_words():
    assert magic_number("816357492") == 0x3336313832393437


def test_magic_numbers_match_known_squares():
    assert {magic_number(s) for s in ALL_MAGIC_SQUARES} == MAGIC_NUMBERS


def test_magic_number_ignores_centre():
    assert magic_number("816357492") == magic_number("816307492")


def test_magic_number_needs_nine_characters():
    with pytest.raises(ValueError):
        magic_number("8163")


def test_candidates_change_first_character_fastest():
    first = list(itertools.islice(candidates(), 9))
    assert "".join(s[0] for s in first) == "123456789"
    assert len({s[1:] for s in first}) == 1


def test_candidates_carry_into_second_character():
    first = list(itertools.islice(candidates(), 18))
    assert first[9][0] == first[0][0]
    assert first[9][1] != first[0][1]
    assert first[9][2:] == first[0][2:]


def test_candidates_are_distinct_and_well_formed():
    sample = list(itertools.islice(candidates(), 5000))
    assert len(set(sample)) == len(sample)
    assert all(len(s) == 9 and set(s) <= set("123456789") for s in sample)
    assert {is_magic_naive(s) for s in sample} <= {False, True}