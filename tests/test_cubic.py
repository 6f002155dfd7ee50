import math

import pytest

from cppexperiments.cubic import (
    cubic_for_roots,
    error_grid,
    main,
    prognosed_worst_relative_error,
    real_worst_relative_error,
    round_trip,
    solve_cubic,
)
from cppexperiments.interval import DoubleInterval


def _evaluate(coefficients, x):
    a, b, c, d = coefficients
    return ((a * x + b) * x + c) * x + d


def test_cubic_for_roots_vanishes_at_roots():
    coefficients = cubic_for_roots([1, 2, 3])
    assert coefficients[0] == 1.0
    for root in (1, 2, 3):
        assert _evaluate(coefficients, root) == 0


def test_three_real_roots_recovered():
    back = sorted(solve_cubic(cubic_for_roots([1.0, 2.0, 3.0])))
    assert back == pytest.approx([1.0, 2.0, 3.0])


def test_one_real_positive_root():
    roots = solve_cubic([1.0, 0.0, 0.0, -1.0])
    assert roots[0] == pytest.approx(1.0)
    assert math.isnan(roots[1]) and math.isnan(roots[2])


def test_one_real_negative_root():
    roots = solve_cubic([1.0, 0.0, 0.0, 1.0])
    assert roots[0] == pytest.approx(-1.0)
    assert math.isnan(roots[1])


def test_wrong_number_of_coefficients():
    with pytest.raises(ValueError):
        solve_cubic([1.0, 2.0, 3.0])


def test_zero_leading_coefficient():
    with pytest.raises(ValueError):
        solve_cubic([0.0, 1.0, 2.0, 3.0])


def test_interval_round_trip():
    before, after = round_trip([3.0, 1.0, 2.0])
    assert [v.original for v in before] == [1.0, 2.0, 3.0]
    assert [v.original for v in after] == pytest.approx([1.0, 2.0, 3.0])
    assert all(isinstance(v, DoubleInterval) for v in after)
    assert all(v.width() >= 0 for v in after)


def test_real_error_small_for_easy_roots():
    error = real_worst_relative_error([1.0, 2.0, 3.0])
    assert 0.0 <= error < 1e-9


def test_prognosed_error_non_negative():
    error = prognosed_worst_relative_error([1.0, 2.0, 3.0])
    assert error >= 0.0
    assert not math.isnan(error)


def test_zero_root_rejected():
    with pytest.raises(ValueError):
        real_worst_relative_error([0.0, 1.0, 2.0])


def test_error_grid_shape_and_roots():
    grid = error_grid(lambda roots: roots[0])
    assert len(grid) == 11
    assert all(len(plane) == 11 and all(len(row) == 11 for row in plane) for plane in grid)
    assert grid[5][0][10] == 1.0


def test_main_prints_round_trip(capsys):
    assert main(["roots"]) == 0
    out = capsys.readouterr().out
    assert "roots before: 1 2 3" in out
    assert out.count("prognosed error:") == 10