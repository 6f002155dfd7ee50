import math

import pytest

from cppexperiments.interval import (
    DoubleInterval,
    acos,
    cos,
    fabs,
    isnan,
    quiet_nan,
    sampled,
    sqrt,
)


def test_exact_is_one_ulp_wide():
    x = DoubleInterval.exact(1.0)
    assert x.low == 1.0
    assert x.original == 1.0
    assert x.high == math.nextafter(1.0, math.inf)
    assert x.width() > 0


def test_addition_adds_bounds_and_values():
    a = DoubleInterval.exact(2.0)
    b = DoubleInterval.exact(3.0)
    s = a + b
    assert s.low == a.low + b.low
    assert s.high == a.high + b.high
    assert s.original == a.original + b.original


def test_subtraction_crosses_bounds():
    a = DoubleInterval.exact(3.0)
    b = DoubleInterval.exact(1.0)
    d = a - b
    assert d.low == a.low - b.high
    assert d.high == a.high - b.low
    assert d.original == a.original - b.original


def test_product_holds_value():
    a = DoubleInterval.exact(0.1)
    b = DoubleInterval.exact(-7.0)
    p = a * b
    assert p.low <= p.original <= p.high
    assert p.original == 0.1 * -7.0


def test_mixed_float_arithmetic():
    a = DoubleInterval.exact(6.0)
    assert (a + 2.0).original == 6.0 + 2.0
    assert (2.0 - a).original == 2.0 - 6.0
    assert (3.0 * a).original == 3.0 * 6.0
    assert (12.0 / a).original == 12.0 / 6.0
    assert (a / 4.0).original == 6.0 / 4.0


def test_division_by_zero_interval_gives_infinity():
    q = DoubleInterval.exact(1.0) / DoubleInterval.exact(0.0)
    assert math.isinf(q.original)
    assert q.high == math.inf


def test_negation_swaps_bounds():
    x = DoubleInterval.exact(5.0)
    n = -x
    assert n.low == -x.high
    assert n.high == -x.low
    assert n.original == -5.0


def test_ordering_uses_value():
    a = DoubleInterval.exact(1.0)
    b = DoubleInterval.exact(2.0)
    assert a < b
    assert a < 1.5
    assert 0.5 < a
    assert sorted([b, a]) == [a, b]


def test_float_conversion():
    assert float(DoubleInterval(0.0, 9.0, 4.5)) == 4.5


def test_sampled_takes_extremes():
    r = sampled(DoubleInterval(0.0, 10.0, 5.0), lambda v: v)
    assert r.low == 0.0
    assert r.high == 10.0
    assert r.original == 5.0


def test_sqrt_of_square():
    r = sqrt(DoubleInterval.exact(4.0))
    assert r.original == 2.0
    assert r.low == 2.0
    assert r.high >= r.low


def test_sqrt_of_negative_is_nan():
    r = sqrt(DoubleInterval.exact(-1.0))
    assert isnan(r)
    assert math.isnan(r.low)


def test_functions_match_math():
    assert cos(DoubleInterval.exact(0.0)).original == math.cos(0.0)
    assert fabs(DoubleInterval.exact(-3.0)).original == 3.0
    assert isnan(acos(DoubleInterval.exact(2.0)))


def test_quiet_nan():
    n = quiet_nan()
    assert isnan(n)
    assert math.isnan(n.low) and math.isnan(n.high)


def test_comparison_with_text_fails():
    with pytest.raises(TypeError):
        DoubleInterval.exact(1.0) < "one"