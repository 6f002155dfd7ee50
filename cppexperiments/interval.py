"""A floating-point value carried together with bounds on its rounding error."""

from __future__ import annotations

import math
from collections.abc import Callable
from dataclasses import dataclass
from numbers import Real

SEGMENTS = 10


def _divide(a: float, b: float) -> float:
    try:
        return a / b
    except ZeroDivisionError:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)


def _guarded(fun: Callable[[float], float]) -> Callable[[float], float]:
    def call(v: float) -> float:
        try:
            return float(fun(v))
        except (ValueError, OverflowError, ZeroDivisionError):
            return math.nan

    return call


@dataclass(frozen=True)
class DoubleInterval:
    """A computed value ``original`` and the interval [low, high] that should hold it."""

    low: float = 0.0
    high: float = 0.0
    original: float = 0.0

    @classmethod
    def exact(cls, x: float) -> DoubleInterval:
        """An interval one unit in the last place wide, starting at ``x``."""
        x = float(x)
        return cls(x, math.nextafter(x, 1.7976931348623157e308), x)

    def width(self) -> float:
        """Distance between the bounds."""
        return self.high - self.low

    def __add__(self, other: object) -> DoubleInterval:
        rhs = _coerce(other)
        if rhs is NotImplemented:
            return NotImplemented
        return DoubleInterval(self.low + rhs.low, self.high + rhs.high,
                              self.original + rhs.original)

    def __radd__(self, other: object) -> DoubleInterval:
        lhs = _coerce(other)
        if lhs is NotImplemented:
            return NotImplemented
        return lhs + self

    def __sub__(self, other: object) -> DoubleInterval:
        rhs = _coerce(other)
        if rhs is NotImplemented:
            return NotImplemented
        return DoubleInterval(self.low - rhs.high, self.high - rhs.low,
                              self.original - rhs.original)

    def __rsub__(self, other: object) -> DoubleInterval:
        lhs = _coerce(other)
        if lhs is NotImplemented:
            return NotImplemented
        return lhs - self

    def __mul__(self, other: object) -> DoubleInterval:
        rhs = _coerce(other)
        if rhs is NotImplemented:
            return NotImplemented
        products = (self.low * rhs.low, self.low * rhs.high,
                    self.high * rhs.low, self.high * rhs.high)
        return DoubleInterval(min(products), max(products),
                              self.original * rhs.original)

    def __rmul__(self, other: object) -> DoubleInterval:
        lhs = _coerce(other)
        if lhs is NotImplemented:
            return NotImplemented
        return lhs * self

    def __truediv__(self, other: object) -> DoubleInterval:
        rhs = _coerce(other)
        if rhs is NotImplemented:
            return NotImplemented
        quotients = (_divide(self.low, rhs.low), _divide(self.low, rhs.high),
                     _divide(self.high, rhs.low), _divide(self.high, rhs.high))
        return DoubleInterval(min(quotients), max(quotients),
                              _divide(self.original, rhs.original))

    def __rtruediv__(self, other: object) -> DoubleInterval:
        lhs = _coerce(other)
        if lhs is NotImplemented:
            return NotImplemented
        return lhs / self

    def __neg__(self) -> DoubleInterval:
        return DoubleInterval(-self.high, -self.low, -self.original)

    def __lt__(self, other: object) -> bool:
        return self.original < _value(other)

    def __le__(self, other: object) -> bool:
        return self.original <= _value(other)

    def __gt__(self, other: object) -> bool:
        return self.original > _value(other)

    def __ge__(self, other: object) -> bool:
        return self.original >= _value(other)

    def __float__(self) -> float:
        return self.original


def _coerce(value: object) -> DoubleInterval:
    if isinstance(value, DoubleInterval):
        return value
    if isinstance(value, Real):
        return DoubleInterval.exact(float(value))
    return NotImplemented


def _value(value: object) -> float:
    if isinstance(value, DoubleInterval):
        return value.original
    if isinstance(value, Real):
        return float(value)
    raise TypeError(f"cannot compare an interval with {type(value).__name__}")


def _as_interval(x: DoubleInterval | float) -> DoubleInterval:
    result = _coerce(x)
    if result is NotImplemented:
        raise TypeError(f"not a number: {x!r}")
    return result


def sampled(x: DoubleInterval | float, fun: Callable[[float], float]) -> DoubleInterval:
    """Apply ``fun`` to ``x``, bounding it by the extremes at evenly spaced points."""
    x = _as_interval(x)
    call = _guarded(fun)
    lo = hi = call(x.low)
    span = x.high - x.low
    for i in range(1, SEGMENTS + 1):
        ai = call(x.low + i * span / SEGMENTS)
        if math.isnan(lo):
            lo = ai
        elif not math.isnan(ai):
            lo = min(lo, ai)
        if math.isnan(hi):
            hi = ai
        elif not math.isnan(ai):
            hi = max(hi, ai)
    return DoubleInterval(lo, hi, call(x.original))


def sqrt(x: DoubleInterval | float) -> DoubleInterval:
    """Square root; NaN where undefined."""
    return sampled(x, math.sqrt)


def sin(x: DoubleInterval | float) -> DoubleInterval:
    """Sine."""
    return sampled(x, math.sin)


def cos(x: DoubleInterval | float) -> DoubleInterval:
    """Cosine."""
    return sampled(x, math.cos)


def tan(x: DoubleInterval | float) -> DoubleInterval:
    """Tangent."""
    return sampled(x, math.tan)


def asin(x: DoubleInterval | float) -> DoubleInterval:
    """Arc sine; NaN outside [-1, 1]."""
    return sampled(x, math.asin)


def acos(x: DoubleInterval | float) -> DoubleInterval:
    """Arc cosine; NaN outside [-1, 1]."""
    return sampled(x, math.acos)


def atan(x: DoubleInterval | float) -> DoubleInterval:
    """Arc tangent."""
    return sampled(x, math.atan)


def fabs(x: DoubleInterval | float) -> DoubleInterval:
    """Absolute value."""
    return sampled(x, math.fabs)


def isnan(x: DoubleInterval | float) -> bool:
    """Tell whether the computed value is NaN."""
    return math.isnan(float(x))


def quiet_nan() -> DoubleInterval:
    """An interval whose bounds and value are all NaN."""
    return DoubleInterval(math.nan, math.nan, math.nan)