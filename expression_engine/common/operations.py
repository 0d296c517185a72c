"""
Floating-point primitives behind the operator and function catalogs.

Python's ``math`` module raises on domain and range errors where IEEE-754
arithmetic (and the C library) quietly returns inf or NaN. Every primitive
here follows the IEEE behaviour so that evaluation never raises for a
numeric reason: ``5/0`` is inf, ``0/0`` is NaN, ``(-8)^0.5`` is NaN.
"""
from collections.abc import Callable as ABCCallable
import functools
import math
import operator
from typing import Callable, Sequence


# Type alias for primitives taking any number of floats and returning a float
NumericFn: ABCCallable[..., float] = Callable[..., float]


def _is_odd_integer(value: float) -> bool:
    return math.isfinite(value) and value == math.floor(value) and int(value) % 2 == 1


def real_valued(fn: NumericFn) -> NumericFn:
    """
    Wrap a ``math`` function so domain errors give NaN and overflows give inf.

    :param Callable fn: Function from the ``math`` module

    :return: Wrapped function always returning a float
    :rtype: Callable
    """

    @functools.wraps(fn)
    def wrapper(*args: float) -> float:
        try:
            return float(fn(*args))
        except ValueError:
            return math.nan
        except OverflowError:
            return math.inf

    return wrapper


def divide(lhs: float, rhs: float) -> float:
    """True division with IEEE semantics for a zero divisor."""
    if rhs == 0.0:
        if lhs == 0.0 or math.isnan(lhs):
            return math.nan
        return math.copysign(math.inf, lhs) * math.copysign(1.0, rhs)
    return lhs / rhs


def modulo(lhs: float, rhs: float) -> float:
    """Floating-point remainder, the sign follows the dividend (C ``fmod``)."""
    try:
        return math.fmod(lhs, rhs)
    except ValueError:
        # Infinite dividend or zero divisor
        return math.nan


def power(base: float, exponent: float) -> float:
    """
    Real-valued power (C ``pow``).

    :param float base: Base
    :param float exponent: Exponent

    :return: ``base ** exponent``, NaN when the result is not real
    :rtype: float
    """
    try:
        return math.pow(base, exponent)
    except OverflowError:
        if base < 0 and _is_odd_integer(exponent):
            return -math.inf
        return math.inf
    except ValueError:
        if base == 0.0:
            # Zero raised to a negative power is a pole
            if _is_odd_integer(exponent):
                return math.copysign(math.inf, base)
            return math.inf
        return math.nan


def _logarithm(fn: NumericFn) -> NumericFn:
    wrapped = real_valued(fn)

    @functools.wraps(fn)
    def wrapper(value: float) -> float:
        if value == 0.0:
            return -math.inf
        return wrapped(value)

    return wrapper


natural_log = _logarithm(math.log)
log2 = _logarithm(math.log2)
log10 = _logarithm(math.log10)


def sinh(value: float) -> float:
    try:
        return math.sinh(value)
    except OverflowError:
        return math.copysign(math.inf, value)


def _rounding(fn: NumericFn) -> NumericFn:
    # math.floor and friends return ints and reject inf/NaN
    @functools.wraps(fn)
    def wrapper(value: float) -> float:
        if not math.isfinite(value):
            return value
        return float(fn(value))

    return wrapper


floor = _rounding(math.floor)
ceil = _rounding(math.ceil)
trunc = _rounding(math.trunc)


def round_half_away(value: float) -> float:
    """Round to the nearest integer, halfway cases away from zero (C ``round``)."""
    if not math.isfinite(value):
        return value
    magnitude = abs(value)
    rounded = float(math.floor(magnitude))
    if magnitude - rounded >= 0.5:
        rounded += 1.0
    return math.copysign(rounded, value)


def sign(value: float) -> float:
    if math.isnan(value):
        return value
    return float((value > 0) - (value < 0))


def maximum(values: Sequence[float]) -> float:
    return functools.reduce(lambda a, b: a if a > b else b, values)


def minimum(values: Sequence[float]) -> float:
    return functools.reduce(lambda a, b: a if a < b else b, values)


def total(values: Sequence[float]) -> float:
    return functools.reduce(operator.add, values)


def average(values: Sequence[float]) -> float:
    return total(values) / len(values)
