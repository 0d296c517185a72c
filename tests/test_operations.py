"""Test the floating-point primitives and the catalogs built on them."""
import math

import pytest

from expression_engine.common import operations
from expression_engine.common.catalog import FUNCTIONS, OPERATORS, VARIADIC, Arity, Associativity, find_operator
from expression_engine.common.errors import ArityMismatch


@pytest.mark.parametrize("lhs,rhs,expected", [
    (1.0, 0.0, math.inf),
    (-1.0, 0.0, -math.inf),
    (1.0, -0.0, -math.inf),
    (6.0, 3.0, 2.0),
])
def test_divide(lhs, rhs, expected):
    assert operations.divide(lhs, rhs) == expected


@pytest.mark.parametrize("lhs", [0.0, math.nan])
def test_divide_zero_by_zero_is_nan(lhs):
    assert math.isnan(operations.divide(lhs, 0.0))


@pytest.mark.parametrize("lhs,rhs,expected", [
    (7.0, 3.0, 1.0),
    (-7.0, 3.0, -1.0),
    (7.0, -3.0, 1.0),
    (5.5, 2.0, 1.5),
])
def test_modulo(lhs, rhs, expected):
    assert operations.modulo(lhs, rhs) == expected


@pytest.mark.parametrize("lhs,rhs", [(1.0, 0.0), (math.inf, 2.0)])
def test_modulo_domain_error_is_nan(lhs, rhs):
    assert math.isnan(operations.modulo(lhs, rhs))


@pytest.mark.parametrize("base,exponent,expected", [
    (2.0, 10.0, 1024.0),
    (-2.0, 3.0, -8.0),
    (0.0, -1.0, math.inf),
    (-0.0, -1.0, -math.inf),
    (0.0, -2.0, math.inf),
    (10.0, 400.0, math.inf),
    (-10.0, 401.0, -math.inf),
    (-10.0, 400.0, math.inf),
])
def test_power(base, exponent, expected):
    assert operations.power(base, exponent) == expected


def test_power_of_negative_base_with_fraction_is_nan():
    assert math.isnan(operations.power(-8.0, 1.0 / 3.0))


def test_real_valued_maps_errors():
    assert math.isnan(operations.real_valued(math.sqrt)(-1.0))
    assert operations.real_valued(math.exp)(1000.0) == math.inf
    assert operations.real_valued(math.sqrt)(9.0) == 3.0


def test_logarithms():
    assert operations.natural_log(0.0) == -math.inf
    assert math.isnan(operations.natural_log(-1.0))
    assert operations.log10(1000.0) == pytest.approx(3.0)
    assert operations.log2(8.0) == 3.0


def test_sinh_overflow_keeps_sign():
    assert operations.sinh(-1000.0) == -math.inf
    assert operations.sinh(1000.0) == math.inf


@pytest.mark.parametrize("value,expected", [
    (2.5, 3.0),
    (-2.5, -3.0),
    (2.4, 2.0),
    (0.49999999999999994, 0.0),
    (math.inf, math.inf),
])
def test_round_half_away(value, expected):
    assert operations.round_half_away(value) == expected


def test_rounding_passes_non_finite_through():
    assert operations.floor(-math.inf) == -math.inf
    assert math.isnan(operations.ceil(math.nan))
    assert operations.trunc(-2.7) == -2.0


def test_sign():
    assert operations.sign(-3.0) == -1.0
    assert operations.sign(0.0) == 0.0
    assert operations.sign(2.0) == 1.0


def test_reductions():
    values = [2.0, 9.0, -1.0, 4.0]
    assert operations.maximum(values) == 9.0
    assert operations.minimum(values) == -1.0
    assert operations.total(values) == 14.0
    assert operations.average(values) == 3.5


def test_unary_operators_bind_tighter_than_binary():
    unary = [op for op in OPERATORS if op.unary]
    binary = [op for op in OPERATORS if not op.unary]
    assert {op.symbol for op in unary} == {"+", "-"}
    assert min(op.precedence for op in unary) > max(op.precedence for op in binary)


def test_operator_associativity():
    assert find_operator("^", Arity.BINARY).associativity is Associativity.RIGHT
    for symbol in "+-*/%":
        assert find_operator(symbol, Arity.BINARY).left_associative
    assert find_operator("*", Arity.UNARY) is None


def test_function_catalog_is_read_only():
    with pytest.raises(TypeError):
        FUNCTIONS["foo"] = FUNCTIONS["max"]


def test_check_arity():
    FUNCTIONS["sqrt"].check_arity(1)
    FUNCTIONS["max"].check_arity(5)
    assert FUNCTIONS["max"].arity == VARIADIC
    with pytest.raises(ArityMismatch):
        FUNCTIONS["sqrt"].check_arity(0)
    with pytest.raises(ArityMismatch):
        FUNCTIONS["min"].check_arity(0)
