"""Test PostfixEvaluator on hand-built postfix programs."""
import math

import pytest

from expression_engine.common.catalog import FUNCTIONS, Arity, find_operator
from expression_engine.common.config import EngineConfig
from expression_engine.common.errors import (
    ArityMismatch,
    EngineCapacityExceeded,
    InternalStackUnderflow,
    MalformedExpression,
)
from expression_engine.common.tokens import CommaToken, FunctionToken, NumberToken, OperatorToken
from expression_engine.engine.evaluator import PostfixEvaluator, evaluate_postfix


def num(value: float) -> NumberToken:
    return NumberToken(value=value)


def binary(symbol: str) -> OperatorToken:
    return OperatorToken(operator=find_operator(symbol, Arity.BINARY))


def unary(symbol: str) -> OperatorToken:
    return OperatorToken(operator=find_operator(symbol, Arity.UNARY))


def call(name: str, call_arity: int) -> FunctionToken:
    return FunctionToken(function=FUNCTIONS[name], call_arity=call_arity)


def test_single_number():
    assert evaluate_postfix([num(4.5)]) == 4.5


@pytest.mark.parametrize("lhs,symbol,rhs,expected", [
    (10, "-", 3, 7.0),
    (10, "/", 4, 2.5),
    (10, "^", 2, 100.0),
    (10, "%", 4, 2.0),
])
def test_binary_operator_operand_order(lhs, symbol, rhs, expected):
    """lhs is the value pushed first, rhs the one pushed last."""
    assert evaluate_postfix([num(lhs), num(rhs), binary(symbol)]) == expected


def test_unary_operators():
    assert evaluate_postfix([num(3), unary("-")]) == -3.0
    assert evaluate_postfix([num(3), unary("+")]) == 3.0


def test_function_arguments_keep_supplied_order():
    assert evaluate_postfix([num(2), num(10), call("pow", 2)]) == 1024.0
    assert evaluate_postfix([num(1), num(0), call("atan2", 2)]) == pytest.approx(math.pi / 2)


def test_variadic_function():
    program = [num(1), num(5), num(3), call("max", 3)]
    assert evaluate_postfix(program) == 5.0


def test_zero_arity_function():
    assert evaluate_postfix([call("e", 0)]) == math.e


def test_function_only_pops_its_arguments():
    program = [num(100), num(4), call("sqrt", 1), binary("+")]
    assert evaluate_postfix(program) == 102.0


@pytest.mark.parametrize("name,given,expected", [
    ("sqrt", 2, 1),
    ("pow", 1, 2),
    ("max", 0, "1+"),
])
def test_arity_mismatch(name, given, expected):
    program = [num(1)] * given + [call(name, given)]
    with pytest.raises(ArityMismatch) as excinfo:
        evaluate_postfix(program)
    assert excinfo.value.function_name == name
    assert excinfo.value.expected == expected
    assert excinfo.value.given == given


@pytest.mark.parametrize("program", [
    [binary("+")],
    [num(1), binary("*")],
    [unary("-")],
    [num(1), call("max", 2)],
])
def test_stack_underflow(program):
    with pytest.raises(InternalStackUnderflow):
        evaluate_postfix(program)


@pytest.mark.parametrize("program,size", [
    ([], 0),
    ([num(1), num(2)], 2),
    ([num(1), num(2), num(3), binary("+")], 2),
])
def test_malformed_expression(program, size):
    with pytest.raises(MalformedExpression) as excinfo:
        evaluate_postfix(program)
    assert excinfo.value.stack_size == size


def test_punctuation_in_postfix_is_malformed():
    with pytest.raises(MalformedExpression):
        evaluate_postfix([num(1), CommaToken()])


def test_value_stack_capacity():
    evaluator = PostfixEvaluator(EngineConfig(stack_capacity=2))
    with pytest.raises(EngineCapacityExceeded) as excinfo:
        evaluator.evaluate([num(1), num(2), num(3)])
    assert excinfo.value.stack == "value"
