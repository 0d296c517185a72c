"""Exceptions raised while evaluating an expression."""
from typing import Optional, Union


class EngineError(ValueError):
    """Base class of every error raised by the expression engine."""


class LexError(EngineError):
    """The input text could not be split into tokens."""


class InvalidCharacter(LexError):
    """Unrecognized symbol, or an operator symbol used in the wrong arity context."""

    def __init__(self, char: str, position: int):
        self.char = char
        self.position = position
        super().__init__(f"Invalid character {char!r} at position {position}")


class UndefinedFunction(LexError):
    """Identifier that does not name a known function."""

    def __init__(self, name: str, position: Optional[int] = None):
        self.name = name
        self.position = position
        super().__init__(f"Undefined function {name!r}")


class ExpressionSyntaxError(EngineError):
    """Tokens are valid but their arrangement is not."""


class MismatchedParens(ExpressionSyntaxError):
    """Unbalanced '(' or ')'."""

    def __init__(self, position: Optional[int] = None):
        self.position = position
        where = f" at position {position}" if position is not None else ""
        super().__init__(f"Mismatched parentheses{where}")


class UnexpectedComma(ExpressionSyntaxError):
    """Comma outside of any parenthesized argument list."""

    def __init__(self, position: Optional[int] = None):
        self.position = position
        where = f" at position {position}" if position is not None else ""
        super().__init__(f"Unexpected comma{where}")


class MissingCallParens(ExpressionSyntaxError):
    """Function name not directly followed by '('."""

    def __init__(self, function_name: str, position: Optional[int] = None):
        self.function_name = function_name
        self.position = position
        where = f" at position {position}" if position is not None else ""
        super().__init__(f"Function {function_name!r}{where} must be followed by '('")


class ArityMismatch(EngineError):
    """Function called with a number of arguments it does not accept."""

    def __init__(self, function_name: str, expected: Union[int, str], given: int):
        self.function_name = function_name
        self.expected = expected
        self.given = given
        super().__init__(
            f"Function {function_name!r} expects {expected} argument(s), {given} given"
        )


class EngineCapacityExceeded(EngineError):
    """A bounded stack grew past its configured capacity."""

    def __init__(self, stack: str, capacity: int):
        self.stack = stack
        self.capacity = capacity
        super().__init__(f"Too many tokens: {stack} stack exceeds capacity of {capacity}")


class InternalStackUnderflow(EngineError):
    """Pop on an empty value stack. Indicates a malformed postfix program."""

    def __init__(self, token: object = None):
        self.token = token
        super().__init__(f"Pop on empty stack while evaluating {token!r}")


class MalformedExpression(EngineError):
    """Evaluation did not leave exactly one value on the stack."""

    def __init__(self, stack_size: int):
        self.stack_size = stack_size
        super().__init__(
            f"Invalid expression: evaluation left {stack_size} value(s) on the stack, expected 1"
        )
