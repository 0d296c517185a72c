"""
Convert an infix token stream into postfix (Reverse Polish) order.

The Shunting-yard algorithm keeps pending operators, functions and left
parentheses on a stack and moves them to the output once every operand they
apply to has been emitted. Function calls additionally keep an arity
tracker so that ``max(1, 5, 3)`` is emitted as ``1 5 3 max/3``. A function name
is only accepted as the head of a call, directly followed by '('.

Examples:
    - Infix: 3 + 4 * 2  ->  postfix: 3 4 2 * +
    - Infix: 2 ^ 3 ^ 2  ->  postfix: 2 3 2 ^ ^
"""
from typing import Iterable, List, Optional, Union

from pydantic import BaseModel, Field

from expression_engine.common.config import DEFAULT_CONFIG, EngineConfig
from expression_engine.common.errors import (
    EngineCapacityExceeded,
    MismatchedParens,
    MissingCallParens,
    UnexpectedComma,
)
from expression_engine.common.logger import logger
from expression_engine.common.tokens import (
    CommaToken,
    FunctionToken,
    LeftParenToken,
    NumberToken,
    OperatorToken,
    RightParenToken,
    Token,
    format_tokens,
)


# Entries allowed on the operator stack
StackEntry = Union[OperatorToken, FunctionToken, LeftParenToken]


class ArityTracker(BaseModel):
    """Argument bookkeeping for one open function call."""

    has_argument: bool = False
    commas: int = Field(default=0, ge=0)

    @property
    def call_arity(self) -> int:
        # f() has no argument; otherwise every comma separates one more argument
        return self.commas + 1 if self.has_argument else 0


class ShuntingYard:
    """
    Incremental infix-to-postfix transformer for a single expression.

    Feed tokens one at a time with :meth:`feed`, then call :meth:`finish` to
    flush the operator stack and get the postfix program.
    """

    def __init__(self, config: EngineConfig = DEFAULT_CONFIG):
        self.config = config
        self.operators: List[StackEntry] = []
        self.output: List[Token] = []
        self.arities: List[ArityTracker] = []
        self.previous: Optional[Token] = None

    def _check_call_opened(self, token: Optional[Token]) -> None:
        # A function name is only valid as the head of a parenthesized call
        if isinstance(self.previous, FunctionToken) and not isinstance(token, LeftParenToken):
            raise MissingCallParens(self.previous.function.name, self.previous.position)

    def _push(self, stack: list, item, name: str) -> None:
        if len(stack) >= self.config.stack_capacity:
            raise EngineCapacityExceeded(name, self.config.stack_capacity)
        stack.append(item)

    def _emit(self, token: Token) -> None:
        self._push(self.output, token, "output")

    def _pop_to_output(self) -> None:
        entry = self.operators.pop()
        if isinstance(entry, FunctionToken):
            # Each function on the operator stack owns exactly one tracker
            entry = entry.with_arity(self.arities.pop().call_arity)
        self._emit(entry)

    def _pop_until_left_paren(self) -> bool:
        """Move entries to the output until '(' is on top. Return False if there is none."""
        while self.operators:
            if isinstance(self.operators[-1], LeftParenToken):
                return True
            self._pop_to_output()
        return False

    def _should_pop(self, op1: OperatorToken, top: StackEntry) -> bool:
        if not isinstance(top, OperatorToken):
            return False
        first, second = op1.operator, top.operator
        if first.left_associative:
            return first.precedence <= second.precedence
        return first.precedence < second.precedence

    def feed(self, token: Token) -> None:
        """
        Process one infix token.

        :param Token token: Next token from the lexer

        :raises MismatchedParens: On a ')' without matching '('
        :raises UnexpectedComma: On a ',' outside parentheses
        :raises MissingCallParens: If a function name is not followed by '('
        :raises EngineCapacityExceeded: If a stack grows past its capacity
        """
        self._check_call_opened(token)
        self.previous = token

        if self.arities and not isinstance(token, (LeftParenToken, RightParenToken)):
            self.arities[-1].has_argument = True

        if isinstance(token, NumberToken):
            self._emit(token)

        elif isinstance(token, OperatorToken):
            if not token.operator.unary:
                while self.operators and self._should_pop(token, self.operators[-1]):
                    self._pop_to_output()
            self._push(self.operators, token, "operator")

        elif isinstance(token, FunctionToken):
            self._push(self.arities, ArityTracker(), "arity")
            self._push(self.operators, token, "operator")

        elif isinstance(token, LeftParenToken):
            self._push(self.operators, token, "operator")

        elif isinstance(token, CommaToken):
            if self.arities:
                self.arities[-1].commas += 1
            if not self._pop_until_left_paren():
                raise UnexpectedComma(token.position)

        elif isinstance(token, RightParenToken):
            if not self._pop_until_left_paren():
                raise MismatchedParens(token.position)
            # Discard the '('
            self.operators.pop()
            if self.operators and isinstance(self.operators[-1], FunctionToken):
                self._pop_to_output()

        logger.debug(
            f"{token}\toperators [{format_tokens(self.operators)}] output [{format_tokens(self.output)}]"
        )

    def finish(self) -> List[Token]:
        """
        Flush the operator stack and return the postfix program.

        :return: Tokens in postfix order
        :rtype: List[Token]
        :raises MismatchedParens: If a '(' was never closed
        :raises MissingCallParens: If the input ends with a function name
        """
        self._check_call_opened(None)

        while self.operators:
            top = self.operators[-1]
            if isinstance(top, LeftParenToken):
                raise MismatchedParens(top.position)
            self._pop_to_output()

        logger.debug(f"RPN: {format_tokens(self.output)}")
        return self.output


def to_postfix(tokens: Iterable[Token], config: Optional[EngineConfig] = None) -> List[Token]:
    """
    Convert infix tokens to postfix order.

    :param Iterable[Token] tokens: Infix tokens
    :param EngineConfig config: Engine limits

    :return: Tokens in postfix order
    :rtype: List[Token]
    """
    transformer = ShuntingYard(config or DEFAULT_CONFIG)
    for token in tokens:
        transformer.feed(token)
    return transformer.finish()
