"""Evaluate a postfix program with a value stack."""
from typing import Iterable, List, Optional

from expression_engine.common.config import DEFAULT_CONFIG, EngineConfig
from expression_engine.common.errors import (
    EngineCapacityExceeded,
    InternalStackUnderflow,
    MalformedExpression,
)
from expression_engine.common.logger import logger
from expression_engine.common.tokens import FunctionToken, NumberToken, OperatorToken, Token


class PostfixEvaluator:
    """
    Stack machine for postfix programs produced by the transformer.

    Numbers are pushed; operators and functions pop their operands and push
    the result. A well-formed program leaves exactly one value, the result.
    """

    def __init__(self, config: EngineConfig = DEFAULT_CONFIG):
        self.config = config
        self.stack: List[float] = []

    def _push(self, value: float) -> None:
        if len(self.stack) >= self.config.stack_capacity:
            raise EngineCapacityExceeded("value", self.config.stack_capacity)
        self.stack.append(value)

    def _pop(self, token: Token) -> float:
        if not self.stack:
            raise InternalStackUnderflow(token)
        return self.stack.pop()

    def _apply_operator(self, token: OperatorToken) -> float:
        op = token.operator
        # rhs was pushed most recently
        rhs = self._pop(token)
        if op.unary:
            result = op.apply(rhs)
            logger.debug(f"> {op.symbol}{rhs} => {result}")
            return result
        lhs = self._pop(token)
        result = op.apply(lhs, rhs)
        logger.debug(f"> {lhs} {op.symbol} {rhs} => {result}")
        return result

    def _apply_function(self, token: FunctionToken) -> float:
        function = token.function
        given = token.call_arity if token.call_arity is not None else 0
        function.check_arity(given)

        # Pop in reverse so that arguments[0] is the first supplied argument
        arguments = [self._pop(token) for _ in range(given)]
        arguments.reverse()

        result = function.apply(arguments)
        logger.debug(f"> {function.name}({', '.join(map(str, arguments))}) => {result}")
        return result

    def evaluate(self, postfix: Iterable[Token]) -> float:
        """
        Run a postfix program.

        :param Iterable[Token] postfix: Tokens in postfix order

        :return: Result of the program
        :rtype: float
        :raises ArityMismatch: If a function is called with a wrong argument count
        :raises InternalStackUnderflow: If an operand is missing
        :raises MalformedExpression: If the program does not reduce to one value
        """
        for token in postfix:
            if isinstance(token, NumberToken):
                self._push(token.value)
            elif isinstance(token, OperatorToken):
                self._push(self._apply_operator(token))
            elif isinstance(token, FunctionToken):
                self._push(self._apply_function(token))
            else:
                # Parentheses and commas never reach the output of the transformer
                raise MalformedExpression(len(self.stack))

        if len(self.stack) != 1:
            raise MalformedExpression(len(self.stack))

        return self.stack[0]


def evaluate_postfix(postfix: Iterable[Token], config: Optional[EngineConfig] = None) -> float:
    return PostfixEvaluator(config or DEFAULT_CONFIG).evaluate(postfix)
