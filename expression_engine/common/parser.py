"""Parse and evaluate arithmetic expressions safely."""
from typing import Iterable, List, Optional

from expression_engine.common.config import DEFAULT_CONFIG, EngineConfig
from expression_engine.common.logger import logger
from expression_engine.common.models import EvaluationRequest, EvaluationResult
from expression_engine.common.tokens import Token, format_tokens
from expression_engine.engine import lexer
from expression_engine.engine.evaluator import evaluate_postfix
from expression_engine.engine.transformer import to_postfix


class ExpressionParser:
    """
    Parse and evaluate arithmetic expressions safely.

    Design constraints:
        - No eval(), no dynamic code execution
        - Safe, deterministic computation: the same text always gives the same result
        - Numeric corner cases follow IEEE-754 (5/0 is inf, 0/0 is NaN), they are not errors

    Algorithm:
        1. Tokenize, deciding for each '+'/'-' whether it is unary or binary
        2. Convert to Reverse Polish Notation (RPN) using Shunting-yard
        3. Evaluate RPN using a stack

    Examples:
        - Infix expression (standard notation): max(1, 2 ^ 3) * -2
        - Corresponding Reverse Polish Notation (RPN): 1 2 3 ^ max/2 2 @- *

    """

    @staticmethod
    def tokenize(expr: str, config: EngineConfig = DEFAULT_CONFIG) -> List[Token]:
        """
        Split an arithmetic expression into tokens.

        :param str expr: Arithmetic expression as a string
        :param EngineConfig config: Engine limits

        :return: List of tokens
        :rtype: List[Token]
        :raises LexError: If the text contains an unknown symbol or function name
        """
        return list(lexer.tokenize(expr, config))

    @staticmethod
    def to_rpn(tokens: Iterable[Token], config: EngineConfig = DEFAULT_CONFIG) -> List[Token]:
        """
        Convert a list of tokens into Reverse Polish Notation (RPN) using the Shunting-yard algorithm.

        :param Iterable[Token] tokens: Infix tokens
        :param EngineConfig config: Engine limits

        :return: List of tokens in RPN order
        :rtype: List[Token]
        :raises ExpressionSyntaxError: On unbalanced parentheses, a stray comma or a call without parentheses
        """
        return to_postfix(tokens, config)

    @staticmethod
    def evaluate(expr: str, config: EngineConfig = DEFAULT_CONFIG) -> float:
        """
        Evaluate an arithmetic expression safely.

        Tokens flow through the transformer as soon as they are read, so the
        first error in the text aborts evaluation.

        :param str expr: Arithmetic expression string
        :param EngineConfig config: Engine limits

        :return: Computed result as float
        :rtype: float
        :raises EngineError: If expression is invalid or malformed
        """
        logger.debug(f"Evaluating {expr!r}")

        rpn: List[Token] = ExpressionParser.to_rpn(lexer.tokenize(expr, config), config)

        result = evaluate_postfix(rpn, config)
        logger.debug(f"{format_tokens(rpn)} => {result}")
        return result

    @staticmethod
    def run(request: EvaluationRequest, config: EngineConfig = DEFAULT_CONFIG) -> EvaluationResult:
        """
        Evaluate a request and wrap the value in a result model.

        :param EvaluationRequest request: Expression to evaluate
        :param EngineConfig config: Engine limits

        :return: Expression together with its value
        :rtype: EvaluationResult
        """
        result = ExpressionParser.evaluate(request.expression, config)
        return EvaluationResult(expression=request.expression, result=result)


def evaluate(expression: str, config: Optional[EngineConfig] = None) -> float:
    """
    Public entry point: evaluate ``expression`` and return its value.

    :param str expression: Arithmetic expression
    :param EngineConfig config: Engine limits, defaults to :data:`DEFAULT_CONFIG`

    :return: Result
    :rtype: float
    :raises EngineError: On the first lexical, syntactic or arity error
    """
    return ExpressionParser.evaluate(expression, config or DEFAULT_CONFIG)
