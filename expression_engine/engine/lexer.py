"""
Split an expression into tokens.

Operator symbols are ambiguous (``-`` is both subtraction and negation), so
the lexer looks back one token to decide: an operator is unary at the start
of the input and after an operator, a left parenthesis or a comma, and
binary everywhere else. Counting the comma as an argument start extends the
classic rule (start, operator, left parenthesis) so that ``max(1, -2)`` works.
"""
import re
from typing import Iterator, Optional, Tuple

from expression_engine.common.catalog import Arity, find_function, find_operator
from expression_engine.common.config import DEFAULT_CONFIG, EngineConfig
from expression_engine.common.errors import InvalidCharacter, UndefinedFunction
from expression_engine.common.tokens import (
    CommaToken,
    FunctionToken,
    LeftParenToken,
    NumberToken,
    OperatorToken,
    RightParenToken,
    Token,
)


# Unsigned decimal float literal; an exponent is only part of it when digits follow
NUMBER_PATTERN = re.compile(r"(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
IDENTIFIER_PATTERN = re.compile(r"[A-Za-z][A-Za-z0-9]*")

PUNCTUATION = {
    "(": LeftParenToken,
    ")": RightParenToken,
    ",": CommaToken,
}


def _operator_arity(previous: Optional[Token]) -> Arity:
    if previous is None or isinstance(previous, (OperatorToken, LeftParenToken, CommaToken)):
        return Arity.UNARY
    return Arity.BINARY


def next_token(
    text: str,
    position: int = 0,
    previous: Optional[Token] = None,
    config: EngineConfig = DEFAULT_CONFIG,
) -> Optional[Tuple[Token, int]]:
    """
    Read the token starting at ``position``.

    :param str text: Full expression
    :param int position: Cursor into ``text``
    :param Token previous: Previously produced token, None at start of input
    :param EngineConfig config: Engine limits

    :return: The token and the cursor after it, or None at end of input
    :rtype: Optional[Tuple[Token, int]]
    :raises UndefinedFunction: If an identifier is not in the function catalog
    :raises InvalidCharacter: If no token can start at the cursor
    """
    length = len(text)
    while position < length and text[position].isspace():
        position += 1

    if position >= length:
        return None

    char = text[position]

    match = NUMBER_PATTERN.match(text, position)
    if match:
        return NumberToken(value=float(match.group()), position=position), match.end()

    match = IDENTIFIER_PATTERN.match(text, position)
    if match:
        name = match.group()[: config.max_name_length]
        function = find_function(name)
        if function is None:
            raise UndefinedFunction(name, position)
        return FunctionToken(function=function, position=position), match.end()

    if char in PUNCTUATION:
        return PUNCTUATION[char](position=position), position + 1

    op = find_operator(char, _operator_arity(previous))
    if op is None:
        raise InvalidCharacter(char, position)
    return OperatorToken(operator=op, position=position), position + 1


def tokenize(text: str, config: EngineConfig = DEFAULT_CONFIG) -> Iterator[Token]:
    """
    Yield the tokens of ``text`` from left to right.

    :param str text: Expression
    :param EngineConfig config: Engine limits

    :return: Token iterator
    :rtype: Iterator[Token]
    """
    position = 0
    previous: Optional[Token] = None
    while True:
        scanned = next_token(text, position, previous, config)
        if scanned is None:
            return
        previous, position = scanned
        yield previous
