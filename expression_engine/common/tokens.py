"""Tokens passed between the lexer, the transformer and the evaluator."""
from typing import Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from expression_engine.common.catalog import Function, Operator


class BaseToken(BaseModel):
    """Common part of every token: where it starts in the input text."""

    # Tokens are immutable once produced
    model_config = ConfigDict(frozen=True)

    position: int = Field(default=0, ge=0, description="Offset of the token in the input")


class NumberToken(BaseToken):
    kind: Literal["number"] = "number"
    value: float

    def __str__(self) -> str:
        text = repr(self.value)
        return text[:-2] if text.endswith(".0") else text


class OperatorToken(BaseToken):
    kind: Literal["operator"] = "operator"
    operator: Operator

    def __str__(self) -> str:
        return str(self.operator)


class FunctionToken(BaseToken):
    """
    Reference to a catalog function.

    ``call_arity`` is unknown while lexing; the transformer fills it in once
    the call's closing parenthesis is seen.
    """

    kind: Literal["function"] = "function"
    function: Function
    call_arity: Optional[int] = Field(default=None, ge=0)

    def with_arity(self, call_arity: int) -> "FunctionToken":
        return self.model_copy(update={"call_arity": call_arity})

    def __str__(self) -> str:
        if self.call_arity is None:
            return self.function.name
        return f"{self.function.name}/{self.call_arity}"


class LeftParenToken(BaseToken):
    kind: Literal["lparen"] = "lparen"

    def __str__(self) -> str:
        return "("


class RightParenToken(BaseToken):
    kind: Literal["rparen"] = "rparen"

    def __str__(self) -> str:
        return ")"


class CommaToken(BaseToken):
    kind: Literal["comma"] = "comma"

    def __str__(self) -> str:
        return ","


Token = Union[NumberToken, OperatorToken, FunctionToken, LeftParenToken, RightParenToken, CommaToken]


def format_tokens(tokens) -> str:
    """Render a token sequence as a space separated string, e.g. ``3 4 2 * +``."""
    return " ".join(str(token) for token in tokens)
