"""Read-only operator and function catalogs."""
from enum import Enum
import math
import operator
from types import MappingProxyType
from typing import Callable, Mapping, Optional, Sequence, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field

from expression_engine.common import operations
from expression_engine.common.errors import ArityMismatch


# Declared arity of functions accepting one or more arguments
VARIADIC = -1


class Associativity(str, Enum):
    LEFT = "left"
    RIGHT = "right"


class Arity(str, Enum):
    UNARY = "unary"
    BINARY = "binary"


class Operator(BaseModel):
    """
    Static operator descriptor.

    Higher precedence binds tighter. Unary operators sit above every binary
    operator so they never need to pop the operator stack.
    """

    model_config = ConfigDict(frozen=True)

    symbol: str = Field(..., min_length=1, max_length=1, description="Operator character")
    precedence: int = Field(..., ge=1, description="Binding strength")
    associativity: Associativity
    arity: Arity
    function: Callable[..., float] = Field(..., repr=False)

    @property
    def unary(self) -> bool:
        return self.arity is Arity.UNARY

    @property
    def left_associative(self) -> bool:
        return self.associativity is Associativity.LEFT

    def apply(self, *operands: float) -> float:
        return self.function(*operands)

    def __str__(self) -> str:
        # Unary operators are shown with a leading '@' in postfix dumps
        return f"@{self.symbol}" if self.unary else self.symbol


class Function(BaseModel):
    """Static function descriptor."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1)
    arity: int = Field(..., ge=VARIADIC, description="Fixed argument count, or VARIADIC")
    function: Callable[..., float] = Field(..., repr=False)

    @property
    def variadic(self) -> bool:
        return self.arity == VARIADIC

    def check_arity(self, given: int) -> None:
        """
        Validate the number of supplied arguments.

        :param int given: Number of arguments in the call

        :raises ArityMismatch: If the call does not fit the declared arity
        """
        if self.variadic:
            if given < 1:
                raise ArityMismatch(self.name, "1+", given)
        elif given != self.arity:
            raise ArityMismatch(self.name, self.arity, given)

    def apply(self, arguments: Sequence[float]) -> float:
        if self.variadic:
            return self.function(arguments)
        return self.function(*arguments)

    def __str__(self) -> str:
        return self.name


OPERATORS: Tuple[Operator, ...] = (
    Operator(symbol="+", precedence=1, associativity=Associativity.LEFT, arity=Arity.BINARY, function=operator.add),
    Operator(symbol="-", precedence=1, associativity=Associativity.LEFT, arity=Arity.BINARY, function=operator.sub),
    Operator(symbol="*", precedence=2, associativity=Associativity.LEFT, arity=Arity.BINARY, function=operator.mul),
    Operator(symbol="/", precedence=2, associativity=Associativity.LEFT, arity=Arity.BINARY, function=operations.divide),
    Operator(symbol="%", precedence=2, associativity=Associativity.LEFT, arity=Arity.BINARY, function=operations.modulo),
    Operator(symbol="^", precedence=3, associativity=Associativity.RIGHT, arity=Arity.BINARY, function=operations.power),
    Operator(symbol="+", precedence=4, associativity=Associativity.RIGHT, arity=Arity.UNARY, function=operator.pos),
    Operator(symbol="-", precedence=4, associativity=Associativity.RIGHT, arity=Arity.UNARY, function=operator.neg),
)


def _function(name: str, arity: int, fn: Callable[..., float]) -> Tuple[str, Function]:
    return name, Function(name=name, arity=arity, function=fn)


FUNCTIONS: Mapping[str, Function] = MappingProxyType(dict([
    # Variadic reductions
    _function("min", VARIADIC, operations.minimum),
    _function("max", VARIADIC, operations.maximum),
    _function("sum", VARIADIC, operations.total),
    _function("avg", VARIADIC, operations.average),
    # Single argument
    _function("abs", 1, math.fabs),
    _function("sqrt", 1, operations.real_valued(math.sqrt)),
    _function("exp", 1, operations.real_valued(math.exp)),
    _function("ln", 1, operations.natural_log),
    _function("log", 1, operations.natural_log),
    _function("log2", 1, operations.log2),
    _function("log10", 1, operations.log10),
    _function("sin", 1, operations.real_valued(math.sin)),
    _function("cos", 1, operations.real_valued(math.cos)),
    _function("tan", 1, operations.real_valued(math.tan)),
    _function("asin", 1, operations.real_valued(math.asin)),
    _function("acos", 1, operations.real_valued(math.acos)),
    _function("atan", 1, operations.real_valued(math.atan)),
    _function("sinh", 1, operations.sinh),
    _function("cosh", 1, operations.real_valued(math.cosh)),
    _function("tanh", 1, operations.real_valued(math.tanh)),
    _function("floor", 1, operations.floor),
    _function("ceil", 1, operations.ceil),
    _function("round", 1, operations.round_half_away),
    _function("trunc", 1, operations.trunc),
    _function("sign", 1, operations.sign),
    # Two arguments
    _function("atan2", 2, operations.real_valued(math.atan2)),
    _function("hypot", 2, operations.real_valued(math.hypot)),
    _function("pow", 2, operations.power),
    # Constants
    _function("pi", 0, lambda: math.pi),
    _function("e", 0, lambda: math.e),
    _function("tau", 0, lambda: math.tau),
]))


def find_operator(symbol: str, arity: Union[Arity, str]) -> Optional[Operator]:
    """
    Look up an operator by symbol under the given arity.

    :param str symbol: Operator character
    :param Arity arity: Required arity

    :return: Matching operator or None
    :rtype: Optional[Operator]
    """
    for op in OPERATORS:
        if op.symbol == symbol and op.arity == arity:
            return op
    return None


def find_function(name: str) -> Optional[Function]:
    return FUNCTIONS.get(name)
