"""Pydantic models for expression evaluation requests and results."""
from pydantic import BaseModel, ConfigDict, Field


class EvaluationRequest(BaseModel):
    """Represents a single expression to evaluate."""

    model_config = ConfigDict(frozen=True)

    expression: str = Field(..., description="Arithmetic expression as a string")


class EvaluationResult(BaseModel):
    """Represents the result of an evaluated expression."""

    model_config = ConfigDict(frozen=True)

    expression: str = Field(..., description="Original arithmetic expression")
    result: float = Field(..., description="Evaluated numeric result of the expression")

    def __str__(self) -> str:
        return f"{self.expression} = {self.result!r}"
