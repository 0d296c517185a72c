"""Engine configuration."""
from pydantic import BaseModel, ConfigDict, Field


class EngineConfig(BaseModel):
    """
    Fixed limits applied to a single evaluation.

    Every stack used by the engine (operator stack, output sequence, arity
    trackers and the evaluator's value stack) is bounded by ``stack_capacity``.
    """

    # Make the Pydantic instance immutable (read-only), limits must not change mid-evaluation
    model_config = ConfigDict(frozen=True)

    stack_capacity: int = Field(default=256, ge=1, description="Maximum number of entries per stack")
    max_name_length: int = Field(default=15, ge=1, description="Function names are truncated to this length")


DEFAULT_CONFIG = EngineConfig()
