"""Immutable agent definition for the action extractor."""
from typing import Type

from pydantic import BaseModel, ConfigDict, Field


class AgentConfig(BaseModel):
    """Configured LLM agent: model, fixed instructions and output schema.

    Built once at process start and shared by every request, so it is frozen.
    """
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    name: str
    model: str
    instructions: str
    output_type: Type[BaseModel]
    temperature: float = Field(default=0.0, ge=0.0, le=2.0)
    timeout_seconds: float = Field(default=60.0, gt=0)
    validate_output: bool = True
