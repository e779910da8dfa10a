"""Pydantic models for structured action item extraction.

These models define the schema the extraction agent is bound to. They are
passed to OpenAI's Structured Outputs as the response format, so every field
must be required and carry a description the model can read.
"""
from pydantic import BaseModel, Field
from typing import List


UNASSIGNED_OWNER = "Unassigned"


class Action(BaseModel):
    """An action item extracted from a meeting transcript."""
    owner: str = Field(
        description="The person responsible for this action item"
    )
    task: str = Field(
        description="The task or action item to be completed"
    )

    @property
    def display_owner(self) -> str:
        """Owner name for presentation, falling back to "Unassigned"."""
        return self.owner.strip() or UNASSIGNED_OWNER


class ActionsResponse(BaseModel):
    """Structured output of the action extraction agent.

    Also the success body of ``POST /api/analyze``. Actions keep the order
    the model returned them in.
    """
    actions: List[Action] = Field(
        description="List of action items extracted from the transcript"
    )
