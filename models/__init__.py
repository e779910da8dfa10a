"""Data models for the transcript action analyzer."""
from .action_models import Action, ActionsResponse, UNASSIGNED_OWNER
from .agent_config import AgentConfig
from .analyze_request import (
    AnalyzeRequest,
    ErrorResponse,
    ErrorDetailResponse,
    TRANSCRIPT_REQUIRED_MESSAGE,
)

__all__ = [
    # Extraction models
    "Action",
    "ActionsResponse",
    "UNASSIGNED_OWNER",
    # Agent configuration
    "AgentConfig",
    # Request/response models
    "AnalyzeRequest",
    "ErrorResponse",
    "ErrorDetailResponse",
    "TRANSCRIPT_REQUIRED_MESSAGE",
]
