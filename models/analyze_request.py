"""
Analyze Request/Response Models

This module defines the Pydantic models for the transcript analysis endpoint.
These models handle validation and serialization for the POST /api/analyze API.
"""

from pydantic import BaseModel, Field, StrictStr, field_validator


TRANSCRIPT_REQUIRED_MESSAGE = "Transcript is required and must be a string"


class AnalyzeRequest(BaseModel):
    """
    Request body for the analysis endpoint.
    
    Attributes:
        transcript: Raw transcript text (required, must be a non-empty string)
    """
    transcript: StrictStr = Field(
        ...,
        description="Raw text content of the uploaded transcript file"
    )
    
    @field_validator('transcript')
    @classmethod
    def transcript_must_not_be_empty(cls, v: str) -> str:
        """Validate that the transcript is not an empty string."""
        if not v:
            raise ValueError(TRANSCRIPT_REQUIRED_MESSAGE)
        return v


class ErrorResponse(BaseModel):
    """
    Error body for validation and configuration failures.
    
    Attributes:
        error: Human readable error message
    """
    error: str = Field(
        ...,
        description="Human readable error message"
    )


class ErrorDetailResponse(ErrorResponse):
    """
    Error body for failures during the provider call.
    
    Attributes:
        error: Generic error message
        details: Underlying error text, or "Unknown error"
    """
    details: str = Field(
        ...,
        description="Underlying error text"
    )
