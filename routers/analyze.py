"""
Analysis router for transcript action item extraction.

This router provides the POST /api/analyze endpoint, which forwards an
uploaded transcript to the action extraction agent and returns the
structured action items.
"""

import logging
import uuid
from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from models.action_models import ActionsResponse
from models.analyze_request import AnalyzeRequest, ErrorResponse, ErrorDetailResponse
from services.action_extractor import (
    ActionExtractor,
    ConfigurationError,
    ProviderOutputError,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["analyze"])

ANALYSIS_FAILED_MESSAGE = "Failed to analyze transcript"
OUTPUT_MISMATCH_MESSAGE = "Model returned output that does not match the action schema"


def get_action_extractor(request: Request) -> ActionExtractor:
    """Return the extractor built at startup."""
    return request.app.state.action_extractor


@router.post(
    "/analyze",
    response_model=ActionsResponse,
    responses={
        400: {"model": ErrorResponse},
        500: {"model": ErrorDetailResponse},
    },
)
async def analyze_transcript(
    body: AnalyzeRequest,
    extractor: ActionExtractor = Depends(get_action_extractor)
):
    """
    Extract action items from a transcript.
    
    Args:
        body: AnalyzeRequest with the transcript text
        extractor: Shared ActionExtractor
        
    Returns:
        ActionsResponse with the extracted actions, or a JSON error body:
        400 for validation errors (raised before this handler runs),
        500 for configuration errors and provider failures
    """
    request_id = str(uuid.uuid4())
    
    logger.info(
        f"Analysis started: request_id={request_id}, "
        f"transcript_length={len(body.transcript)}"
    )
    
    try:
        result = await extractor.extract(body.transcript, request_id=request_id)
    except ConfigurationError as e:
        logger.error(f"Analysis rejected, not configured: request_id={request_id}, error={e}")
        return JSONResponse(
            status_code=500,
            content=ErrorResponse(error=str(e)).model_dump()
        )
    except ProviderOutputError as e:
        logger.error(
            f"Provider output rejected: request_id={request_id}, error={e}",
            exc_info=True
        )
        return JSONResponse(
            status_code=500,
            content=ErrorDetailResponse(
                error=OUTPUT_MISMATCH_MESSAGE,
                details=str(e) or "Unknown error"
            ).model_dump()
        )
    except Exception as e:
        logger.error(
            f"Error analyzing transcript with agent: request_id={request_id}, "
            f"error={type(e).__name__}: {str(e)}",
            exc_info=True
        )
        return JSONResponse(
            status_code=500,
            content=ErrorDetailResponse(
                error=ANALYSIS_FAILED_MESSAGE,
                details=str(e) or "Unknown error"
            ).model_dump()
        )
    
    logger.info(
        f"Analysis complete: request_id={request_id}, "
        f"action_items={len(result.actions)}"
    )
    
    return result
