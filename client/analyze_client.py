"""HTTP client for the transcript analysis endpoint."""
import logging
import os
from typing import List, Optional

import httpx
from pydantic import ValidationError

from models.action_models import Action
from client.session import TranscriptSession

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://localhost:8000"
ANALYZE_PATH = "/api/analyze"
FALLBACK_ERROR_MESSAGE = "Failed to analyze transcript"


class AnalyzeRequestError(Exception):
    """An analysis request failed; the message is meant for display."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class AnalyzeClient:
    """Sends transcripts to ``POST /api/analyze``.

    Usable as an async context manager, which closes the underlying
    httpx client on exit.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = 120.0,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        self.base_url = base_url or os.getenv("ANALYZER_BASE_URL", DEFAULT_BASE_URL)
        self._http = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=timeout,
            transport=transport
        )

    async def __aenter__(self) -> "AnalyzeClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._http.aclose()

    async def analyze(self, transcript: str) -> List[Action]:
        """Request action items for a transcript.

        Returns:
            The actions in server order; empty if the body has none

        Raises:
            AnalyzeRequestError: On transport errors, non-2xx responses or
                bodies that are not the expected JSON
        """
        try:
            response = await self._http.post(ANALYZE_PATH, json={"transcript": transcript})
        except httpx.HTTPError as e:
            logger.error(f"Analyze request failed: base_url={self.base_url}, error={e}")
            raise AnalyzeRequestError(str(e) or FALLBACK_ERROR_MESSAGE) from e

        if not response.is_success:
            message = FALLBACK_ERROR_MESSAGE
            try:
                body = response.json()
                if isinstance(body, dict) and body.get("error"):
                    message = str(body["error"])
            except ValueError:
                pass
            logger.warning(
                f"Analyze request rejected: status={response.status_code}, error={message}"
            )
            raise AnalyzeRequestError(message, status_code=response.status_code)

        try:
            body = response.json()
        except ValueError as e:
            raise AnalyzeRequestError(
                f"Invalid response from server: {e}", response.status_code
            ) from e

        raw_actions = body.get("actions") if isinstance(body, dict) else None
        if raw_actions is None:
            raw_actions = []
        if not isinstance(body, dict) or not isinstance(raw_actions, list):
            raise AnalyzeRequestError("Invalid response from server", response.status_code)

        try:
            return [Action.model_validate(item) for item in raw_actions]
        except ValidationError as e:
            raise AnalyzeRequestError(
                f"Invalid response from server: {e}", response.status_code
            ) from e


async def run_analysis(session: TranscriptSession, client: AnalyzeClient) -> bool:
    """Drive one analysis of the session's transcript.

    Returns:
        True if the session ended in the results state

    Raises:
        InvalidTransitionError: If the session cannot start an analysis
    """
    token = session.begin_analysis()
    try:
        actions = await client.analyze(session.transcript)
    except AnalyzeRequestError as e:
        session.fail(token, str(e))
        return False
    return session.complete(token, actions)
