"""ActionExtractor for turning meeting transcripts into structured action items.

This service runs the "Action Extractor" agent: a fixed instruction prompt
bound to the ``ActionsResponse`` schema through OpenAI's Structured Outputs.
The agent definition is built once and shared; the OpenAI client is opened
per call with the credential currently in the environment.
"""
import os
import logging
from typing import Callable, Optional

from openai import (
    AsyncOpenAI,
    ContentFilterFinishReasonError,
    LengthFinishReasonError,
    OpenAIError,
)
from pydantic import ValidationError

from models.action_models import ActionsResponse
from models.agent_config import AgentConfig


logger = logging.getLogger(__name__)

API_KEY_ENV_VAR = "OPENAI_API_KEY"
DEFAULT_MODEL = "gpt-4o-mini"
DEFAULT_TIMEOUT_SECONDS = 60.0

ACTION_EXTRACTOR_INSTRUCTIONS = (
    "You are an expert at analyzing meeting transcripts and extracting action items. "
    "Given a meeting transcript as input, extract all clear action items and identify "
    "who is responsible for each. "
    "Always respond using the structured JSON shape defined by the output type."
)


class ActionExtractionError(Exception):
    """Base class for failures while extracting action items."""


class ConfigurationError(ActionExtractionError):
    """The provider credential is missing from the environment."""


class ProviderError(ActionExtractionError):
    """The provider could not be reached or rejected the request."""


class ProviderOutputError(ActionExtractionError):
    """The provider answered, but not with output matching the action schema."""


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def _env_timeout(name: str, default: float) -> float:
    """Read a positive number of seconds, falling back to default on bad input."""
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    try:
        seconds = float(value)
    except ValueError:
        seconds = 0.0
    if not seconds > 0 or seconds == float("inf"):
        logger.warning(
            f"Invalid {name}={value!r}, using default of {default}s"
        )
        return default
    return seconds


def build_action_agent() -> AgentConfig:
    """Build the action extraction agent from environment settings.

    Returns:
        Frozen AgentConfig bound to the ActionsResponse schema.
    """
    agent = AgentConfig(
        name="Action Extractor",
        model=os.getenv("OPENAI_MODEL") or DEFAULT_MODEL,
        instructions=ACTION_EXTRACTOR_INSTRUCTIONS,
        output_type=ActionsResponse,
        timeout_seconds=_env_timeout("OPENAI_TIMEOUT_SECONDS", DEFAULT_TIMEOUT_SECONDS),
        validate_output=_env_flag("ACTION_OUTPUT_VALIDATION", True),
    )
    logger.info(
        f"Action agent built: name={agent.name}, model={agent.model}, "
        f"timeout={agent.timeout_seconds}s, validate_output={agent.validate_output}"
    )
    return agent


def get_api_key() -> str:
    """Read the provider credential.

    Raises:
        ConfigurationError: If OPENAI_API_KEY is unset or empty.
    """
    api_key = os.getenv(API_KEY_ENV_VAR)
    if not api_key:
        raise ConfigurationError(f"{API_KEY_ENV_VAR} is not configured")
    return api_key


class ActionExtractor:
    """Runs the action extraction agent against a transcript.

    The extractor holds no per-request state, so a single instance is safe
    to share between concurrent requests.
    """

    def __init__(
        self,
        agent: AgentConfig,
        client_factory: Callable[..., AsyncOpenAI] = AsyncOpenAI
    ):
        """Initialize the extractor.

        Args:
            agent: The immutable agent definition to run
            client_factory: Callable building an AsyncOpenAI client from
                api_key, timeout and max_retries keyword arguments
        """
        self.agent = agent
        self._client_factory = client_factory

    async def extract(
        self,
        transcript: str,
        request_id: Optional[str] = None
    ) -> ActionsResponse:
        """Extract action items from a transcript with a single provider call.

        Args:
            transcript: Raw transcript text, sent to the model as-is
            request_id: Identifier used in log lines

        Returns:
            ActionsResponse with the actions in the order the model produced them

        Raises:
            ConfigurationError: If the credential is missing
            ProviderError: If the provider call fails
            ProviderOutputError: If the output does not match the schema
        """
        api_key = get_api_key()

        logger.info(
            f"Extracting actions: request_id={request_id}, "
            f"model={self.agent.model}, length={len(transcript)} chars"
        )

        # No retries: one request, one provider call
        client = self._client_factory(
            api_key=api_key,
            timeout=self.agent.timeout_seconds,
            max_retries=0
        )

        try:
            completion = await client.chat.completions.parse(
                model=self.agent.model,
                messages=[
                    {"role": "system", "content": self.agent.instructions},
                    {"role": "user", "content": transcript}
                ],
                response_format=self.agent.output_type,
                temperature=self.agent.temperature
            )
        except (LengthFinishReasonError, ContentFilterFinishReasonError) as e:
            raise ProviderOutputError(str(e)) from e
        except ValidationError as e:
            raise ProviderOutputError(f"Output failed schema validation: {e}") from e
        except OpenAIError as e:
            raise ProviderError(str(e)) from e
        finally:
            await client.close()

        message = completion.choices[0].message
        if message.parsed is None:
            reason = message.refusal or "Model returned no structured output"
            raise ProviderOutputError(reason)

        result = message.parsed
        if self.agent.validate_output:
            result = self._validate_output(result)

        logger.info(
            f"Actions extracted: request_id={request_id}, "
            f"action_items={len(result.actions)}"
        )

        return result

    def _validate_output(self, parsed) -> ActionsResponse:
        """Re-check provider output at the trust boundary.

        Blank tasks are valid strings and pass through unchanged.

        Raises:
            ProviderOutputError: If the output does not match ActionsResponse
        """
        try:
            result = ActionsResponse.model_validate(
                parsed.model_dump() if hasattr(parsed, "model_dump") else parsed
            )
        except ValidationError as e:
            raise ProviderOutputError(f"Output failed schema validation: {e}") from e

        return result
