"""Shared fixtures: a fake OpenAI client for the action extractor."""
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest

from models.action_models import Action, ActionsResponse
from models.agent_config import AgentConfig
from services.action_extractor import ACTION_EXTRACTOR_INSTRUCTIONS, ActionExtractor


def make_completion(parsed=None, refusal=None):
    """Build an object shaped like a ParsedChatCompletion."""
    message = SimpleNamespace(parsed=parsed, refusal=refusal)
    return SimpleNamespace(choices=[SimpleNamespace(message=message)])


def make_actions(*pairs):
    """ActionsResponse from (owner, task) pairs."""
    return ActionsResponse(actions=[Action(owner=o, task=t) for o, t in pairs])


def make_fake_openai(result=None, error=None):
    """Return (factory, client) where factory stands in for AsyncOpenAI."""
    client = MagicMock()
    if error is not None:
        client.chat.completions.parse = AsyncMock(side_effect=error)
    else:
        client.chat.completions.parse = AsyncMock(return_value=make_completion(parsed=result))
    client.close = AsyncMock()
    factory = MagicMock(return_value=client)
    return factory, client


def make_agent(**overrides):
    values = dict(
        name="Action Extractor",
        model="gpt-4o-mini",
        instructions=ACTION_EXTRACTOR_INSTRUCTIONS,
        output_type=ActionsResponse,
    )
    values.update(overrides)
    return AgentConfig(**values)


def make_extractor(result=None, error=None, **agent_overrides):
    factory, client = make_fake_openai(result=result, error=error)
    return ActionExtractor(make_agent(**agent_overrides), client_factory=factory), client


@pytest.fixture
def api_key(monkeypatch):
    """Provide a fake provider credential."""
    monkeypatch.setenv("OPENAI_API_KEY", "sk-test-key")
    return "sk-test-key"


@pytest.fixture
def no_api_key(monkeypatch):
    """Remove the provider credential from the environment."""
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)
