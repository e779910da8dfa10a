"""
Property-Based Tests for Endpoint Behavior

This module contains property tests for POST /api/analyze:

- Property 1: Row Count Preservation (server returns every extracted action)
- Property 2: Invalid Transcript Rejection
- Property 3: Missing Credential Is Independent of Transcript
- Property 4: Provider Failure Reporting
"""

import os
from contextlib import contextmanager
from unittest.mock import patch

from fastapi.testclient import TestClient
from hypothesis import given, strategies as st, settings

from conftest import make_actions, make_extractor
from main import app
from models.analyze_request import TRANSCRIPT_REQUIRED_MESSAGE


client = TestClient(app)


# =============================================================================
# Strategy Definitions
# =============================================================================

transcripts = st.text(min_size=1, max_size=200)

action_pairs = st.lists(
    st.tuples(
        st.text(max_size=30),
        st.text(min_size=1, max_size=80).filter(lambda t: t.strip() != ""),
    ),
    max_size=15,
)

non_string_values = st.one_of(
    st.none(),
    st.booleans(),
    st.integers(),
    st.floats(allow_nan=False, allow_infinity=False),
    st.lists(st.text(max_size=5), max_size=3),
    st.dictionaries(st.text(max_size=5), st.text(max_size=5), max_size=3),
)


@contextmanager
def fake_provider(result=None, error=None, api_key="sk-test-key"):
    """Install a fake extractor and credential for one example."""
    extractor, openai_client = make_extractor(result=result, error=error)
    previous = app.state.action_extractor
    app.state.action_extractor = extractor
    env = {"OPENAI_API_KEY": api_key}
    try:
        with patch.dict(os.environ, env):
            if not api_key:
                del os.environ["OPENAI_API_KEY"]
            yield openai_client
    finally:
        app.state.action_extractor = previous


# =============================================================================
# Property 1: Row Count Preservation
# For any transcript and any N well-formed actions returned by the provider,
# the response SHALL contain exactly those N actions in order.
# =============================================================================

@given(transcript=transcripts, pairs=action_pairs)
@settings(max_examples=50, deadline=None)
def test_property1_all_actions_returned_in_order(transcript, pairs):
    with fake_provider(result=make_actions(*pairs)):
        response = client.post("/api/analyze", json={"transcript": transcript})
    
    assert response.status_code == 200
    actions = response.json()["actions"]
    assert len(actions) == len(pairs)
    assert [(a["owner"], a["task"]) for a in actions] == list(pairs)


# =============================================================================
# Property 2: Invalid Transcript Rejection
# For any non-string transcript value, the endpoint SHALL answer 400 with an
# error field and never call the provider.
# =============================================================================

@given(value=non_string_values)
@settings(max_examples=50, deadline=None)
def test_property2_non_string_transcript_rejected(value):
    with fake_provider(result=make_actions()) as openai_client:
        response = client.post("/api/analyze", json={"transcript": value})
    
    assert response.status_code == 400
    assert response.json() == {"error": TRANSCRIPT_REQUIRED_MESSAGE}
    openai_client.chat.completions.parse.assert_not_called()


# =============================================================================
# Property 3: Missing Credential Is Independent of Transcript
# =============================================================================

@given(transcript=transcripts)
@settings(max_examples=50, deadline=None)
def test_property3_missing_credential_is_deterministic(transcript):
    with fake_provider(result=make_actions(), api_key=""):
        response = client.post("/api/analyze", json={"transcript": transcript})
    
    assert response.status_code == 500
    assert response.json() == {"error": "OPENAI_API_KEY is not configured"}


# =============================================================================
# Property 4: Provider Failure Reporting
# For any exception message raised by the provider call, the endpoint SHALL
# answer 500 with error and details fields.
# =============================================================================

@given(transcript=transcripts, message=st.text(min_size=1, max_size=100))
@settings(max_examples=50, deadline=None)
def test_property4_provider_failure_has_error_and_details(transcript, message):
    with fake_provider(error=RuntimeError(message)):
        response = client.post("/api/analyze", json={"transcript": transcript})
    
    assert response.status_code == 500
    body = response.json()
    assert body["error"] == "Failed to analyze transcript"
    assert body["details"] == message
