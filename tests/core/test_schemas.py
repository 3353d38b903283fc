"""Tests for HTTP boundary models."""

import pytest
from pydantic import ValidationError

from football_agent.core.schemas import (
    MAX_QUERY_LENGTH,
    AskRequest,
    AskResponse,
    ErrorResponse,
    ResponseMetadata,
)


def test_ask_request_query_optional():
    """Test a missing query parses, so the endpoint can report it."""
    assert AskRequest().query is None
    assert AskRequest.model_validate({}).has_query() is False


def test_ask_request_has_query():
    """Test blank queries count as missing."""
    assert AskRequest(query="When does Arsenal play?").has_query() is True
    assert AskRequest(query="").has_query() is False
    assert AskRequest(query="   ").has_query() is False


def test_ask_response_shape():
    """Test the response body layout."""
    body = AskResponse(
        response="text", metadata=ResponseMetadata(intent="standings", has_context=True)
    ).model_dump()
    assert body == {
        "response": "text",
        "metadata": {"intent": "standings", "has_context": True, "team": None},
    }


def test_error_response_omits_details():
    """Test details are dropped when unset."""
    assert ErrorResponse(error="x").model_dump(exclude_none=True) == {"error": "x"}


def test_ask_request_rejects_oversized_query():
    """Test the query length is bounded."""
    with pytest.raises(ValidationError):
        AskRequest(query="a" * (MAX_QUERY_LENGTH + 1))
    assert AskRequest(query="a" * MAX_QUERY_LENGTH).has_query() is True
