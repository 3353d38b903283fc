"""
Pydantic models for the HTTP boundary.
The response shape is fixed regardless of provider.
"""

from typing import Optional

from pydantic import BaseModel, Field

MISSING_QUERY_MESSAGE = "Missing query parameter"
UPSTREAM_UNAVAILABLE_MESSAGE = "The AI assistant is temporarily offside. Please try again later!"
UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred"
QUERY_TOO_LONG_MESSAGE = "Query is too long"

MAX_QUERY_LENGTH = 512


class AskRequest(BaseModel):
    # Optional so a missing query is reported as our own 400, not a 422.
    query: Optional[str] = Field(
        default=None, max_length=MAX_QUERY_LENGTH, description="Free-text football question"
    )

    def has_query(self) -> bool:
        return bool(self.query and self.query.strip())


class ResponseMetadata(BaseModel):
    intent: str = Field(..., description="Detected intent, or 'general' when none")
    has_context: bool = Field(..., description="Whether grounding data was sent to the LLM")
    team: Optional[str] = None


class AskResponse(BaseModel):
    response: str
    metadata: ResponseMetadata


class ErrorResponse(BaseModel):
    error: str
    details: Optional[str] = None
