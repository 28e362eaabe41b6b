"""Pydantic models for API request/response validation."""

from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from todolint.models.base import CommentKind, MatchLocation


class RuleOptions(BaseModel):
    """Per-request overrides of the configured rule options."""
    terms: Optional[List[str]] = Field(default=None, description="Warning terms to search for")
    location: Optional[MatchLocation] = Field(default=None, description="start or anywhere")
    url: Optional[str] = Field(default=None, description="Issue tracker reference")


class CommentIn(BaseModel):
    """A comment extracted by the caller."""
    kind: CommentKind = CommentKind.LINE
    text: str = Field(..., max_length=10000)
    line: Optional[int] = Field(default=None, ge=1)
    column: Optional[int] = Field(default=None, ge=0)
    source: Optional[str] = None


class CheckRequest(BaseModel):
    """Request model for checking a list of comments."""
    comments: List[CommentIn] = Field(..., min_length=1)
    options: Optional[RuleOptions] = None


class CheckTextRequest(BaseModel):
    """Request model for checking a single comment body."""
    text: str = Field(..., min_length=1, max_length=10000, description="Comment text to check")
    kind: CommentKind = CommentKind.LINE
    options: Optional[RuleOptions] = None

    @field_validator("text")
    @classmethod
    def text_not_empty(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Text cannot be empty or whitespace only")
        return v


class DiagnosticOut(BaseModel):
    """A single undocumented warning comment."""
    message: str
    term: str
    source: Optional[str] = None
    line: Optional[int] = None
    column: Optional[int] = None


class CheckResponse(BaseModel):
    """Response model for comment checks."""
    flagged: bool = Field(description="True if any comment was flagged")
    diagnostics: List[DiagnosticOut]
    comments_checked: int
    summary: str = Field(description="Human-readable summary")
    processing_time_ms: float


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    version: str
    rules: List[str]
    tracker_url: Optional[str] = None
