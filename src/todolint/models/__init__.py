"""Data model and base rule classes."""

from todolint.models.base import (
    BaseRule,
    Comment,
    CommentKind,
    Finding,
    MatchLocation,
)

__all__ = [
    "BaseRule",
    "Comment",
    "CommentKind",
    "Finding",
    "MatchLocation",
]
