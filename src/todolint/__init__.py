"""todolint - Flags warning comments that lack an issue tracker reference."""

__version__ = "0.1.0"

from todolint.errors import ConfigurationError
from todolint.models.base import Comment, CommentKind, Finding, MatchLocation
from todolint.pipeline import Diagnostic, LintPipeline, LintReport
from todolint.rules import UndocumentedTodoRule, build_matchers

__all__ = [
    "__version__",
    "Comment",
    "CommentKind",
    "ConfigurationError",
    "Diagnostic",
    "Finding",
    "LintPipeline",
    "LintReport",
    "MatchLocation",
    "UndocumentedTodoRule",
    "build_matchers",
]
