"""Rule registry and exports."""

from typing import Dict, Type

from todolint.models.base import BaseRule, Comment, CommentKind, Finding, MatchLocation
from todolint.rules.documented_todos import UndocumentedTodoRule
from todolint.rules.matcher import CompiledMatcher, build_matchers, compile_term

RULE_REGISTRY: Dict[str, Type[BaseRule]] = {
    UndocumentedTodoRule.name: UndocumentedTodoRule,
}

__all__ = [
    "RULE_REGISTRY",
    "BaseRule",
    "Comment",
    "CommentKind",
    "CompiledMatcher",
    "Finding",
    "MatchLocation",
    "UndocumentedTodoRule",
    "build_matchers",
    "compile_term",
]
