"""Detection of warning comments that do not reference a tracked issue."""

import logging
import re
from typing import Callable, List, Optional, Pattern, Sequence, Union

from todolint.models.base import BaseRule, Comment, CommentKind, Finding, MatchLocation
from todolint.rules.matcher import CompiledMatcher, build_matchers, coerce_location

logger = logging.getLogger(__name__)

DEFAULT_TERMS: List[str] = ["todo", "fixme", "xxx"]
MESSAGE_PREFIX = "Undocumented TODO: "
ELLIPSIS = "…"

# Directive comments that configure this rule are never reported
SELF_CONFIG_PATTERN = re.compile(r"\b(?:no-warning-comments|only-documented-todos)\b")

TrackerResolver = Callable[[], Optional[str]]


def is_directive_comment(comment: Comment) -> bool:
    """Check whether a comment is an inline linter directive rather than prose."""
    text = comment.text.strip()
    if comment.kind == CommentKind.LINE:
        return text.startswith("eslint-")
    if comment.kind == CommentKind.BLOCK:
        return text.startswith(("global ", "eslint ", "eslint-"))
    return False


def build_tracker_pattern(url: Optional[str]) -> Optional[Pattern[str]]:
    """Compile a tracker reference into a literal, case-insensitive pattern."""
    if not url or not url.strip():
        return None
    return re.compile(re.escape(url.strip()), re.IGNORECASE)


def ellipsize(text: str, max_length: int = 60, marker: str = ELLIPSIS) -> str:
    """Cut text to max_length characters, appending marker when cut."""
    if len(text) <= max_length:
        return text
    return text[:max_length] + marker


class UndocumentedTodoRule(BaseRule):
    """
    Flags warning comments (TODO, FIXME, XXX) lacking an issue tracker link.

    A comment is exempt when it contains the tracker reference, taken from
    the explicit ``url`` option or, when that is unset, from the injected
    ``tracker_resolver``. Without any reference every match is reported.
    """

    name = "only-documented-todos"
    version = "1.0.0"

    def __init__(
        self,
        terms: Optional[Sequence[str]] = None,
        location: Union[str, MatchLocation, None] = MatchLocation.START,
        url: Optional[str] = None,
        tracker_resolver: Optional[TrackerResolver] = None,
        max_length: int = 60,
    ):
        super().__init__()
        self.location = coerce_location(location)
        # Invalid terms fail here, before any comment is checked
        self._matchers: List[CompiledMatcher] = build_matchers(
            DEFAULT_TERMS if terms is None else terms, self.location
        )
        self.terms = [m.term for m in self._matchers]
        self.url = url
        self.max_length = max_length
        self._tracker_resolver = tracker_resolver
        self._tracker_pattern: Optional[Pattern[str]] = None
        self.tracker_url: Optional[str] = None

    def load(self) -> None:
        """Resolve the tracker reference."""
        self.tracker_url = self._resolve_tracker_url()
        self._tracker_pattern = build_tracker_pattern(self.tracker_url)
        self._loaded = True
        logger.info(
            "Loaded %d warning terms (location=%s, tracker=%s)",
            len(self._matchers), self.location.value, self.tracker_url or "none",
        )

    def _resolve_tracker_url(self) -> Optional[str]:
        if self.url and self.url.strip():
            return self.url
        if self._tracker_resolver is None:
            return None
        return self._tracker_resolver() or None

    @property
    def matchers(self) -> List[CompiledMatcher]:
        return list(self._matchers)

    def check(self, comment: Comment) -> Optional[Finding]:
        """Return a Finding for an undocumented warning comment, else None."""
        self._ensure_loaded()

        if is_directive_comment(comment) and SELF_CONFIG_PATTERN.search(comment.text):
            return None

        matcher = self._first_match(comment.text)
        if matcher is None:
            return None

        if self.has_issue_reference(comment.text):
            logger.debug("Warning term %r exempt by tracker reference", matcher.term)
            return None

        remainder = matcher.strip(comment.text).strip()
        return Finding(
            message=ellipsize(remainder, self.max_length),
            term=matcher.term,
            comment=comment,
        )

    def _first_match(self, text: str) -> Optional[CompiledMatcher]:
        for matcher in self._matchers:
            if matcher.test(text):
                return matcher
        return None

    def has_issue_reference(self, text: str) -> bool:
        """Check whether text contains the configured tracker reference."""
        self._ensure_loaded()
        if self._tracker_pattern is None:
            return False
        return self._tracker_pattern.search(text) is not None

    @staticmethod
    def format_message(finding: Finding) -> str:
        return f"{MESSAGE_PREFIX}{finding.message}"
