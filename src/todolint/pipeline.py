"""Comment linting pipeline orchestrator."""

import logging
import time
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence, Union

from todolint.config import get_settings
from todolint.manifest import ManifestTrackerResolver
from todolint.models.base import Comment, CommentKind, Finding, MatchLocation
from todolint.rules.documented_todos import UndocumentedTodoRule
from todolint.sources import collect_comments, extract_comments

logger = logging.getLogger(__name__)


@dataclass
class Diagnostic:
    """A reportable finding, located at its originating comment."""
    message: str
    term: str
    source: Optional[str] = None
    line: Optional[int] = None
    column: Optional[int] = None

    @classmethod
    def from_finding(cls, finding: Finding) -> "Diagnostic":
        return cls(
            message=UndocumentedTodoRule.format_message(finding),
            term=finding.term,
            source=finding.comment.source,
            line=finding.comment.line,
            column=finding.comment.column,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "message": self.message,
            "term": self.term,
            "source": self.source,
            "line": self.line,
            "column": self.column,
        }

    def __str__(self) -> str:
        location = self.source or "<input>"
        if self.line is not None:
            location += f":{self.line}"
            if self.column is not None:
                location += f":{self.column}"
        return f"{location}: {self.message}"


@dataclass
class LintReport:
    """Aggregated diagnostics for one analysis run."""
    diagnostics: List[Diagnostic]
    comments_checked: int
    processing_time_ms: float
    metadata: Dict[str, Any] = field(default_factory=dict)

    @property
    def flagged(self) -> bool:
        return bool(self.diagnostics)

    @property
    def summary(self) -> str:
        if not self.diagnostics:
            return f"No undocumented warning comments in {self.comments_checked} comments."
        return (
            f"Found {len(self.diagnostics)} undocumented warning comments "
            f"in {self.comments_checked} comments."
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "flagged": self.flagged,
            "diagnostics": [d.to_dict() for d in self.diagnostics],
            "comments_checked": self.comments_checked,
            "summary": self.summary,
            "processing_time_ms": round(self.processing_time_ms, 2),
            "metadata": self.metadata,
        }


class LintPipeline:
    """
    Runs the undocumented-TODO rule over comments supplied by a host.

    Options left as None are taken from Settings. The rule is compiled
    immediately, so invalid options raise ConfigurationError here rather
    than on the first comment.
    """

    def __init__(
        self,
        terms: Optional[Sequence[str]] = None,
        location: Union[str, MatchLocation, None] = None,
        url: Optional[str] = None,
        discover_url: Optional[bool] = None,
        start_dir: Optional[str] = None,
    ):
        settings = get_settings()

        self.discover_url = settings.discover_url if discover_url is None else discover_url
        resolver = ManifestTrackerResolver(start_dir) if self.discover_url else None

        self.rule = UndocumentedTodoRule(
            terms=settings.terms if terms is None else terms,
            location=settings.location if location is None else location,
            url=url if url is not None else settings.url,
            tracker_resolver=resolver,
            max_length=settings.max_message_length,
        )
        self.rule.load()

    @property
    def tracker_url(self) -> Optional[str]:
        return self.rule.tracker_url

    def analyze(self, comments: Sequence[Comment]) -> LintReport:
        """
        Classify comments and collect diagnostics.

        Args:
            comments: Comments extracted by the host, in source order

        Returns:
            LintReport with one diagnostic per offending comment
        """
        start_time = time.perf_counter()

        checked = [c for c in comments if c.kind != CommentKind.SHEBANG]
        findings = self.rule.check_batch(checked)
        diagnostics = [Diagnostic.from_finding(f) for f in findings]

        processing_time = (time.perf_counter() - start_time) * 1000
        logger.debug("Checked %d comments, %d flagged", len(checked), len(diagnostics))

        return LintReport(
            diagnostics=diagnostics,
            comments_checked=len(checked),
            processing_time_ms=processing_time,
            metadata={
                "rule": self.rule.name,
                "location": self.rule.location.value,
                "terms": list(self.rule.terms),
                "tracker_url": self.tracker_url,
            },
        )

    def analyze_text(self, text: str, kind: CommentKind = CommentKind.LINE) -> LintReport:
        """Analyze a single comment body."""
        return self.analyze([Comment(kind=kind, text=text)])

    def analyze_source(self, source_text: str, source: Optional[str] = None) -> LintReport:
        """Analyze every comment in a Python source string."""
        return self.analyze(extract_comments(source_text, source=source))

    def analyze_paths(self, paths: Sequence[str]) -> LintReport:
        """Analyze every Python source file under paths."""
        return self.analyze(collect_comments(paths))
