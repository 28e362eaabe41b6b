"""Base rule interface and the comment/finding data model."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional


class MatchLocation(str, Enum):
    """Where a warning term has to appear inside a comment."""
    START = "start"
    ANYWHERE = "anywhere"


class CommentKind(str, Enum):
    """Kinds of comment tokens a host can hand over."""
    LINE = "line"
    BLOCK = "block"
    SHEBANG = "shebang"  # Pseudo-token, never classified


@dataclass(frozen=True)
class Comment:
    """A single comment extracted by the host, without its delimiters."""
    kind: CommentKind
    text: str
    line: Optional[int] = None
    column: Optional[int] = None
    source: Optional[str] = None


@dataclass(frozen=True)
class Finding:
    """An undocumented warning comment."""
    message: str
    term: str
    comment: Comment

    def to_dict(self) -> Dict[str, Any]:
        return {
            "message": self.message,
            "term": self.term,
            "kind": self.comment.kind.value,
            "line": self.comment.line,
            "column": self.comment.column,
            "source": self.comment.source,
        }


class BaseRule(ABC):
    """Abstract base class for all comment rules."""

    name: str = "base"
    version: str = "0.0.0"

    def __init__(self) -> None:
        self._loaded = False

    @property
    def is_loaded(self) -> bool:
        return self._loaded

    @abstractmethod
    def load(self) -> None:
        """Prepare the rule. Called lazily on first check."""
        pass

    @abstractmethod
    def check(self, comment: Comment) -> Optional[Finding]:
        """Classify a single comment."""
        pass

    def check_batch(self, comments: List[Comment]) -> List[Finding]:
        """Classify multiple comments, keeping only findings."""
        findings = []
        for comment in comments:
            finding = self.check(comment)
            if finding is not None:
                findings.append(finding)
        return findings

    def _ensure_loaded(self) -> None:
        """Ensure patterns are compiled before checking."""
        if not self.is_loaded:
            self.load()
