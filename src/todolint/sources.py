"""Comment extraction from Python source files."""

import io
import logging
import os
import tokenize
from typing import Iterable, Iterator, List, Optional, Sequence

from todolint.models.base import Comment, CommentKind

logger = logging.getLogger(__name__)

SOURCE_SUFFIXES = (".py", ".pyi")

IGNORED_DIRS = {
    ".git",
    ".hg",
    ".tox",
    ".venv",
    "venv",
    "__pycache__",
    "node_modules",
    "build",
    "dist",
}


def extract_comments(source_text: str, source: Optional[str] = None) -> List[Comment]:
    """
    Extract ``#`` comments from Python source using the tokenizer.

    A ``#!`` comment on the first line is returned as a shebang pseudo-token.
    Tokenizing stops at the first error; comments found before it are kept.
    """
    comments: List[Comment] = []
    readline = io.StringIO(source_text).readline

    try:
        for token in tokenize.generate_tokens(readline):
            if token.type != tokenize.COMMENT:
                continue
            line, column = token.start
            if line == 1 and column == 0 and token.string.startswith("#!"):
                kind = CommentKind.SHEBANG
            else:
                kind = CommentKind.LINE
            comments.append(Comment(
                kind=kind,
                text=token.string[1:],
                line=line,
                column=column,
                source=source,
            ))
    except (tokenize.TokenError, SyntaxError) as e:
        logger.warning("Stopped reading comments from %s: %s", source or "<input>", e)

    return comments


def read_comments(path: str) -> List[Comment]:
    """Extract comments from a source file."""
    with open(path, "rb") as f:
        encoding, _ = tokenize.detect_encoding(f.readline)
    with open(path, encoding=encoding) as f:
        return extract_comments(f.read(), source=path)


def _is_ignored_dir(name: str) -> bool:
    return name in IGNORED_DIRS or name.endswith(".egg-info")


def iter_source_files(paths: Sequence[str]) -> Iterator[str]:
    """Expand files and directories into source file paths."""
    for path in paths:
        if os.path.isfile(path):
            yield path
            continue
        if not os.path.isdir(path):
            logger.warning("Skipping missing path: %s", path)
            continue

        for dirpath, dirnames, filenames in os.walk(path):
            dirnames[:] = sorted(d for d in dirnames if not _is_ignored_dir(d))
            for filename in sorted(filenames):
                if filename.endswith(SOURCE_SUFFIXES):
                    yield os.path.join(dirpath, filename)


def collect_comments(paths: Iterable[str]) -> List[Comment]:
    """Read comments from every source file under paths."""
    comments: List[Comment] = []
    for path in iter_source_files(list(paths)):
        try:
            comments.extend(read_comments(path))
        except (OSError, UnicodeDecodeError, SyntaxError) as e:
            logger.warning("Cannot read %s: %s", path, e)
    return comments
