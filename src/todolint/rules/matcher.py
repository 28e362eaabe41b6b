"""Compile configured warning terms into comment matchers.

Each term becomes one case-insensitive pattern. Word boundaries are only
required on a side of the term that is itself a word character, so "todo"
does not match inside "mastodon" while "FIX!" still matches "FIX! blah".
A colon directly after the term is consumed as part of the match.
"""

import re
from dataclasses import dataclass
from typing import List, Match, Optional, Pattern, Sequence, Union

from todolint.errors import ConfigurationError
from todolint.models.base import MatchLocation

WORD_BOUNDARY = r"\b"

_LEADING_WORD_CHAR = re.compile(r"^\w")
_TRAILING_WORD_CHAR = re.compile(r"\w$")


@dataclass(frozen=True)
class CompiledMatcher:
    """A compiled warning term."""
    term: str
    location: MatchLocation
    pattern: Pattern[str]

    def search(self, text: str) -> Optional[Match[str]]:
        return self.pattern.search(text)

    def test(self, text: str) -> bool:
        return self.pattern.search(text) is not None

    def strip(self, text: str) -> str:
        """Remove the first match from text."""
        return self.pattern.sub("", text, count=1)


def coerce_location(value: Union[str, MatchLocation, None]) -> MatchLocation:
    """Turn a configured location into a MatchLocation."""
    if value is None:
        return MatchLocation.START
    if isinstance(value, MatchLocation):
        return value
    try:
        return MatchLocation(value)
    except ValueError:
        valid = ", ".join(repr(loc.value) for loc in MatchLocation)
        raise ConfigurationError(
            f"Invalid location {value!r}, expected one of {valid}"
        ) from None


def _suffix(term: str) -> str:
    boundary = WORD_BOUNDARY if _TRAILING_WORD_CHAR.search(term) else ""
    return boundary + ":?"


def _prefix(term: str, location: MatchLocation) -> str:
    if location is MatchLocation.START:
        # Leading whitespace already delimits the term
        return r"^\s*"
    if _LEADING_WORD_CHAR.search(term):
        return WORD_BOUNDARY
    return ""


def compile_term(term: str, location: Union[str, MatchLocation] = MatchLocation.START) -> CompiledMatcher:
    """
    Compile a single warning term.

    For ``start`` the pattern is ``^\\s*TERM\\b:?``. For ``anywhere`` it is
    ``\\bTERM\\b:?|\\bTERM\\b``, where the second alternative uses the term
    unescaped.

    Raises:
        ConfigurationError: If the term is not a string or is empty, or if
            the unescaped alternative is not a valid pattern.
    """
    location = coerce_location(location)
    if not isinstance(term, str):
        raise ConfigurationError(f"Warning terms must be strings, got {type(term).__name__}")
    if not term:
        raise ConfigurationError("Warning terms cannot be empty")

    source = _prefix(term, location) + re.escape(term) + _suffix(term)
    if location is MatchLocation.ANYWHERE:
        source += "|" + WORD_BOUNDARY + term + WORD_BOUNDARY

    try:
        pattern = re.compile(source, re.IGNORECASE)
    except re.error as e:
        raise ConfigurationError(f"Cannot compile warning term {term!r}: {e}") from e

    return CompiledMatcher(term=term, location=location, pattern=pattern)


def build_matchers(
    terms: Sequence[str],
    location: Union[str, MatchLocation] = MatchLocation.START,
) -> List[CompiledMatcher]:
    """Compile every term, preserving configuration order."""
    if isinstance(terms, str):
        raise ConfigurationError("Warning terms must be a sequence of strings, not a string")
    location = coerce_location(location)
    return [compile_term(term, location) for term in terms]
