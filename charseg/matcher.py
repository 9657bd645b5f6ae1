"""Leftmost-longest multi-pattern matching and splitting of text around matches."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from enum import Enum

_END = None  # trie key marking a complete pattern; never a character


class MatchType(Enum):
    """Whether a piece of split text is a pattern match or the text between matches."""

    INTERLEAVE = "interleave"
    MATCH = "match"


@dataclass(frozen=True)
class Match:
    """A pattern found in a text, delimited by character indices."""

    start: int
    end: int
    pattern: int


class PatternMatcher:
    """Finds non-overlapping occurrences of a set of patterns.

    Matching is leftmost-longest: the earliest position where any pattern
    occurs wins, and among the patterns found there the longest one is
    taken. Empty patterns never match.
    """

    def __init__(self, patterns: Iterable[str]) -> None:
        self.patterns: tuple[str, ...] = tuple(patterns)
        self._root: dict = {}
        for index, pattern in enumerate(self.patterns):
            if not pattern:
                continue
            node = self._root
            for char in pattern:
                node = node.setdefault(char, {})
            node.setdefault(_END, index)

    def _longest_at(self, text: str, start: int) -> Match | None:
        node = self._root
        found = None
        for position in range(start, len(text)):
            node = node.get(text[position])
            if node is None:
                break
            if _END in node:
                found = Match(start, position + 1, node[_END])
        return found

    def find_iter(self, text: str) -> Iterator[Match]:
        """Yield the matches in ``text`` from left to right."""
        position = 0
        while position < len(text):
            found = self._longest_at(text, position)
            if found is None:
                position += 1
                continue
            yield found
            position = found.end


def split_on_matches(text: str, matcher: PatternMatcher) -> Iterator[tuple[str, MatchType]]:
    """Split ``text`` into matches and the non-empty stretches between them."""
    position = 0
    for found in matcher.find_iter(text):
        if position < found.start:
            yield text[position:found.start], MatchType.INTERLEAVE
        yield text[found.start:found.end], MatchType.MATCH
        position = found.end
    if position < len(text):
        yield text[position:], MatchType.INTERLEAVE