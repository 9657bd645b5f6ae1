"""Configurable tokenizer: custom separators, custom words and segmenter choice."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from charseg.matcher import PatternMatcher
from charseg.segmentation import SegmenterOption, segment, segment_str
from charseg.segmenters import Segmenter
from charseg.separators import DEFAULT_SEPARATORS
from charseg.token import Token


@dataclass
class Tokenizer:
    """Segments texts with a fixed configuration.

    Build one with :class:`TokenizerBuilder`.
    """

    option: SegmenterOption = field(default_factory=SegmenterOption)
    segmenter_choice: Segmenter | None = None

    def segment(self, text: str) -> Iterator[Token]:
        """Yield unclassified tokens for the segments of ``text``."""
        return segment(text, self.option, self.segmenter_choice)

    def segment_str(self, text: str) -> Iterator[str]:
        """Yield the segments of ``text`` as strings."""
        return segment_str(text, self.option, self.segmenter_choice)


class TokenizerBuilder:
    """Collects settings and builds a :class:`Tokenizer`.

    The setters return the builder so that calls can be chained.
    """

    def __init__(self) -> None:
        self._separators: tuple[str, ...] | None = None
        self._words: tuple[str, ...] | None = None
        self._segmenter: Segmenter | None = None

    def separators(self, separators: Iterable[str]) -> TokenizerBuilder:
        """Use ``separators`` instead of the default separators."""
        self._separators = tuple(separators)
        return self

    def words_dict(self, words: Iterable[str]) -> TokenizerBuilder:
        """Cut ``words`` out of the text before any script segmentation.

        Where longer than a separator found at the same place, a word wins.
        """
        self._words = tuple(words)
        return self

    def segmenter(self, segmenter: Segmenter) -> TokenizerBuilder:
        """Use ``segmenter`` for the text between separators."""
        self._segmenter = segmenter
        return self

    def build(self) -> Tokenizer:
        """Build a tokenizer from the current settings."""
        if self._words is not None:
            separators = self._separators if self._separators is not None else DEFAULT_SEPARATORS
            matcher: PatternMatcher | None = PatternMatcher(self._words + separators)
        elif self._separators is not None:
            matcher = PatternMatcher(self._separators)
        else:
            matcher = None
        return Tokenizer(SegmenterOption(matcher), self._segmenter)