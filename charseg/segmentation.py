"""Splitting of a text into segments and position-tagged tokens.

A text is first split on separators (or on any configured list of
patterns). Separators are kept as segments of their own. The stretches
of text between them are handed to a script segmenter, which splits
them further into words.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from functools import lru_cache

from charseg.matcher import MatchType, PatternMatcher, split_on_matches
from charseg.segmenters import LatinSegmenter, Segmenter
from charseg.separators import DEFAULT_SEPARATORS
from charseg.token import Token

DEFAULT_SEGMENTER: Segmenter = LatinSegmenter()


@lru_cache(maxsize=1)
def default_separator_matcher() -> PatternMatcher:
    """The matcher over ``DEFAULT_SEPARATORS``, built once."""
    return PatternMatcher(DEFAULT_SEPARATORS)


@dataclass
class SegmenterOption:
    """Options of segmentation.

    ``matcher`` finds the patterns that are cut out of the text before
    the script segmenter runs; when it is None the default separators are
    used.
    """

    matcher: PatternMatcher | None = None

    def effective_matcher(self) -> PatternMatcher:
        """The configured matcher, or the default separator matcher."""
        return self.matcher if self.matcher is not None else default_separator_matcher()


def segment_str(
    text: str,
    option: SegmenterOption | None = None,
    segmenter: Segmenter | None = None,
) -> Iterator[str]:
    """Yield the segments of ``text``.

    Pattern matches are yielded whole; the text between them is split by
    ``segmenter`` (the Latin segmenter by default).
    """
    option = option if option is not None else SegmenterOption()
    segmenter = segmenter if segmenter is not None else DEFAULT_SEGMENTER
    for piece, match_type in split_on_matches(text, option.effective_matcher()):
        if match_type is MatchType.MATCH:
            yield piece
        else:
            yield from segmenter.segment_str(piece)


def segment(
    text: str,
    option: SegmenterOption | None = None,
    segmenter: Segmenter | None = None,
) -> Iterator[Token]:
    """Yield unclassified tokens for the segments of ``text``.

    Each token carries its character and UTF-8 byte positions in ``text``.
    """
    char_index = 0
    byte_index = 0
    for lemma in segment_str(text, option, segmenter):
        char_start, byte_start = char_index, byte_index
        char_index += len(lemma)
        byte_index += len(lemma.encode("utf-8"))
        yield Token(
            lemma=lemma,
            char_start=char_start,
            char_end=char_index,
            byte_start=byte_start,
            byte_end=byte_index,
        )