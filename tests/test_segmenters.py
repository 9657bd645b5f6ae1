import pytest

from charseg.matcher import MatchType, PatternMatcher, split_on_matches
from charseg.segmenters import (
    ArabicSegmenter,
    DummySegmenter,
    FstSegmenter,
    LatinSegmenter,
    Segmenter,
    find_longest_prefix,
)
from charseg.separators import DEFAULT_SEPARATORS

SEPARATORS = PatternMatcher(DEFAULT_SEPARATORS)


def _segment(segmenter, text):
    result = []
    for piece, kind in split_on_matches(text, SEPARATORS):
        if kind is MatchType.MATCH:
            result.append(piece)
        else:
            result.extend(segmenter.segment_str(piece))
    return result


LATIN_TEXT = (
    "The quick (\"brown\") fox can’t jump 32.3 feet, right? Brr, it's 29.3°F! "
    "camelCase kebab-case snake_case"
)
LATIN_SEGMENTED = [
    "The", " ", "quick", " ", "(", "\"", "brown", "\"", ")", " ", "fox", " ", "can", "’", "t",
    " ", "jump", " ", "32", ".", "3", " ", "feet", ", ", "right", "?", " ", "Brr", ", ", "it",
    "'", "s", " ", "29", ".", "3°F", "!", " ", "camel", "Case", " ", "kebab", "-", "case", " ",
    "snake", "_", "case",
]

ARABIC_TEXT = "السلام عليكم، كيف حالكم؟ (أتمنى أن تكونوا بأفضل ٱلأحوال)"
ARABIC_SEGMENTED = [
    "ال", "سلام", " ", "عليكم", "،", " ", "كيف", " ", "حالكم", "؟", " ", "(", "أتمنى", " ",
    "أن", " ", "تكونوا", " ", "بأفضل", " ", "ٱل", "أحوال", ")",
]


def test_latin_segmenter_segment_str():
    assert _segment(LatinSegmenter(), LATIN_TEXT) == LATIN_SEGMENTED


def test_arabic_segmenter_segment_str():
    assert _segment(ArabicSegmenter(), ARABIC_TEXT) == ARABIC_SEGMENTED


def test_arabic_word_without_article_is_kept():
    assert list(ArabicSegmenter().segment_str("كيف")) == ["كيف"]


def test_arabic_article_alone_leaves_empty_rest():
    assert list(ArabicSegmenter().segment_str("ال")) == ["ال", ""]


def test_latin_camel_case():
    assert list(LatinSegmenter().segment_str("camelCase")) == ["camel", "Case"]


def test_dummy_splits_after_spaces():
    assert list(DummySegmenter().segment_str("Hello World!")) == ["Hello ", "World!"]


def test_dummy_empty_text():
    assert list(DummySegmenter().segment_str("")) == []


def test_segmenter_is_abstract():
    with pytest.raises(TypeError):
        Segmenter()


@pytest.mark.parametrize(
    "segmenter",
    [ArabicSegmenter(), LatinSegmenter(), DummySegmenter(), FstSegmenter({"ab", "abc"})],
)
@pytest.mark.parametrize(
    "text", ["", "a", "ال", "abcabd ab", "MixedCaseText\u0301X", "人人生而自由", "  "]
)
def test_segments_rebuild_text(segmenter, text):
    assert "".join(segmenter.segment_str(text)) == text


def test_fst_segmenter_takes_longest_word():
    segmenter = FstSegmenter({"ab", "abc", "c"})
    assert list(segmenter.segment_str("abcd")) == ["abc", "d"]


def test_fst_segmenter_falls_back_to_single_characters():
    segmenter = FstSegmenter(["xyz"])
    assert list(segmenter.segment_str("abc")) == ["a", "b", "c"]


def test_find_longest_prefix_with_outputs():
    words = {"สระ": 1, "สระผม": 2}
    assert find_longest_prefix(words, "สระผมที่") == (2, 5)


def test_find_longest_prefix_without_match():
    assert find_longest_prefix({"abc"}, "abd") is None


def test_find_longest_prefix_keeps_last_full_word():
    assert find_longest_prefix(["a", "abcd"], "abcx") == (0, 1)