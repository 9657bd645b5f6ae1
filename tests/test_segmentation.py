import pytest

from charseg.matcher import PatternMatcher
from charseg.segmentation import SegmenterOption, segment, segment_str
from charseg.segmenters import ArabicSegmenter
from charseg.separators import DEFAULT_SEPARATORS
from charseg.token import TokenKind

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
    "ال", "سلام", " ", "عليكم", "،", " ", "كيف", " ", "حالكم", "؟", " ", "(",
    "أتمنى", " ", "أن", " ", "تكونوا", " ", "بأفضل", " ", "ٱل", "أحوال", ")",
]

DOC_TEXT = "The quick (\"brown\") fox can't jump 32.3 feet, right? Brr, it's 29.3°F!"


def test_latin_segmentation():
    assert list(segment_str(LATIN_TEXT)) == LATIN_SEGMENTED


def test_arabic_segmentation():
    assert list(segment_str(ARABIC_TEXT, segmenter=ArabicSegmenter())) == ARABIC_SEGMENTED


def test_first_segments_of_doc_text():
    segments = segment_str(DOC_TEXT)
    assert [next(segments), next(segments), next(segments)] == ["The", " ", "quick"]


def test_custom_separators():
    option = SegmenterOption(PatternMatcher([" ", ", ", ". ", "?", "!"]))
    assert list(segment_str(DOC_TEXT, option)) == [
        "The", " ", "quick", " ", "(\"brown\")", " ", "fox", " ", "can't", " ", "jump", " ",
        "32.3", " ", "feet", ", ", "right", "?", " ", "Brr", ", ", "it's", " ", "29.3°F", "!",
    ]


def test_words_dict_before_default_separators():
    words = ["J. R. R.", "Dr.", "J. K."]
    option = SegmenterOption(PatternMatcher([*words, *DEFAULT_SEPARATORS]))
    text = "J. R. R. Tolkien. J. K. Rowling. Dr. Seuss"
    assert list(segment_str(text, option)) == [
        "J. R. R.", " ", "Tolkien", ". ", "J. K.", " ", "Rowling", ". ", "Dr.", " ", "Seuss",
    ]


def test_empty_text_yields_nothing():
    assert list(segment_str("")) == []
    assert list(segment("")) == []


def test_segment_tokens_are_unclassified():
    tokens = list(segment(DOC_TEXT))
    assert [t.lemma for t in tokens[:3]] == ["The", " ", "quick"]
    assert all(t.kind is TokenKind.UNKNOWN for t in tokens)


def test_segment_positions_with_multibyte_chars():
    tokens = list(segment("café au"))
    assert [(t.lemma, t.char_start, t.char_end, t.byte_start, t.byte_end) for t in tokens] == [
        ("café", 0, 4, 0, 5),
        (" ", 4, 5, 5, 6),
        ("au", 5, 7, 6, 8),
    ]


@pytest.mark.parametrize("text", [LATIN_TEXT, ARABIC_TEXT, DOC_TEXT])
def test_tokens_cover_text_contiguously(text):
    tokens = list(segment(text))
    assert "".join(t.lemma for t in tokens) == text
    assert tokens[0].char_start == 0 and tokens[0].byte_start == 0
    for previous, current in zip(tokens, tokens[1:]):
        assert previous.char_end == current.char_start
        assert previous.byte_end == current.byte_start
    assert tokens[-1].char_end == len(text)
    assert tokens[-1].byte_end == len(text.encode("utf-8"))


def test_segment_uses_given_segmenter():
    lemmas = [t.lemma for t in segment(ARABIC_TEXT, segmenter=ArabicSegmenter())]
    assert lemmas == ARABIC_SEGMENTED