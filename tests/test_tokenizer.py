import pytest

from charseg.segmenters import ArabicSegmenter
from charseg.tokenizer import TokenizerBuilder

ORIG = "The quick (\"brown\") fox can't jump 32.3 feet, right? Brr, it's 29.3°F!"


def test_default_builder_last_segment():
    text = "Hello world! Pleased to see you."
    tokenizer = TokenizerBuilder().build()
    tokens = list(tokenizer.segment(text))
    assert tokens[-1].lemma == "."


def test_default_segment_str_start():
    tokenizer = TokenizerBuilder().build()
    assert list(tokenizer.segment_str(ORIG))[:3] == ["The", " ", "quick"]


def test_custom_separators():
    tokenizer = TokenizerBuilder().separators([" ", ", ", ". ", "?", "!"]).build()
    assert list(tokenizer.segment_str(ORIG)) == [
        "The", " ", "quick", " ", "(\"brown\")", " ", "fox", " ", "can't", " ", "jump",
        " ", "32.3", " ", "feet", ", ", "right", "?", " ", "Brr", ", ", "it's", " ",
        "29.3°F", "!",
    ]


def test_words_dict():
    tokenizer = TokenizerBuilder().words_dict(["J. R. R.", "Dr.", "J. K."]).build()
    text = "J. R. R. Tolkien. J. K. Rowling. Dr. Seuss"
    assert list(tokenizer.segment_str(text)) == [
        "J. R. R.", " ", "Tolkien", ". ", "J. K.", " ", "Rowling", ". ", "Dr.", " ", "Seuss",
    ]


def test_words_dict_with_custom_separators():
    tokenizer = TokenizerBuilder().separators([" "]).words_dict(["New York"]).build()
    assert list(tokenizer.segment_str("New York, ok")) == ["New York", ",", " ", "ok"]


def test_custom_segmenter():
    tokenizer = TokenizerBuilder().segmenter(ArabicSegmenter()).build()
    assert list(tokenizer.segment_str("السلام عليكم")) == ["ال", "سلام", " ", "عليكم"]


def test_builder_reused_keeps_settings():
    builder = TokenizerBuilder().separators([" "])
    first = builder.build()
    second = builder.build()
    assert list(first.segment_str("a,b c")) == list(second.segment_str("a,b c")) == ["a,b", " ", "c"]


def test_token_positions():
    tokenizer = TokenizerBuilder().build()
    tokens = list(tokenizer.segment("héllo world"))
    assert [t.lemma for t in tokens] == ["héllo", " ", "world"]
    assert [(t.char_start, t.char_end) for t in tokens] == [(0, 5), (5, 6), (6, 11)]
    assert [(t.byte_start, t.byte_end) for t in tokens] == [(0, 6), (6, 7), (7, 12)]


@pytest.mark.parametrize(
    "text",
    ["", "a", "Hello, world!", "camelCase kebab-case", "السلام عليكم", "人人生而自由", "  ..  "],
)
def test_token_count_not_above_byte_len(text):
    tokens = list(TokenizerBuilder().build().segment(text))
    assert len(tokens) <= len(text.encode("utf-8"))
    assert "".join(t.lemma for t in tokens) == text