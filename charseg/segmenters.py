"""Script specialised segmenters that split a piece of text into words."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator, Mapping

from charseg.camel_case import split_camel_case_bounds

_END = None  # trie key holding the output of a complete word


class Segmenter(ABC):
    """Splits a piece of text, free of separators, into words."""

    @abstractmethod
    def segment_str(self, text: str) -> Iterator[str]:
        """Yield the segments of ``text`` in order."""


class ArabicSegmenter(Segmenter):
    """Arabic segmenter.

    A word starting with the article (ال and its variants أل, إل, آل, ٱل)
    is split into the article and the rest of the word, so that "الشجرة"
    gives "ال" and "شجرة".
    """

    _ARTICLES = ("ال", "أل", "إل", "آل", "ٱل")

    def segment_str(self, text: str) -> Iterator[str]:
        if len(text.encode("utf-8")) > 2 and text.startswith(self._ARTICLES):
            yield text[:2]
            yield text[2:]
        else:
            yield text


class LatinSegmenter(Segmenter):
    """Latin segmenter, splitting words on camelCase boundaries."""

    def segment_str(self, text: str) -> Iterator[str]:
        yield from split_camel_case_bounds(text)


class DummySegmenter(Segmenter):
    """Example segmenter splitting after each space, keeping the space."""

    def segment_str(self, text: str) -> Iterator[str]:
        start = 0
        while start < len(text):
            space = text.find(" ", start)
            end = len(text) if space == -1 else space + 1
            yield text[start:end]
            start = end


class _WordTrie:
    """Prefix tree over a dictionary of words, each with an integer output."""

    def __init__(self, words: Mapping[str, int] | Iterable[str]) -> None:
        self.root: dict = {}
        items = words.items() if isinstance(words, Mapping) else ((word, 0) for word in words)
        for word, output in items:
            if not word:
                continue
            node = self.root
            for char in word:
                node = node.setdefault(char, {})
            node[_END] = output

    def longest_prefix(self, text: str, start: int = 0) -> tuple[int, int] | None:
        node = self.root
        last = None
        for position in range(start, len(text)):
            node = node.get(text[position])
            if node is None:
                break
            if _END in node:
                last = (node[_END], position + 1 - start)
        return last


def find_longest_prefix(
    words: Mapping[str, int] | Iterable[str], value: str
) -> tuple[int, int] | None:
    """Find the longest word of ``words`` that is a prefix of ``value``.

    ``words`` is a mapping from word to output value, or a collection of
    words whose outputs are all 0. Returns ``(output, length)`` with the
    length in characters, or None when no word is a prefix.
    """
    trie = words if isinstance(words, _WordTrie) else _WordTrie(words)
    return trie.longest_prefix(value)


class FstSegmenter(Segmenter):
    """Dictionary segmenter taking the longest known word at each position.

    Where no word of the dictionary matches, the next character alone
    becomes a segment.
    """

    def __init__(self, words: Mapping[str, int] | Iterable[str]) -> None:
        self._trie = _WordTrie(words)

    def segment_str(self, text: str) -> Iterator[str]:
        position = 0
        while position < len(text):
            found = self._trie.longest_prefix(text, position)
            length = found[1] if found is not None else 1
            yield text[position:position + length]
            position += length