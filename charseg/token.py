"""Tokens produced by segmentation and their kinds."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class SeparatorKind(Enum):
    """How strongly a separator splits the tokens around it.

    ``HARD`` separates tokens of different contexts (different phrases);
    ``SOFT`` separates tokens of the same context.
    """

    HARD = "hard"
    SOFT = "soft"


class TokenKind(Enum):
    """The class a token was given."""

    WORD = "word"
    STOP_WORD = "stop_word"
    HARD_SEPARATOR = "hard_separator"
    SOFT_SEPARATOR = "soft_separator"
    UNKNOWN = "unknown"

    @property
    def separator_kind(self) -> SeparatorKind | None:
        """The separator kind of this token kind, or None if it is not a separator."""
        if self is TokenKind.HARD_SEPARATOR:
            return SeparatorKind.HARD
        if self is TokenKind.SOFT_SEPARATOR:
            return SeparatorKind.SOFT
        return None

    @classmethod
    def separator(cls, kind: SeparatorKind) -> TokenKind:
        """The token kind of a separator of the given kind."""
        return cls.HARD_SEPARATOR if kind is SeparatorKind.HARD else cls.SOFT_SEPARATOR


def _utf8_len(text: str) -> int:
    return len(text.encode("utf-8"))


@dataclass
class Token:
    """A piece of text with its position in the text it was cut from.

    ``char_start``/``char_end`` and ``byte_start``/``byte_end`` delimit the
    unnormalized lemma in characters and in UTF-8 bytes. ``char_map`` gives,
    for each character of the unnormalized lemma, the number of bytes it used
    before and after normalization.
    """

    kind: TokenKind = TokenKind.UNKNOWN
    lemma: str = ""
    char_start: int = 0
    char_end: int = 0
    byte_start: int = 0
    byte_end: int = 0
    char_map: list[tuple[int, int]] | None = field(default=None)
    script: str = "Other"
    language: str | None = None

    def byte_len(self) -> int:
        """Length in UTF-8 bytes of the normalized lemma."""
        return _utf8_len(self.lemma)

    def original_byte_len(self) -> int:
        """Length in bytes of the unnormalized lemma."""
        return self.byte_end - self.byte_start

    def char_count(self) -> int:
        """Number of characters of the normalized lemma."""
        return len(self.lemma)

    def original_char_count(self) -> int:
        """Number of characters of the unnormalized lemma."""
        return self.char_end - self.char_start

    def is_word(self) -> bool:
        return self.kind is TokenKind.WORD

    def is_stopword(self) -> bool:
        return self.kind is TokenKind.STOP_WORD

    def is_separator(self) -> bool:
        return self.separator_kind() is not None

    def separator_kind(self) -> SeparatorKind | None:
        """The separator kind, or None for words, stop words and unknown tokens."""
        return self.kind.separator_kind

    def original_lengths(self, num_bytes: int) -> tuple[int, int]:
        """Characters and bytes before normalization covering ``num_bytes`` normalized bytes.

        Without a ``char_map`` the lemma itself is measured, and a character
        counts as soon as any of its bytes falls within ``num_bytes``.
        """
        if self.char_map is None:
            char_count = 0
            byte_index = 0
            for char in self.lemma:
                if byte_index >= num_bytes:
                    break
                byte_index += _utf8_len(char)
                char_count += 1
            return char_count, byte_index

        normalized_len = 0
        unnormalized_len = 0
        char_count = 0
        for unnormalized_bytes, normalized_bytes in self.char_map:
            if normalized_len >= num_bytes:
                break
            unnormalized_len += unnormalized_bytes
            normalized_len += normalized_bytes
            char_count += 1
        return char_count, unnormalized_len