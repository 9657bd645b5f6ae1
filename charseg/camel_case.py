"""Splitting of words on camelCase boundaries."""

from __future__ import annotations

import unicodedata
from collections.abc import Iterator


def _is_lowercase(char: str) -> bool:
    return char.islower()


def _is_letter_lowercase(char: str) -> bool:
    return unicodedata.category(char) == "Ll"


def _is_letter_uppercase(char: str) -> bool:
    return unicodedata.category(char) == "Lu"


def _is_mark_nonspacing(char: str) -> bool:
    return unicodedata.category(char) == "Mn"


def split_camel_case_bounds(text: str) -> Iterator[str]:
    """Yield the parts of ``text`` split on camelCase boundaries.

    A boundary is a lowercase letter directly followed by an uppercase
    letter, with any number of non-spacing marks allowed in between:
    "camelCase" gives "camel" and "Case".
    """
    if not text:
        return
    last_was_lowercase = _is_lowercase(text[0])
    start = 0
    for index in range(1, len(text)):
        char = text[index]
        if _is_mark_nonspacing(char):
            continue
        if last_was_lowercase and _is_letter_uppercase(char):
            yield text[start:index]
            start = index
            continue
        last_was_lowercase = _is_letter_lowercase(char)
    yield text[start:]