"""Variant relations between CJK ideographs, read from kVariants tables.

Each line of a table is tab separated, for example::

    㨲 (U+3A32)	wrong!	㩍 (U+3A4D)
    铿 (U+94FF)	simp	鏗 (U+93D7)

Only the first character of the first and last columns is kept.
"""

from __future__ import annotations

import os
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum


class KVariantClass(Enum):
    """Kind of relation between a source and a destination ideograph."""

    WRONG = "wrong!"
    SEMANTIC_VARIANT = "sem"
    SIMPLIFIED = "simp"
    OLD = "old"
    EQUAL = "="


@dataclass(frozen=True)
class KVariant:
    """One variant relation."""

    source_ideograph: str
    classification: KVariantClass
    destination_ideograph: str


def parse_kvariants(lines: Iterable[str]) -> dict[str, KVariant]:
    """Parse tab-separated lines into a mapping from source ideograph to variant.

    Blank lines are ignored. Raises ValueError on a malformed line, an
    unknown relation, or a source ideograph given more than once.
    """
    variants: dict[str, KVariant] = {}
    for number, line in enumerate(lines, start=1):
        line = line.rstrip("\r\n")
        if not line.strip():
            continue
        fields = [part.strip() for part in line.split("\t")]
        if len(fields) != 3 or not fields[0] or not fields[2]:
            raise ValueError(f"line {number}: expected three tab separated fields: {line!r}")
        lhs, relation, rhs = fields
        try:
            classification = KVariantClass(relation)
        except ValueError:
            raise ValueError(f"line {number}: unexpected classification {relation!r}") from None
        source = lhs[0]
        if source in variants:
            raise ValueError(
                f"line {number}: source ideograph {source!r} maps to several destinations"
            )
        variants[source] = KVariant(source, classification, rhs[0])
    return variants


def load_kvariants(path: str | os.PathLike[str]) -> dict[str, KVariant]:
    """Read a kVariants table from the UTF-8 file at ``path``."""
    with open(path, encoding="utf-8") as handle:
        return parse_kvariants(handle)