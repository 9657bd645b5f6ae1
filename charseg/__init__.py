"""Segmentation of text into words and separators, and CJK ideograph variant tables."""

__version__ = "0.1.0"

__all__ = [
    "camel_case",
    "kvariants",
    "matcher",
    "segmentation",
    "segmenters",
    "separators",
    "token",
    "tokenizer",
]