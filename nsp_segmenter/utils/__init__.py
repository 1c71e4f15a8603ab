"""Utility functions."""

from .text_normalizer import normalize_chinese_text, split_clauses

__all__ = [
    "normalize_chinese_text",
    "split_clauses",
]
