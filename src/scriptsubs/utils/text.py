"""Utility helpers for text processing."""

from __future__ import annotations

import regex

_GRAPHEME_RE = regex.compile(r"\X")


def has_alphabetic(segment: str) -> bool:
    return any(ch.isalpha() for ch in segment)


def has_alphanumeric(segment: str) -> bool:
    return any(ch.isalnum() for ch in segment)


def spoken_length(text: str) -> int:
    """Count the grapheme clusters that would be voiced.

    A cluster counts when its base character is alphanumeric, so a letter with
    combining accents is one unit while spaces and punctuation are ignored.
    """
    return sum(1 for cluster in _GRAPHEME_RE.finditer(text) if cluster.group()[0].isalnum())


__all__ = ["has_alphabetic", "has_alphanumeric", "spoken_length"]
