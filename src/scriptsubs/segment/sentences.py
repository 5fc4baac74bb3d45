"""Sentence segmentation."""

from __future__ import annotations

from typing import List

from uniseg.sentencebreak import sentences

from ..utils.text import has_alphanumeric


def split_sentences(text: str) -> List[str]:
    """Split text on Unicode (UAX #29) sentence boundaries.

    Spans without any alphanumeric character, such as trailing whitespace or a
    stray run of punctuation, are dropped.
    """
    if not text:
        return []
    return [sentence for sentence in sentences(text) if has_alphanumeric(sentence)]


__all__ = ["split_sentences"]
