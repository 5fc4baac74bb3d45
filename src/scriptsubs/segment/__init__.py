"""Segmentation helpers."""

from .chunker import Chunker, SubtitleChunk, adjust_last_subtitle, word_offsets
from .sentences import split_sentences

__all__ = [
    "Chunker",
    "SubtitleChunk",
    "adjust_last_subtitle",
    "word_offsets",
    "split_sentences",
]
