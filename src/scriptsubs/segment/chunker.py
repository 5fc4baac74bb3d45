"""Chunking strategy for turning sentences into subtitles."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence

from uniseg.wordbreak import words

from ..logging import get_logger
from ..utils.text import has_alphabetic
from .sentences import split_sentences

LOGGER = get_logger("segment.chunker")


@dataclass(slots=True)
class SubtitleChunk:
    """Subtitle text together with where it came from."""

    text: str
    sentence_index: int
    chunk_index: int
    position: int


def word_offsets(sentence: str) -> List[int]:
    """Return the offset of every word that contains a letter.

    Word boundaries follow UAX #29; punctuation and whitespace segments are not
    counted but stay part of the surrounding subtitle text.
    """
    offsets: List[int] = []
    cursor = 0
    for segment in words(sentence):
        if has_alphabetic(segment):
            offsets.append(cursor)
        cursor += len(segment)
    return offsets


def adjust_last_subtitle(subtitles: Sequence[str]) -> List[str]:
    """Merge the last subtitle into the one before it."""
    adjusted = list(subtitles)
    if len(adjusted) < 2:
        return adjusted
    last = adjusted.pop()
    adjusted[-1] = f"{adjusted[-1]} {last}"
    return adjusted


class Chunker:
    """Split sentences into subtitles of a bounded number of words."""

    def __init__(self, max_words: int = 10, min_words: int = 4) -> None:
        if max_words < 1:
            raise ValueError("Maximum words per subtitle must be positive")
        if min_words < 1:
            raise ValueError("Minimum words per subtitle must be positive")
        if min_words > max_words:
            raise ValueError("Minimum words per subtitle cannot exceed the maximum")
        self._max_words = max_words
        self._min_words = min_words

    def split(self, sentence: str) -> List[str]:
        offsets = word_offsets(sentence)
        word_count = len(offsets)
        if word_count == 0:
            return []

        subtitles: List[str] = []
        cut = 0
        start = 0
        while (cut + 1) * self._max_words < word_count:
            end = offsets[(cut + 1) * self._max_words]
            subtitles.append(sentence[start:end].strip())
            start = end
            cut += 1
        subtitles.append(sentence[start:].strip())

        # A trailing subtitle of only a few words reads poorly on its own.
        remainder = word_count % self._max_words
        if remainder and remainder < self._min_words:
            subtitles = adjust_last_subtitle(subtitles)
        return subtitles

    def chunk_text(self, text: str) -> List[SubtitleChunk]:
        """Segment text into sentences and split each one into subtitles.

        A sentence without words (``"42."``) gets no subtitle of its own. Its
        text is appended to the previous subtitle, or prefixed to the next one
        when nothing precedes it, so every voiced character stays on screen.
        """
        chunks: List[SubtitleChunk] = []
        pending = ""
        pending_index = 0
        for sentence_index, sentence in enumerate(split_sentences(text)):
            subtitles = self.split(sentence)
            if not subtitles:
                stray = sentence.strip()
                LOGGER.debug("Sentence %d has no words; attaching %r to a neighbour", sentence_index, stray)
                if chunks:
                    chunks[-1].text = f"{chunks[-1].text} {stray}"
                else:
                    pending = f"{pending} {stray}".strip()
                    pending_index = sentence_index
                continue
            if pending:
                subtitles[0] = f"{pending} {subtitles[0]}"
                pending = ""
            for chunk_index, subtitle in enumerate(subtitles):
                chunks.append(
                    SubtitleChunk(
                        text=subtitle,
                        sentence_index=sentence_index,
                        chunk_index=chunk_index,
                        position=len(chunks) + 1,
                    )
                )
        if pending:
            # Only word-less sentences: show them as a single subtitle.
            chunks.append(SubtitleChunk(text=pending, sentence_index=pending_index, chunk_index=0, position=1))
        return chunks


__all__ = ["SubtitleChunk", "Chunker", "adjust_last_subtitle", "word_offsets"]
