"""Spoken-length based timing for subtitle chunks."""

from __future__ import annotations

from typing import List, Sequence

from ..abbrev.placeholders import PlaceholderMap
from ..errors import DegenerateInputError
from ..logging import get_logger
from ..segment.chunker import SubtitleChunk
from ..utils.text import spoken_length
from .writer import SubtitleSegment

LOGGER = get_logger("srt.allocator")


class TimingAllocator:
    """Share a total duration between chunks in proportion to their spoken length.

    Lengths are measured on the expanded text, so an abbreviation is timed as
    its full form would be spoken.
    """

    def __init__(self, placeholders: PlaceholderMap) -> None:
        self._placeholders = placeholders

    def spoken_length(self, text: str) -> int:
        return spoken_length(self._placeholders.expand(text))

    def allocate(
        self,
        full_text: str,
        chunks: Sequence[SubtitleChunk],
        total_duration: float,
    ) -> List[SubtitleSegment]:
        if total_duration <= 0:
            raise ValueError("Total duration must be positive")
        total_length = self.spoken_length(full_text)
        if total_length == 0:
            raise DegenerateInputError(
                f"Transcript of {len(full_text)} characters has no alphanumeric content to time"
            )
        rate = total_duration / total_length
        LOGGER.debug("Timing %d graphemes at %.4fs each", total_length, rate)

        segments: List[SubtitleSegment] = []
        cursor = 0.0
        for chunk in chunks:
            duration = rate * self.spoken_length(chunk.text)
            segments.append(
                SubtitleSegment(
                    index=chunk.position,
                    start=cursor,
                    end=cursor + duration,
                    text=chunk.text,
                )
            )
            cursor += duration
        return segments


__all__ = ["TimingAllocator"]
