"""High-level orchestration from transcript text to SRT content."""

from __future__ import annotations

from pathlib import Path
from typing import List, Mapping, Optional

from .abbrev.placeholders import PlaceholderMap
from .config import PipelineConfig, validate_config
from .logging import get_logger
from .segment.chunker import Chunker
from .srt.allocator import TimingAllocator
from .srt.writer import SRTWriter, SubtitleSegment

LOGGER = get_logger("pipeline")


class SubtitlePipeline:
    """Chunk a transcript, time the chunks and render them as SRT."""

    def __init__(
        self,
        config: Optional[PipelineConfig] = None,
        abbreviations: Optional[Mapping[str, str]] = None,
    ) -> None:
        self._config = config or PipelineConfig()
        validate_config(self._config)
        self._placeholders = PlaceholderMap(abbreviations, order=self._config.abbreviations.order)
        self._chunker = Chunker(
            max_words=self._config.chunking.max_words,
            min_words=self._config.chunking.min_words,
        )
        self._allocator = TimingAllocator(self._placeholders)
        self._writer = SRTWriter(self._config.timecode, self._placeholders)

    def build_entries(self, text: str, length_in_seconds: float) -> List[SubtitleSegment]:
        """Return timed subtitles whose text still carries placeholders."""
        if length_in_seconds <= 0:
            raise ValueError("Length in seconds must be positive")
        if len(self._placeholders):
            self._placeholders.validate(text, strict=self._config.abbreviations.strict)
        substituted = self._placeholders.insert(text)
        chunks = self._chunker.chunk_text(substituted)
        segments = self._allocator.allocate(substituted, chunks, float(length_in_seconds))
        LOGGER.info("Built %d subtitles over %.3fs", len(segments), float(length_in_seconds))
        return segments

    def run(self, text: str, length_in_seconds: float) -> str:
        return self._writer.to_string(self.build_entries(text, length_in_seconds))

    def write(self, text: str, length_in_seconds: float, target: Path) -> Path:
        return self._writer.write(self.build_entries(text, length_in_seconds), target)


def prepare_srt_content(
    text: str,
    length_in_seconds: float,
    abbreviations: Optional[Mapping[str, str]] = None,
    config: Optional[PipelineConfig] = None,
) -> str:
    """Turn a transcript into SRT content spanning ``length_in_seconds``."""
    return SubtitlePipeline(config, abbreviations).run(text, length_in_seconds)


__all__ = ["SubtitlePipeline", "prepare_srt_content"]
