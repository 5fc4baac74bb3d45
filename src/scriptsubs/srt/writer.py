"""SRT writer utilities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional

from ..abbrev.placeholders import PlaceholderMap
from ..config import TimecodeConfig
from ..errors import TimecodeOverflowError
from ..logging import get_logger
from ..utils.timing import to_srt_timestamp

LOGGER = get_logger("srt.writer")

_MINUTE_LIMIT_S = 3600.0


@dataclass(slots=True)
class SubtitleSegment:
    index: int
    start: float
    end: float
    text: str


class SRTWriter:
    """Render timed subtitles as SRT text."""

    def __init__(self, config: TimecodeConfig, placeholders: Optional[PlaceholderMap] = None) -> None:
        self._hours = config.hours
        self._placeholders = placeholders or PlaceholderMap()

    def _timestamp(self, value: float, index: int) -> str:
        try:
            return to_srt_timestamp(value, self._hours)
        except TimecodeOverflowError:
            raise TimecodeOverflowError(value, index) from None

    def render(self, segments: Iterable[SubtitleSegment]) -> List[str]:
        rendered: List[str] = []
        warned = False
        for segment in segments:
            if self._hours == "fixed" and not warned and segment.end >= _MINUTE_LIMIT_S:
                LOGGER.warning(
                    "Subtitle %d ends past 59 minutes; minutes keep counting without an hours field",
                    segment.index,
                )
                warned = True
            rendered.extend(
                [
                    str(segment.index),
                    f"{self._timestamp(segment.start, segment.index)} --> "
                    f"{self._timestamp(segment.end, segment.index)}",
                    segment.text,
                    "",
                ]
            )
        return rendered

    def to_string(self, segments: Iterable[SubtitleSegment]) -> str:
        """Assemble the document and restore abbreviations in one pass."""
        lines = self.render(segments)
        if not lines:
            return ""
        document = "\n".join(lines) + "\n"
        return self._placeholders.replace(document)

    def write(self, segments: Iterable[SubtitleSegment], target: Path) -> Path:
        content = self.to_string(segments)
        target.parent.mkdir(parents=True, exist_ok=True)
        with target.open("w", encoding="utf-8") as handle:
            handle.write(content)
        return target


__all__ = ["SubtitleSegment", "SRTWriter"]
