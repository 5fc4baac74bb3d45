"""Timed SRT subtitles from narration transcripts."""

from .errors import AmbiguousAbbreviationError, DegenerateInputError, SubtitleError, TimecodeOverflowError
from .pipeline import SubtitlePipeline, prepare_srt_content

__all__ = [
    "prepare_srt_content",
    "SubtitlePipeline",
    "SubtitleError",
    "DegenerateInputError",
    "AmbiguousAbbreviationError",
    "TimecodeOverflowError",
]
