"""Typed failures raised by the subtitle engine."""

from __future__ import annotations

from typing import List, Sequence


class SubtitleError(Exception):
    """Base class for failures caused by the input data."""


class DegenerateInputError(SubtitleError, ValueError):
    """Raised when a transcript has no alphanumeric content to time."""


class AmbiguousAbbreviationError(SubtitleError, ValueError):
    """Raised when abbreviation substitution would corrupt the text."""

    def __init__(self, conflicts: Sequence[str]) -> None:
        self.conflicts: List[str] = list(conflicts)
        super().__init__(
            "Ambiguous abbreviation table: " + "; ".join(self.conflicts)
        )


class TimecodeOverflowError(SubtitleError, ValueError):
    """Raised when an offset needs an hours field that the format cannot show."""

    def __init__(self, seconds: float, index: int | None = None) -> None:
        self.seconds = seconds
        self.index = index
        where = f" (subtitle {index})" if index is not None else ""
        super().__init__(f"Offset {seconds:.3f}s exceeds 59 minutes{where}")


__all__ = [
    "SubtitleError",
    "DegenerateInputError",
    "AmbiguousAbbreviationError",
    "TimecodeOverflowError",
]
