"""Subtitle timing and rendering utilities."""

from .allocator import TimingAllocator
from .writer import SRTWriter, SubtitleSegment

__all__ = [
    "TimingAllocator",
    "SRTWriter",
    "SubtitleSegment",
]
