"""Time conversion helpers."""

from __future__ import annotations

from ..errors import TimecodeOverflowError


def to_srt_timestamp(value: float, hours: str = "fixed") -> str:
    """Convert seconds to an SRT timestamp string.

    ``fixed`` keeps the hours field at ``00`` and lets minutes grow past 59,
    ``roll`` carries minutes into hours and ``strict`` refuses offsets that
    would need an hours field.
    """
    if value < 0:
        value = 0.0
    total_ms = int(round(value * 1000))
    minutes, remainder = divmod(total_ms, 60_000)
    seconds, milliseconds = divmod(remainder, 1000)
    if hours == "roll":
        hour_field, minutes = divmod(minutes, 60)
    elif hours in ("fixed", "strict"):
        if hours == "strict" and minutes >= 60:
            raise TimecodeOverflowError(value)
        hour_field = 0
    else:
        raise ValueError(f"Unknown timecode hours policy: {hours}")
    return f"{hour_field:02d}:{minutes:02d}:{seconds:02d},{milliseconds:03d}"


__all__ = ["to_srt_timestamp"]
