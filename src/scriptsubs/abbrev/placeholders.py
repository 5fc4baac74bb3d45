"""Placeholder substitution for abbreviations.

Abbreviations are swapped for synthetic single-word tokens before the text is
segmented, so that every abbreviation counts as exactly one word while chunking.
The same tokens are expanded to the spoken full form for timing and turned back
into the written abbreviation once the document has been rendered.
"""

from __future__ import annotations

import re
from typing import Dict, List, Mapping, Optional, Pattern

from ..errors import AmbiguousAbbreviationError
from ..logging import get_logger

LOGGER = get_logger("abbrev.placeholders")

PLACEHOLDER_PREFIX = "PLACEHOLDER_"


def _alternation(keys: List[str]) -> Optional[Pattern[str]]:
    """Compile a pattern matching any key, preferring the longest at each position."""
    if not keys:
        return None
    ordered = sorted(keys, key=len, reverse=True)
    return re.compile("|".join(re.escape(key) for key in ordered))


class PlaceholderMap:
    """Immutable lookup between abbreviations, placeholders and full forms."""

    def __init__(self, table: Optional[Mapping[str, str]] = None, order: str = "insertion") -> None:
        table = dict(table or {})
        if order == "sorted":
            pairs = sorted(table.items())
        elif order == "insertion":
            pairs = list(table.items())
        else:
            raise ValueError(f"Unknown abbreviation order: {order}")

        self._abbr_placeholder: Dict[str, str] = {}
        self._placeholder_fullform: Dict[str, str] = {}
        self._placeholder_abbr: Dict[str, str] = {}
        counter = 0
        for abbreviation, fullform in pairs:
            if not abbreviation:
                raise ValueError("Abbreviations must not be empty")
            placeholder = f"{PLACEHOLDER_PREFIX}{counter}"
            counter += 1
            self._abbr_placeholder[abbreviation] = placeholder
            self._placeholder_fullform[placeholder] = fullform
            self._placeholder_abbr[placeholder] = abbreviation

        self._abbr_re = _alternation(list(self._abbr_placeholder))
        self._placeholder_re = _alternation(list(self._placeholder_abbr))
        if pairs:
            LOGGER.debug("Assigned %d abbreviation placeholders", len(pairs))

    def __len__(self) -> int:
        return len(self._abbr_placeholder)

    @property
    def placeholders(self) -> Dict[str, str]:
        """Abbreviation to placeholder view."""
        return dict(self._abbr_placeholder)

    @property
    def fullforms(self) -> Dict[str, str]:
        """Placeholder to full form view."""
        return dict(self._placeholder_fullform)

    def insert(self, text: str) -> str:
        """Replace abbreviations with their placeholders.

        Matching is plain substring matching: an abbreviation inside a longer
        word is rewritten too. Use :meth:`find_ambiguities` to detect that.
        """
        if self._abbr_re is None:
            return text
        return self._abbr_re.sub(lambda match: self._abbr_placeholder[match.group()], text)

    def replace(self, text: str) -> str:
        """Replace placeholders with the abbreviations they stand for."""
        if self._placeholder_re is None:
            return text
        return self._placeholder_re.sub(lambda match: self._placeholder_abbr[match.group()], text)

    def expand(self, text: str) -> str:
        """Replace placeholders with the spoken full forms."""
        if self._placeholder_re is None:
            return text
        return self._placeholder_re.sub(lambda match: self._placeholder_fullform[match.group()], text)

    def find_ambiguities(self, text: Optional[str] = None) -> List[str]:
        """Describe entries whose substitution cannot be reversed reliably."""
        conflicts: List[str] = []
        abbreviations = list(self._abbr_placeholder)
        fullforms = {abbr: self._placeholder_fullform[ph] for abbr, ph in self._abbr_placeholder.items()}

        for abbreviation in abbreviations:
            for other in abbreviations:
                if other != abbreviation and abbreviation in other:
                    conflicts.append(f"{abbreviation!r} is part of abbreviation {other!r}")
            for other, fullform in fullforms.items():
                if other != abbreviation and abbreviation in fullform:
                    conflicts.append(f"{abbreviation!r} is part of the full form of {other!r}")

        if text is not None:
            if PLACEHOLDER_PREFIX in text:
                conflicts.append(f"transcript already contains {PLACEHOLDER_PREFIX!r} text")
            for abbreviation in abbreviations:
                embedded = re.compile(rf"\w{re.escape(abbreviation)}|{re.escape(abbreviation)}\w")
                match = embedded.search(text)
                if match:
                    conflicts.append(
                        f"{abbreviation!r} occurs inside {match.group()!r} at offset {match.start()}"
                    )
        return conflicts

    def validate(self, text: Optional[str] = None, strict: bool = False) -> List[str]:
        """Check the table, raising in strict mode and warning otherwise."""
        conflicts = self.find_ambiguities(text)
        if conflicts and strict:
            raise AmbiguousAbbreviationError(conflicts)
        for conflict in conflicts:
            LOGGER.warning("Ambiguous abbreviation: %s", conflict)
        return conflicts


__all__ = ["PLACEHOLDER_PREFIX", "PlaceholderMap"]
