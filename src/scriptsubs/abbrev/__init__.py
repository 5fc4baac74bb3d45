"""Abbreviation substitution helpers."""

from .placeholders import PLACEHOLDER_PREFIX, PlaceholderMap

__all__ = ["PLACEHOLDER_PREFIX", "PlaceholderMap"]
