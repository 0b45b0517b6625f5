"""Manifest parser module for DASH MPD documents.

This module handles:
- XML parsing with lxml
- Conversion into the typed document tree
"""

from .mpd_parser import parse_mpd

__all__ = [
    "parse_mpd",
]
