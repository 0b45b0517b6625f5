"""Summary extraction module.

This module handles:
- AdaptationSet classification
- Per-field extraction with UNKNOWN fallbacks
- Traversal of the document tree into a ManifestSummary
- JSON and text rendering
"""

from .classifier import classify_adaptation_set
from .extractors import (
    extract_bitrate,
    extract_channels,
    extract_codec,
    extract_language,
    extract_resolution,
)
from .formatters import format_json, format_text, summary_to_dict
from .traversal import extract_summary, summarize_manifest

__all__ = [
    "classify_adaptation_set",
    "extract_codec",
    "extract_bitrate",
    "extract_resolution",
    "extract_channels",
    "extract_language",
    "extract_summary",
    "summarize_manifest",
    "format_json",
    "format_text",
    "summary_to_dict",
]
