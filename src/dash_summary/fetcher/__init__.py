"""Manifest fetch module.

This module handles:
- Source validation (http, https, file)
- HTTP retrieval with content-type, size and timeout limits
- Local file reads
"""

from .client import fetch
from .validators import ManifestSource, parse_source

__all__ = [
    "fetch",
    "parse_source",
    "ManifestSource",
]
