"""dash_summary - stream summaries for DASH MPD manifests.

Usage:
    from dash_summary import fetch, summarize_manifest, format_json

    summary, diagnostics = summarize_manifest(fetch("https://example.com/manifest.mpd"))
    print(format_json(summary))
"""

from .fetcher import fetch
from .manifest_parser import parse_mpd
from .shared.exceptions import (
    DashSummaryError,
    FetchError,
    InvalidDocumentTreeError,
    MalformedDocumentError,
)
from .shared.models import (
    UNKNOWN,
    AudioStream,
    Diagnostic,
    ManifestSummary,
    VideoStream,
)
from .summary import extract_summary, format_json, format_text, summarize_manifest

__version__ = "1.0.0"

__all__ = [
    "__version__",
    "fetch",
    "parse_mpd",
    "extract_summary",
    "summarize_manifest",
    "format_json",
    "format_text",
    "UNKNOWN",
    "ManifestSummary",
    "VideoStream",
    "AudioStream",
    "Diagnostic",
    "DashSummaryError",
    "FetchError",
    "MalformedDocumentError",
    "InvalidDocumentTreeError",
]
