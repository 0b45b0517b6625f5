"""Shared utilities for the manifest summary tool."""

from .config import Settings, clear_settings_cache, get_settings
from .exceptions import (
    DashSummaryError,
    EmptyBodyError,
    FetchError,
    InvalidDocumentTreeError,
    InvalidSchemeError,
    LocalFileError,
    MalformedDocumentError,
    NetworkError,
    NonSuccessStatusError,
    TooLargeError,
    UnacceptableContentTypeError,
)
from .models import (
    MPD,
    UNKNOWN,
    AdaptationSet,
    AudioStream,
    Descriptor,
    Diagnostic,
    ManifestSummary,
    MediaKind,
    Period,
    Representation,
    VideoStream,
)

__all__ = [
    # Config
    "Settings",
    "get_settings",
    "clear_settings_cache",
    # Exceptions
    "DashSummaryError",
    "FetchError",
    "InvalidSchemeError",
    "NonSuccessStatusError",
    "UnacceptableContentTypeError",
    "EmptyBodyError",
    "TooLargeError",
    "NetworkError",
    "LocalFileError",
    "MalformedDocumentError",
    "InvalidDocumentTreeError",
    # Models
    "UNKNOWN",
    "MediaKind",
    "Descriptor",
    "Representation",
    "AdaptationSet",
    "Period",
    "MPD",
    "VideoStream",
    "AudioStream",
    "ManifestSummary",
    "Diagnostic",
]
