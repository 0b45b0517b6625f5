"""Manifest source and response validation.

This module provides:
- Source URL parsing with a scheme allow-list
- Response media type checks
- Size cap checks
"""

from dataclasses import dataclass
from pathlib import Path
from urllib.parse import urlparse
from urllib.request import url2pathname

from ..shared.exceptions import (
    EmptyBodyError,
    InvalidSchemeError,
    TooLargeError,
    UnacceptableContentTypeError,
)

HTTP_SCHEMES = {"http", "https"}
FILE_SCHEME = "file"
ALLOWED_SCHEMES = HTTP_SCHEMES | {FILE_SCHEME}


@dataclass(frozen=True)
class ManifestSource:
    """A validated manifest location."""

    scheme: str
    location: str

    @property
    def is_local(self) -> bool:
        return self.scheme == FILE_SCHEME


def parse_source(raw: str | Path) -> ManifestSource:
    """Validate a manifest source and classify it.

    Args:
        raw: http(s) or file URL, or a filesystem Path

    Returns:
        ManifestSource; for file sources, location is a filesystem path

    Raises:
        InvalidSchemeError: If the URL is empty, has no scheme, or uses
            a scheme other than http, https or file

    Example:
        >>> parse_source("file:///tmp/manifest.mpd").location
        '/tmp/manifest.mpd'
    """
    if isinstance(raw, Path):
        return ManifestSource(scheme=FILE_SCHEME, location=str(raw))

    raw = raw.strip()
    if not raw:
        raise InvalidSchemeError("failed to parse url: empty url", {"url": raw})

    parsed = urlparse(raw)
    scheme = parsed.scheme.lower()

    if not scheme:
        raise InvalidSchemeError(
            f"failed to parse url: {raw!r} has no scheme",
            {"url": raw},
        )
    if scheme not in ALLOWED_SCHEMES:
        raise InvalidSchemeError(
            f"invalid url scheme: {scheme}",
            {"url": raw, "scheme": scheme, "allowed_schemes": sorted(ALLOWED_SCHEMES)},
        )

    if scheme == FILE_SCHEME:
        # file://manifest.mpd names a relative path, not a host
        path = parsed.path
        if parsed.netloc and parsed.netloc != "localhost":
            path = parsed.netloc + path
        if not path:
            raise InvalidSchemeError(f"file url has no path: {raw!r}", {"url": raw})
        return ManifestSource(scheme=scheme, location=url2pathname(path))

    if not parsed.netloc:
        raise InvalidSchemeError(f"failed to parse url: {raw!r} has no host", {"url": raw})

    return ManifestSource(scheme=scheme, location=raw)


def check_content_type(content_type: str | None, allowed: list[str]) -> None:
    """Verify a response media type against the allow-list.

    Parameters such as '; charset=utf-8' are ignored.

    Raises:
        UnacceptableContentTypeError: If the media type is missing or not allowed
    """
    media_type = content_type.split(";", 1)[0].strip().lower() if content_type else ""
    if media_type not in allowed:
        raise UnacceptableContentTypeError(content_type, allowed)


def check_declared_length(content_length: str | None, max_size_bytes: int, source: str) -> None:
    """Validate a Content-Length header before reading the body.

    A missing or unparsable header is not an error; the body read is
    capped separately.

    Raises:
        EmptyBodyError: If the declared length is 0
        TooLargeError: If the declared length exceeds the cap
    """
    if content_length is None:
        return
    try:
        declared = int(content_length)
    except ValueError:
        return

    if declared == 0:
        raise EmptyBodyError(source)
    if declared > max_size_bytes:
        raise TooLargeError(declared, max_size_bytes, source)


def check_body(body: bytes, max_size_bytes: int, source: str) -> None:
    """Validate a body read with a limit of max_size_bytes + 1.

    Raises:
        EmptyBodyError: If the body is empty
        TooLargeError: If the body exceeds the cap
    """
    if not body:
        raise EmptyBodyError(source)
    if len(body) > max_size_bytes:
        raise TooLargeError(len(body), max_size_bytes, source)
