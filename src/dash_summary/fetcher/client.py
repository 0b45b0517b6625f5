"""Manifest retrieval over HTTP(S) or from the local filesystem.

HTTP requests use urllib with an explicit timeout. Nothing is retried:
any failure is raised as a FetchError subclass and ends the run.
"""

import socket
import ssl
import urllib.request
from pathlib import Path
from urllib.error import HTTPError, URLError

from aws_lambda_powertools import Logger

from ..shared.config import Settings, get_settings
from ..shared.exceptions import LocalFileError, NetworkError, NonSuccessStatusError
from .validators import (
    ManifestSource,
    check_body,
    check_content_type,
    check_declared_length,
    parse_source,
)

logger = Logger(service="dash-summary", child=True)


def fetch(
    source: str | Path,
    timeout: float | None = None,
    settings: Settings | None = None,
) -> bytes:
    """Retrieve the raw manifest document from a URL or local path.

    Args:
        source: http(s) URL, file URL, or filesystem Path
        timeout: Seconds before a remote request is abandoned
            (defaults to the configured fetch timeout)
        settings: Settings override (defaults to cached settings)

    Returns:
        Manifest bytes, undecoded; the XML declaration decides the encoding

    Raises:
        InvalidSchemeError: If the source scheme is not allowed
        NonSuccessStatusError: If the server does not answer 200
        UnacceptableContentTypeError: If the response is not an MPD/XML type
        EmptyBodyError: If the manifest is empty
        TooLargeError: If the manifest exceeds the size cap
        NetworkError: On connection failure or timeout
        LocalFileError: If a local manifest cannot be read
    """
    settings = settings or get_settings()
    manifest_source = parse_source(source)

    if manifest_source.is_local:
        return read_local_manifest(manifest_source, settings)

    return fetch_remote_manifest(
        manifest_source,
        timeout=timeout if timeout is not None else settings.fetch_timeout_seconds,
        settings=settings,
    )


def read_local_manifest(manifest_source: ManifestSource, settings: Settings) -> bytes:
    """Read a manifest from disk with the same size rules as HTTP."""
    path = Path(manifest_source.location)
    max_size = settings.max_manifest_size_bytes

    try:
        with open(path, "rb") as f:
            body = f.read(max_size + 1)
    except OSError as e:
        raise LocalFileError(str(path), e) from e

    check_body(body, max_size, str(path))

    logger.debug("Read local manifest", extra={"path": str(path), "size_bytes": len(body)})

    return body


def fetch_remote_manifest(
    manifest_source: ManifestSource,
    timeout: float,
    settings: Settings,
) -> bytes:
    """GET a manifest over HTTP(S) and validate the response.

    Args:
        manifest_source: Validated http or https source
        timeout: Socket timeout in seconds
        settings: Application settings

    Returns:
        Response body bytes
    """
    url = manifest_source.location
    max_size = settings.max_manifest_size_bytes
    headers = {
        # Some CDNs block clients without a User-Agent
        "User-Agent": settings.user_agent,
        "Accept": ", ".join(settings.allowed_content_types),
    }

    logger.info("Fetching manifest", extra={"url": url, "timeout_seconds": timeout})

    request = urllib.request.Request(url, headers=headers, method="GET")
    ssl_context = ssl.create_default_context()

    try:
        with urllib.request.urlopen(request, context=ssl_context, timeout=timeout) as response:
            status_code = response.status
            if status_code != 200:
                raise NonSuccessStatusError(status_code, url)

            check_content_type(
                response.headers.get("Content-Type"),
                settings.allowed_content_types,
            )
            check_declared_length(response.headers.get("Content-Length"), max_size, url)

            body = response.read(max_size + 1)

    except HTTPError as e:
        raise NonSuccessStatusError(e.code, url) from e

    except URLError as e:
        raise NetworkError(
            f"failed to do request: {e.reason}",
            original_error=e,
            details={"url": url},
        ) from e

    except (socket.timeout, TimeoutError) as e:
        raise NetworkError(
            f"request timed out after {timeout}s",
            original_error=e,
            details={"url": url},
        ) from e

    except OSError as e:
        raise NetworkError(
            f"failed to read all bytes: {e}",
            original_error=e,
            details={"url": url},
        ) from e

    check_body(body, max_size, url)

    logger.debug(
        "Fetched manifest",
        extra={"url": url, "status_code": status_code, "size_bytes": len(body)},
    )

    return body
