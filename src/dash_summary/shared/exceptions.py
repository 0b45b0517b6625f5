"""Custom exception hierarchy for the manifest summary tool.

All tool-specific exceptions inherit from DashSummaryError,
enabling consistent error handling and structured error output.

Exception hierarchy:
    DashSummaryError (base)
    ├── FetchError
    │   ├── InvalidSchemeError
    │   ├── NonSuccessStatusError
    │   ├── UnacceptableContentTypeError
    │   ├── EmptyBodyError
    │   ├── TooLargeError
    │   ├── NetworkError
    │   └── LocalFileError
    ├── MalformedDocumentError
    └── InvalidDocumentTreeError
"""

from typing import Any


class DashSummaryError(Exception):
    """Base exception for all manifest summary errors.

    Attributes:
        message: Human-readable error description
        error_code: Machine-readable error code for filtering
        details: Additional context as key-value pairs
    """

    def __init__(
        self,
        message: str,
        error_code: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize summary error.

        Args:
            message: Human-readable error description
            error_code: Machine-readable error code (e.g., 'MALFORMED_DOCUMENT')
            details: Additional context for debugging
        """
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for JSON serialization.

        Returns:
            Dictionary with error_code, error_message, and details.
            Note: Uses 'error_message' instead of 'message' to avoid conflicts
            with Python's logging module which reserves 'message' internally.
        """
        return {
            "error_code": self.error_code,
            "error_message": self.message,
            "details": self.details,
        }

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.error_code!r}, {self.message!r})"


class FetchError(DashSummaryError):
    """Raised when a manifest cannot be retrieved from its source.

    Subclasses pin down the failure so the CLI can report it verbatim.
    """

    def __init__(
        self,
        message: str,
        error_code: str = "FETCH_ERROR",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, error_code, details)


class InvalidSchemeError(FetchError):
    """Raised when the source is not an http, https or file URL."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message, "INVALID_SCHEME", details)


class NonSuccessStatusError(FetchError):
    """Raised when the server answers with anything other than 200 OK."""

    def __init__(self, status_code: int, url: str) -> None:
        """Initialize non-success status error.

        Args:
            status_code: HTTP status returned by the server
            url: Requested URL
        """
        super().__init__(
            f"got non-200 status code: {status_code}",
            "NON_SUCCESS_STATUS",
            {"status_code": status_code, "url": url},
        )
        self.status_code = status_code


class UnacceptableContentTypeError(FetchError):
    """Raised when the response media type is not an MPD/XML type."""

    def __init__(self, content_type: str | None, allowed: list[str]) -> None:
        super().__init__(
            f"got unexpected content type: {content_type}",
            "UNACCEPTABLE_CONTENT_TYPE",
            {"content_type": content_type, "allowed_content_types": allowed},
        )


class EmptyBodyError(FetchError):
    """Raised when the manifest body is empty."""

    def __init__(self, source: str) -> None:
        super().__init__(
            "got empty response body",
            "EMPTY_BODY",
            {"source": source},
        )


class TooLargeError(FetchError):
    """Raised when the manifest exceeds the configured size cap."""

    def __init__(self, size_bytes: int, max_size_bytes: int, source: str) -> None:
        """Initialize size cap error.

        Args:
            size_bytes: Declared or observed size (may be a lower bound)
            max_size_bytes: Configured limit
            source: Manifest source
        """
        super().__init__(
            f"playlist is too large: {size_bytes} bytes (limit {max_size_bytes})",
            "TOO_LARGE",
            {
                "size_bytes": size_bytes,
                "max_size_bytes": max_size_bytes,
                "source": source,
            },
        )


class NetworkError(FetchError):
    """Raised for connection failures, timeouts and interrupted reads."""

    def __init__(
        self,
        message: str,
        original_error: Exception | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize network error.

        Args:
            message: Error description
            original_error: The underlying exception that triggered this
            details: Additional context
        """
        error_details = details or {}
        if original_error:
            error_details["original_error"] = str(original_error)
            error_details["original_error_type"] = type(original_error).__name__

        super().__init__(message, "NETWORK_ERROR", error_details)
        self.original_error = original_error


class LocalFileError(FetchError):
    """Raised when a file:// source cannot be read."""

    def __init__(self, path: str, original_error: Exception) -> None:
        super().__init__(
            f"failed to read file {path}: {original_error}",
            "LOCAL_FILE_ERROR",
            {"path": path, "original_error_type": type(original_error).__name__},
        )
        self.original_error = original_error


class MalformedDocumentError(DashSummaryError):
    """Raised when manifest text is not a well-formed MPD document.

    This covers:
    - Malformed XML syntax
    - Wrong root element
    - Attribute values that violate the MPD schema types
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message, "MALFORMED_DOCUMENT", details)


class InvalidDocumentTreeError(DashSummaryError):
    """Raised when summary extraction is handed something other than an MPD tree."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message, "INVALID_DOCUMENT_TREE", details)
