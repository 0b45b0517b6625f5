"""Output formatters for manifest summaries.

Formats summaries for different consumers:
- JSON (machine-readable, stable field names)
- Text (human-readable report)
"""

import json
from typing import Any

from ..shared.models import Diagnostic, ManifestSummary


def summary_to_dict(summary: ManifestSummary) -> dict[str, Any]:
    """Convert a summary to its external dictionary form.

    Lists with zero entries are omitted rather than emitted empty.
    """
    payload = summary.model_dump(mode="json")
    return {key: streams for key, streams in payload.items() if streams}


def format_json(summary: ManifestSummary, indent: int = 4) -> str:
    """Format summary as JSON.

    Args:
        summary: Manifest summary
        indent: Spaces per indentation level (0 for compact output)

    Returns:
        JSON string with 'videos' and 'audios' keys, each present
        only when non-empty

    Example:
        >>> print(format_json(summary))
        {
            "videos": [
                {
                    "codec": "avc1",
                    ...
    """
    return json.dumps(
        summary_to_dict(summary),
        indent=indent if indent > 0 else None,
        ensure_ascii=False,
    )


def format_text(
    summary: ManifestSummary,
    diagnostics: list[Diagnostic] | None = None,
    source: str | None = None,
) -> str:
    """Format summary as a human-readable report.

    Args:
        summary: Manifest summary
        diagnostics: Skipped AdaptationSets to list at the end
        source: Manifest URL or path shown in the header

    Returns:
        Formatted message string
    """
    lines = [
        "=" * 60,
        "MANIFEST SUMMARY",
        "=" * 60,
    ]

    if source:
        lines.extend(["", f"Source: {source}"])

    lines.extend(["", f"Video Streams: {len(summary.videos)}"])
    for v in summary.videos:
        lines.append(f"  - {v.resolution} @ {v.bitrate} bps ({v.codec})")

    lines.extend(["", f"Audio Streams: {len(summary.audios)}"])
    for a in summary.audios:
        lines.append(
            f"  - [{a.language}] {a.bitrate} bps, {a.channels} ch ({a.codec})"
        )

    if diagnostics:
        lines.extend(["", f"Skipped AdaptationSets: {len(diagnostics)}"])
        for d in diagnostics:
            lines.append(f"  - {d}")

    lines.extend(["", "-" * 60])

    return "\n".join(lines)
