"""Command-line interface for DASH manifest summaries.

Fetches an MPD manifest, summarizes its video and audio streams and
prints the result. Logs go to stderr so stdout carries only the summary.

Usage:
    dash-summary -p https://example.com/manifest.mpd

    # Local file, human-readable output
    dash-summary -p file:///tmp/manifest.mpd --format text

    # Custom timeout, write JSON to a file
    dash-summary -p https://example.com/manifest.mpd -t 10 -o summary.json
"""

import argparse
import sys
from pathlib import Path

from aws_lambda_powertools import Logger
from pydantic import ValidationError

from .fetcher import fetch
from .manifest_parser import parse_mpd
from .shared.config import Settings, get_settings
from .shared.exceptions import FetchError, MalformedDocumentError
from .shared.models import Diagnostic, ManifestSummary
from .summary import extract_summary, format_json, format_text

logger = Logger(service="dash-summary", stream=sys.stderr)

EXAMPLE_URL = (
    "https://demo.unified-streaming.com/k8s/features/stable/video/"
    "tears-of-steel/tears-of-steel.ism/.mpd"
)
EXIT_SUCCESS = 0
EXIT_FAILURE = 1
EXIT_INTERRUPTED = 130


def analyze_manifest(
    source: str | Path,
    timeout: float | None = None,
    settings: Settings | None = None,
) -> tuple[ManifestSummary, list[Diagnostic]]:
    """Fetch, parse and summarize a manifest.

    Args:
        source: http(s) URL, file URL, or filesystem Path
        timeout: Fetch timeout override in seconds
        settings: Settings override

    Returns:
        Tuple of (summary, diagnostics)

    Raises:
        FetchError: If the manifest cannot be retrieved
        MalformedDocumentError: If the manifest is not a valid MPD
    """
    manifest = fetch(source, timeout=timeout, settings=settings)

    logger.info("Parsing manifest", extra={"size_bytes": len(manifest)})
    mpd = parse_mpd(manifest)

    summary, diagnostics = extract_summary(mpd)

    for diagnostic in diagnostics:
        logger.warning(
            "Skipped AdaptationSet",
            extra={
                "period_index": diagnostic.period_index,
                "adaptation_set_index": diagnostic.adaptation_set_index,
                "adaptation_set_id": diagnostic.adaptation_set_id,
                "code": diagnostic.code,
                "reason": diagnostic.reason,
            },
        )

    logger.info(
        "Summarized manifest",
        extra={
            "video_streams": len(summary.videos),
            "audio_streams": len(summary.audios),
            "skipped_adaptation_sets": len(diagnostics),
        },
    )

    return summary, diagnostics


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="dash-summary",
        description="Manifest Analyzer - DASH playlist analysis tool",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
Examples:
  dash-summary -p {EXAMPLE_URL}
  dash-summary -p file:///tmp/manifest.mpd --format text
  dash-summary -p {EXAMPLE_URL} -t 10 -o summary.json
        """,
    )
    parser.add_argument(
        "-p",
        "--playlist",
        metavar="URL",
        help="Playlist URL to analyze (http, https or file) (required)",
    )
    parser.add_argument(
        "-t",
        "--timeout",
        type=float,
        help="Fetch timeout in seconds (default: FETCH_TIMEOUT_SECONDS or 30)",
    )
    parser.add_argument(
        "-f",
        "--format",
        choices=["json", "text"],
        default="json",
        help="Output format (default: json)",
    )
    parser.add_argument(
        "-o",
        "--output",
        help="Write the summary to a file instead of stdout",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the dash-summary CLI.

    Returns:
        Exit code (0 for success, 1 for error, 130 when interrupted)
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.playlist:
        print("Error: Playlist URL (-p) is required.", file=sys.stderr)
        parser.print_usage(sys.stderr)
        return EXIT_FAILURE

    if args.timeout is not None and args.timeout <= 0:
        print("Error: Timeout (-t) must be greater than zero.", file=sys.stderr)
        return EXIT_FAILURE

    try:
        settings = get_settings()
    except ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
            for error in e.errors()
        )
        print(f"Error: Invalid configuration: {problems}", file=sys.stderr)
        return EXIT_FAILURE

    logger.setLevel(settings.log_level)

    try:
        summary, diagnostics = analyze_manifest(
            args.playlist,
            timeout=args.timeout,
            settings=settings,
        )

    except FetchError as e:
        logger.error("Manifest fetch failed", extra={"error": e.to_dict()})
        print(f"Error: Failed to fetch playlist: {e}", file=sys.stderr)
        return EXIT_FAILURE

    except MalformedDocumentError as e:
        logger.error("Manifest parsing failed", extra={"error": e.to_dict()})
        print(f"Error: Failed to parse playlist: {e}", file=sys.stderr)
        return EXIT_FAILURE

    except KeyboardInterrupt:
        print("Interrupted, aborting.", file=sys.stderr)
        return EXIT_INTERRUPTED

    if args.format == "text":
        rendered = format_text(summary, diagnostics, source=args.playlist)
    else:
        rendered = format_json(summary, indent=settings.json_indent)

    if args.output:
        try:
            with open(args.output, "w", encoding="utf-8") as f:
                f.write(rendered + "\n")
        except OSError as e:
            print(f"Error: Failed to write {args.output}: {e}", file=sys.stderr)
            return EXIT_FAILURE
        logger.info("Summary written", extra={"output": args.output})
    else:
        print(rendered)

    return EXIT_SUCCESS


if __name__ == "__main__":
    sys.exit(main())
