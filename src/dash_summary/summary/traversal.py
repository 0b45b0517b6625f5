"""Manifest traversal and summary assembly.

Walks Period -> AdaptationSet -> Representation in document order,
producing one stream entry per Representation. Sparse or unclassifiable
elements never abort the walk: missing fields become UNKNOWN and skipped
AdaptationSets are reported as Diagnostics.

Periods are flattened into the same two lists; no period boundary is kept.
"""

from ..manifest_parser import parse_mpd
from ..shared.exceptions import InvalidDocumentTreeError
from ..shared.models import (
    MPD,
    AdaptationSet,
    AudioStream,
    Diagnostic,
    ManifestSummary,
    MediaKind,
    VideoStream,
)
from .classifier import classify_adaptation_set, has_media_type
from .extractors import (
    extract_bitrate,
    extract_channels,
    extract_codec,
    extract_language,
    extract_resolution,
)

MISSING_MEDIA_TYPE = "MISSING_MEDIA_TYPE"
UNSUPPORTED_MEDIA_TYPE = "UNSUPPORTED_MEDIA_TYPE"


def extract_summary(mpd: MPD) -> tuple[ManifestSummary, list[Diagnostic]]:
    """Summarize the video and audio streams of a parsed manifest.

    Args:
        mpd: Parsed document tree; read, never modified

    Returns:
        Tuple of (summary, diagnostics). Diagnostics list every skipped
        AdaptationSet in document order.

    Raises:
        InvalidDocumentTreeError: If mpd is None or not an MPD tree

    Example:
        >>> summary, diagnostics = extract_summary(parse_mpd(xml))
        >>> print(summary.videos[0].resolution)
        '1920x1080'
    """
    if mpd is None:
        raise InvalidDocumentTreeError("Document tree is missing")
    if not isinstance(mpd, MPD):
        raise InvalidDocumentTreeError(
            f"Expected an MPD document tree, got {type(mpd).__name__}",
            {"actual_type": type(mpd).__name__},
        )

    videos: list[VideoStream] = []
    audios: list[AudioStream] = []
    diagnostics: list[Diagnostic] = []

    for period_index, period in enumerate(mpd.periods):
        for set_index, adaptation_set in enumerate(period.adaptation_sets):
            kind = classify_adaptation_set(adaptation_set)

            if kind is MediaKind.VIDEO:
                videos.extend(_video_streams(adaptation_set))
            elif kind is MediaKind.AUDIO:
                audios.extend(_audio_streams(adaptation_set))
            else:
                diagnostics.append(_skip_diagnostic(period_index, set_index, adaptation_set))

    return ManifestSummary(videos=videos, audios=audios), diagnostics


def summarize_manifest(xml_content: str | bytes) -> tuple[ManifestSummary, list[Diagnostic]]:
    """Parse MPD text and summarize it in one call.

    Raises:
        MalformedDocumentError: If the text is not a valid MPD document
    """
    return extract_summary(parse_mpd(xml_content))


def _video_streams(adaptation_set: AdaptationSet) -> list[VideoStream]:
    return [
        VideoStream(
            codec=extract_codec(adaptation_set.codecs, rep.codecs),
            bitrate=extract_bitrate(rep.bandwidth),
            resolution=extract_resolution(rep.width, rep.height),
        )
        for rep in adaptation_set.representations
    ]


def _audio_streams(adaptation_set: AdaptationSet) -> list[AudioStream]:
    # Channels and language are set-scoped but resolved per representation
    return [
        AudioStream(
            codec=extract_codec(adaptation_set.codecs, rep.codecs),
            bitrate=extract_bitrate(rep.bandwidth),
            channels=extract_channels(
                adaptation_set.audio_channel_configurations,
                rep.audio_channel_configuration,
            ),
            language=extract_language(adaptation_set.lang),
        )
        for rep in adaptation_set.representations
    ]


def _skip_diagnostic(
    period_index: int,
    set_index: int,
    adaptation_set: AdaptationSet,
) -> Diagnostic:
    """Describe why an AdaptationSet contributed no streams."""
    if not has_media_type(adaptation_set):
        missing = [
            name
            for name, value in (
                ("contentType", adaptation_set.content_type),
                ("mimeType", adaptation_set.mime_type),
            )
            if value is None
        ]
        return Diagnostic(
            period_index=period_index,
            adaptation_set_index=set_index,
            adaptation_set_id=adaptation_set.id,
            code=MISSING_MEDIA_TYPE,
            reason=f"{' and '.join(missing)} missing, skipping",
        )

    return Diagnostic(
        period_index=period_index,
        adaptation_set_index=set_index,
        adaptation_set_id=adaptation_set.id,
        code=UNSUPPORTED_MEDIA_TYPE,
        reason=(
            f"unsupported contentType/mimeType "
            f"{adaptation_set.content_type!r}/{adaptation_set.mime_type!r}, skipping"
        ),
    )
