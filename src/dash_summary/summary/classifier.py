"""AdaptationSet media classification.

contentType and mimeType are the only schema-guaranteed discriminators.
Both must match, so subtitle or metadata tracks that reuse the 'video'
content type are not mistaken for video.
"""

from ..shared.models import AdaptationSet, MediaKind

VIDEO_CONTENT_TYPE = "video"
VIDEO_MIME_TYPE = "video/mp4"
AUDIO_CONTENT_TYPE = "audio"
AUDIO_MIME_TYPE = "audio/mp4"


def classify_adaptation_set(adaptation_set: AdaptationSet) -> MediaKind:
    """Decide the media kind of an AdaptationSet.

    Args:
        adaptation_set: AdaptationSet to classify

    Returns:
        MediaKind.VIDEO for ('video', 'video/mp4'), MediaKind.AUDIO for
        ('audio', 'audio/mp4'), MediaKind.UNCLASSIFIED otherwise
    """
    content_type = adaptation_set.content_type
    mime_type = adaptation_set.mime_type

    if content_type is None or mime_type is None:
        return MediaKind.UNCLASSIFIED

    if content_type == VIDEO_CONTENT_TYPE and mime_type == VIDEO_MIME_TYPE:
        return MediaKind.VIDEO
    if content_type == AUDIO_CONTENT_TYPE and mime_type == AUDIO_MIME_TYPE:
        return MediaKind.AUDIO
    return MediaKind.UNCLASSIFIED


def has_media_type(adaptation_set: AdaptationSet) -> bool:
    """Check that both contentType and mimeType are declared."""
    return adaptation_set.content_type is not None and adaptation_set.mime_type is not None
