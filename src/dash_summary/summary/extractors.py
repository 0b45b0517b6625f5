"""Summary field extractors.

Each extractor is total: it never raises and returns UNKNOWN when its
input is absent, an empty string, or (for numbers) zero. These functions
are the only place that decides a field is unknown.
"""

from collections.abc import Iterable

from ..shared.models import UNKNOWN, Descriptor


def _text_or_unknown(value: str | None) -> str:
    if value is None or value == "":
        return UNKNOWN
    return value


def extract_codec(adaptation_set_codecs: str | None, representation_codecs: str | None) -> str:
    """Resolve the codec of a Representation.

    The AdaptationSet value is shared by all sibling Representations,
    so it takes precedence; the Representation value is the fallback.

    Example:
        >>> extract_codec("", "avc1.42C00D")
        'avc1.42C00D'
    """
    codec = _text_or_unknown(adaptation_set_codecs)
    if codec == UNKNOWN:
        codec = _text_or_unknown(representation_codecs)
    return codec


def extract_bitrate(bandwidth: int | None) -> str:
    """Format bandwidth in bits per second as a base-10 string."""
    if bandwidth is None or bandwidth == 0:
        return UNKNOWN
    return str(bandwidth)


def extract_resolution(width: int | None, height: int | None) -> str:
    """Format '<width>x<height>'; partial dimensions are never reported.

    Example:
        >>> extract_resolution(1920, 1080)
        '1920x1080'
        >>> extract_resolution(1920, None)
        'unknown'
    """
    if width is None or height is None or width == 0 or height == 0:
        return UNKNOWN
    return f"{width}x{height}"


def extract_channel_descriptors(descriptors: Iterable[Descriptor]) -> str:
    """Join non-empty descriptor values with ',' in document order."""
    channels = [d.value for d in descriptors if d.value]
    if not channels:
        return UNKNOWN
    return ",".join(channels)


def extract_channel_configuration(channel_configuration: Descriptor | None) -> str:
    """Read the value of a single channel configuration."""
    if channel_configuration is None:
        return UNKNOWN
    return _text_or_unknown(channel_configuration.value)


def extract_channels(
    adaptation_set_descriptors: Iterable[Descriptor],
    representation_configuration: Descriptor | None,
) -> str:
    """Resolve the channel layout of an audio Representation.

    AdaptationSet descriptors win when any has a value; otherwise the
    Representation's own configuration is used. Values are passed through
    verbatim: a plain count ('2') or a hex channel mask ('F801') for
    Dolby schemes.
    """
    channels = extract_channel_descriptors(adaptation_set_descriptors)
    if channels == UNKNOWN:
        channels = extract_channel_configuration(representation_configuration)
    return channels


def extract_language(lang: str | None) -> str:
    """Pass the AdaptationSet language tag through."""
    return _text_or_unknown(lang)
