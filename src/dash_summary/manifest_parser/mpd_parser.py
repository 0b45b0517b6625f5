"""XML parsing utilities for DASH MPD manifests.

This module turns raw MPD text into the typed document tree:
- Namespace-agnostic element matching by local name
- Graceful handling of optional attributes
- Strict typing of numeric attributes
- Entity expansion and network access disabled
"""

from collections.abc import Iterator
from typing import Any

from lxml import etree

from ..shared.exceptions import MalformedDocumentError
from ..shared.models import (
    MPD,
    AdaptationSet,
    Descriptor,
    Period,
    Representation,
)

CHANNEL_CONFIGURATION_TAG = "AudioChannelConfiguration"


def parse_mpd(xml_content: str | bytes) -> MPD:
    """Parse MPD manifest XML into a document tree.

    Args:
        xml_content: Raw XML string or bytes

    Returns:
        MPD tree with periods, adaptation sets and representations
        in document order

    Raises:
        MalformedDocumentError: If XML is malformed, the root is not MPD,
            or an attribute violates its schema type

    Example:
        >>> mpd = parse_mpd(open("manifest.mpd", "rb").read())
        >>> print(mpd.periods[0].adaptation_sets[0].content_type)
        'video'
    """
    # Bytes are decoded by lxml from the BOM or XML declaration. Text is
    # already decoded, so its declaration must not be applied again.
    encoding = None
    if isinstance(xml_content, str):
        xml_content = xml_content.encode("utf-8")
        encoding = "utf-8"

    if not xml_content.strip():
        raise MalformedDocumentError("Manifest document is empty")

    parser = etree.XMLParser(
        encoding=encoding,
        resolve_entities=False,
        no_network=True,
        remove_comments=True,
    )
    try:
        root = etree.fromstring(xml_content, parser)
    except etree.XMLSyntaxError as e:
        raise MalformedDocumentError(
            f"Invalid XML format: {e}",
            {"parse_error": str(e), "position": getattr(e, "position", None)},
        ) from e

    root_tag = _local_name(root)
    if root_tag != "MPD":
        raise MalformedDocumentError(
            f"Invalid root element: expected 'MPD', got '{root_tag}'",
            {"actual_root": root_tag},
        )

    return MPD(periods=[_parse_period(elem) for elem in _children(root, "Period")])


def _local_name(elem: Any) -> str:
    """Return the tag of an element without its namespace."""
    return etree.QName(elem).localname


def _children(parent: Any, tag: str) -> Iterator[Any]:
    """Yield direct child elements with the given local name, in order."""
    for child in parent:
        # Processing instructions have a non-string tag
        if isinstance(child.tag, str) and _local_name(child) == tag:
            yield child


def _parse_optional_uint(elem: Any, attribute: str) -> int | None:
    """Parse an optional non-negative integer attribute.

    Raises:
        MalformedDocumentError: If the attribute is present but not
            a non-negative integer
    """
    value = elem.get(attribute)
    if value is None:
        return None
    digits = value.strip()
    # xs:unsignedInt lexical space: ASCII digits only, no sign or underscores
    if not (digits.isascii() and digits.isdigit()):
        raise MalformedDocumentError(
            f"Attribute '{attribute}' on {_local_name(elem)} must be a non-negative integer, got {value!r}",
            {
                "element": _local_name(elem),
                "attribute": attribute,
                "value": value,
                "line": elem.sourceline,
            },
        )
    return int(digits)


def _parse_descriptor(elem: Any) -> Descriptor:
    """Parse a descriptor element such as AudioChannelConfiguration."""
    return Descriptor(
        scheme_id_uri=elem.get("schemeIdUri"),
        value=elem.get("value"),
    )


def _parse_period(elem: Any) -> Period:
    """Parse Period element."""
    return Period(
        id=elem.get("id"),
        adaptation_sets=[
            _parse_adaptation_set(child) for child in _children(elem, "AdaptationSet")
        ],
    )


def _parse_adaptation_set(elem: Any) -> AdaptationSet:
    """Parse AdaptationSet element.

    Only attributes declared on the AdaptationSet itself are read;
    values set on child Representations are not hoisted.
    """
    return AdaptationSet(
        id=elem.get("id"),
        content_type=elem.get("contentType"),
        mime_type=elem.get("mimeType"),
        codecs=elem.get("codecs"),
        lang=elem.get("lang"),
        audio_channel_configurations=[
            _parse_descriptor(child)
            for child in _children(elem, CHANNEL_CONFIGURATION_TAG)
        ],
        representations=[
            _parse_representation(child) for child in _children(elem, "Representation")
        ],
    )


def _parse_representation(elem: Any) -> Representation:
    """Parse Representation element.

    A Representation carries at most one channel configuration;
    the first one in document order wins.
    """
    channel_configuration = next(_children(elem, CHANNEL_CONFIGURATION_TAG), None)

    return Representation(
        id=elem.get("id"),
        codecs=elem.get("codecs"),
        bandwidth=_parse_optional_uint(elem, "bandwidth"),
        width=_parse_optional_uint(elem, "width"),
        height=_parse_optional_uint(elem, "height"),
        audio_channel_configuration=(
            _parse_descriptor(channel_configuration)
            if channel_configuration is not None
            else None
        ),
    )
