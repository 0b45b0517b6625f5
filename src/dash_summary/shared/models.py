"""Pydantic models for the manifest tree and its summary.

This module defines the core data structures used throughout the tool:
- Document tree models (MPD, Period, AdaptationSet, Representation)
- Summary models (VideoStream, AudioStream, ManifestSummary)
- Diagnostics reported for skipped AdaptationSets

All models use Pydantic v2 and are frozen; a tree is read-only once parsed.
"""

from enum import Enum
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

# Sentinel for any summary field that cannot be determined
UNKNOWN = "unknown"


class MediaKind(str, Enum):
    """Media kind assigned to an AdaptationSet by the classifier."""

    VIDEO = "video"
    AUDIO = "audio"
    UNCLASSIFIED = "unclassified"


class Descriptor(BaseModel):
    """A DASH descriptor element (e.g. AudioChannelConfiguration)."""

    model_config = ConfigDict(frozen=True)

    scheme_id_uri: str | None = Field(
        default=None,
        description="schemeIdUri attribute",
    )
    value: str | None = Field(
        default=None,
        description="value attribute, passed through verbatim",
    )


class Representation(BaseModel):
    """One concrete encoded variant within an AdaptationSet."""

    model_config = ConfigDict(frozen=True)

    id: str | None = Field(
        default=None,
        description="Representation identifier",
    )
    codecs: str | None = Field(
        default=None,
        description="RFC 6381 codecs string (e.g., 'avc1.640028')",
    )
    bandwidth: Annotated[int, Field(ge=0)] | None = Field(
        default=None,
        description="Required bandwidth in bits per second",
    )
    width: Annotated[int, Field(ge=0)] | None = Field(
        default=None,
        description="Video width in pixels",
    )
    height: Annotated[int, Field(ge=0)] | None = Field(
        default=None,
        description="Video height in pixels",
    )
    audio_channel_configuration: Descriptor | None = Field(
        default=None,
        description="Representation-level channel configuration",
    )


class AdaptationSet(BaseModel):
    """A group of interchangeable Representations.

    Attributes declared here are shared by every child Representation.
    """

    model_config = ConfigDict(frozen=True)

    id: str | None = Field(
        default=None,
        description="AdaptationSet identifier",
    )
    content_type: str | None = Field(
        default=None,
        description="contentType attribute (e.g., 'video', 'audio', 'text')",
    )
    mime_type: str | None = Field(
        default=None,
        description="mimeType attribute (e.g., 'video/mp4')",
    )
    codecs: str | None = Field(
        default=None,
        description="Codecs string shared by all Representations",
    )
    lang: str | None = Field(
        default=None,
        description="Language tag, passed through verbatim",
    )
    audio_channel_configurations: list[Descriptor] = Field(
        default_factory=list,
        description="AdaptationSet-level channel configurations in document order",
    )
    representations: list[Representation] = Field(
        default_factory=list,
        description="Representations in document order",
    )


class Period(BaseModel):
    """A manifest time segment grouping AdaptationSets."""

    model_config = ConfigDict(frozen=True)

    id: str | None = Field(
        default=None,
        description="Period identifier",
    )
    adaptation_sets: list[AdaptationSet] = Field(
        default_factory=list,
        description="AdaptationSets in document order",
    )


class MPD(BaseModel):
    """Root of a parsed Media Presentation Description."""

    model_config = ConfigDict(frozen=True)

    periods: list[Period] = Field(
        default_factory=list,
        description="Periods in document order",
    )


class VideoStream(BaseModel):
    """Summary of one video Representation."""

    model_config = ConfigDict(frozen=True)

    codec: str = Field(default=UNKNOWN, min_length=1)
    bitrate: str = Field(default=UNKNOWN, min_length=1)
    resolution: str = Field(default=UNKNOWN, min_length=1)


class AudioStream(BaseModel):
    """Summary of one audio Representation."""

    model_config = ConfigDict(frozen=True)

    codec: str = Field(default=UNKNOWN, min_length=1)
    bitrate: str = Field(default=UNKNOWN, min_length=1)
    channels: str = Field(
        default=UNKNOWN,
        min_length=1,
        description="Channel count, or hex channel mask for Dolby schemes",
    )
    language: str = Field(default=UNKNOWN, min_length=1)


class ManifestSummary(BaseModel):
    """Video and audio streams of a manifest, in document order."""

    model_config = ConfigDict(frozen=True)

    videos: list[VideoStream] = Field(default_factory=list)
    audios: list[AudioStream] = Field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        """Check if no stream was summarized."""
        return not self.videos and not self.audios


class Diagnostic(BaseModel):
    """Non-fatal note about an AdaptationSet that was skipped."""

    model_config = ConfigDict(frozen=True)

    period_index: Annotated[int, Field(ge=0)]
    adaptation_set_index: Annotated[int, Field(ge=0)]
    adaptation_set_id: str | None = None
    code: str = Field(
        min_length=1,
        description="Machine-readable reason (e.g., 'MISSING_MEDIA_TYPE')",
    )
    reason: str = Field(min_length=1)

    @property
    def position(self) -> str:
        """Human-readable location (e.g., 'Period 0, AdaptationSet 2')."""
        return f"Period {self.period_index}, AdaptationSet {self.adaptation_set_index}"

    def __str__(self) -> str:
        return f"{self.position}: {self.reason}"
