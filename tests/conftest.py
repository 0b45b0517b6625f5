"""Pytest configuration and shared fixtures.

This module provides:
- Sample MPD documents (complete, sparse, multi-period)
- Document tree builders
- Environment isolation for settings
"""

from typing import Generator

import pytest

from dash_summary.shared.config import clear_settings_cache
from dash_summary.shared.models import (
    MPD,
    AdaptationSet,
    Descriptor,
    Period,
    Representation,
)

CHANNEL_SCHEME = "urn:mpeg:dash:23003:3:audio_channel_configuration:2011"
DOLBY_CHANNEL_SCHEME = "tag:dolby.com,2014:dash:audio_channel_configuration:2011"


# =============================================================================
# Environment Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Run every test against default settings."""
    for name in (
        "FETCH_TIMEOUT_SECONDS",
        "MAX_MANIFEST_SIZE_MB",
        "ALLOWED_CONTENT_TYPES",
        "USER_AGENT",
        "JSON_INDENT",
        "LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)

    clear_settings_cache()
    yield
    clear_settings_cache()


# =============================================================================
# Sample Data Fixtures
# =============================================================================


@pytest.fixture
def sample_dash_mpd() -> str:
    """Sample DASH MPD manifest with video, audio and subtitle sets."""
    return """<?xml version="1.0" encoding="UTF-8"?>
<MPD xmlns="urn:mpeg:dash:schema:mpd:2011"
     xmlns:cenc="urn:mpeg:cenc:2013"
     type="static"
     mediaPresentationDuration="PT24M0.5S"
     minBufferTime="PT2S"
     profiles="urn:mpeg:dash:profile:isoff-on-demand:2011">

    <Period id="1" start="PT0S">
        <AdaptationSet id="1" mimeType="video/mp4" contentType="video" segmentAlignment="true">
            <Representation id="h264_1080p" bandwidth="6000000" width="1920" height="1080" codecs="avc1.640028">
                <SegmentTemplate media="h264_1080p/segment_$Number$.m4s" initialization="h264_1080p/init.m4s" duration="6000" timescale="1000"/>
            </Representation>
            <Representation id="h264_720p" bandwidth="3500000" width="1280" height="720" codecs="avc1.640020">
                <SegmentTemplate media="h264_720p/segment_$Number$.m4s" initialization="h264_720p/init.m4s" duration="6000" timescale="1000"/>
            </Representation>
            <Representation id="h265_1080p" bandwidth="4500000" width="1920" height="1080" codecs="hvc1.1.6.L120">
                <SegmentTemplate media="h265_1080p/segment_$Number$.m4s" initialization="h265_1080p/init.m4s" duration="6000" timescale="1000"/>
            </Representation>
        </AdaptationSet>

        <AdaptationSet id="2" mimeType="audio/mp4" contentType="audio" lang="ja" segmentAlignment="true">
            <Representation id="audio_ja" bandwidth="128000" codecs="mp4a.40.2" audioSamplingRate="48000">
                <AudioChannelConfiguration schemeIdUri="urn:mpeg:dash:23003:3:audio_channel_configuration:2011" value="2"/>
                <SegmentTemplate media="audio_ja/segment_$Number$.m4s" initialization="audio_ja/init.m4s" duration="6000" timescale="1000"/>
            </Representation>
        </AdaptationSet>

        <AdaptationSet id="3" mimeType="audio/mp4" contentType="audio" lang="en" codecs="ec-3" segmentAlignment="true">
            <AudioChannelConfiguration schemeIdUri="tag:dolby.com,2014:dash:audio_channel_configuration:2011" value="F801"/>
            <Representation id="audio_en_ec3" bandwidth="384000" audioSamplingRate="48000">
                <SegmentTemplate media="audio_en/segment_$Number$.m4s" initialization="audio_en/init.m4s" duration="6000" timescale="1000"/>
            </Representation>
        </AdaptationSet>

        <AdaptationSet id="4" mimeType="text/vtt" contentType="text" lang="en">
            <Representation id="subs_en" bandwidth="256"/>
        </AdaptationSet>
    </Period>
</MPD>
"""


@pytest.fixture
def two_rendition_mpd() -> str:
    """One video set sharing codecs across two representations."""
    return """<?xml version="1.0" encoding="UTF-8"?>
<MPD xmlns="urn:mpeg:dash:schema:mpd:2011" type="static">
    <Period>
        <AdaptationSet contentType="video" mimeType="video/mp4" codecs="avc1">
            <Representation id="360p" bandwidth="500000" width="640" height="360"/>
            <Representation id="720p" bandwidth="1000000" width="1280" height="720"/>
        </AdaptationSet>
    </Period>
</MPD>
"""


@pytest.fixture
def multi_period_mpd() -> str:
    """Two periods, each with one video and one audio set."""
    return """<?xml version="1.0" encoding="UTF-8"?>
<MPD xmlns="urn:mpeg:dash:schema:mpd:2011" type="static">
    <Period id="ad">
        <AdaptationSet contentType="video" mimeType="video/mp4">
            <Representation bandwidth="800000" width="640" height="360" codecs="avc1.4d401e"/>
        </AdaptationSet>
        <AdaptationSet contentType="audio" mimeType="audio/mp4" lang="en">
            <Representation bandwidth="64000" codecs="mp4a.40.5"/>
        </AdaptationSet>
    </Period>
    <Period id="main">
        <AdaptationSet contentType="video">
            <Representation bandwidth="6000000" width="1920" height="1080"/>
        </AdaptationSet>
        <AdaptationSet contentType="video" mimeType="video/mp4">
            <Representation bandwidth="6000000" width="1920" height="1080" codecs="avc1.640028"/>
        </AdaptationSet>
        <AdaptationSet contentType="audio" mimeType="audio/mp4" lang="ja">
            <Representation bandwidth="128000" codecs="mp4a.40.2">
                <AudioChannelConfiguration schemeIdUri="urn:mpeg:dash:23003:3:audio_channel_configuration:2011" value="6"/>
            </Representation>
        </AdaptationSet>
    </Period>
</MPD>
"""


@pytest.fixture
def malformed_mpd() -> str:
    """Malformed XML (syntax error)."""
    return """<?xml version="1.0" encoding="UTF-8"?>
<MPD>
    <Period>
        <AdaptationSet contentType="video"
    <!-- Missing closing tags -->
"""


# =============================================================================
# Document Tree Builders
# =============================================================================


def video_set(*representations: Representation, **fields) -> AdaptationSet:
    """Build a classified video AdaptationSet."""
    fields.setdefault("content_type", "video")
    fields.setdefault("mime_type", "video/mp4")
    return AdaptationSet(representations=list(representations), **fields)


def audio_set(*representations: Representation, **fields) -> AdaptationSet:
    """Build a classified audio AdaptationSet."""
    fields.setdefault("content_type", "audio")
    fields.setdefault("mime_type", "audio/mp4")
    return AdaptationSet(representations=list(representations), **fields)


def channels(*values: str | None) -> list[Descriptor]:
    """Build channel descriptors with the standard scheme."""
    return [Descriptor(scheme_id_uri=CHANNEL_SCHEME, value=v) for v in values]


def single_period(*adaptation_sets: AdaptationSet) -> MPD:
    """Wrap AdaptationSets in a one-period tree."""
    return MPD(periods=[Period(adaptation_sets=list(adaptation_sets))])
