"""Unit tests for AdaptationSet classification."""

import pytest

from dash_summary.shared.models import AdaptationSet, MediaKind
from dash_summary.summary.classifier import classify_adaptation_set, has_media_type


class TestClassifier:
    """Tests for media kind classification."""

    def test_video(self):
        """Test ('video', 'video/mp4') is classified as video."""
        adaptation_set = AdaptationSet(content_type="video", mime_type="video/mp4")

        assert classify_adaptation_set(adaptation_set) is MediaKind.VIDEO

    def test_audio(self):
        """Test ('audio', 'audio/mp4') is classified as audio."""
        adaptation_set = AdaptationSet(content_type="audio", mime_type="audio/mp4")

        assert classify_adaptation_set(adaptation_set) is MediaKind.AUDIO

    @pytest.mark.parametrize(
        "content_type, mime_type",
        [
            ("video", None),
            (None, "video/mp4"),
            (None, None),
            ("audio", "video/mp4"),
            ("video", "audio/mp4"),
            ("text", "text/vtt"),
            ("video", "application/mp4"),
            ("Video", "video/mp4"),
            ("video", "video/webm"),
        ],
    )
    def test_unclassified(self, content_type, mime_type):
        """Test every other combination is unclassified."""
        adaptation_set = AdaptationSet(content_type=content_type, mime_type=mime_type)

        assert classify_adaptation_set(adaptation_set) is MediaKind.UNCLASSIFIED

    def test_has_media_type(self):
        """Test media type presence requires both attributes."""
        assert has_media_type(AdaptationSet(content_type="text", mime_type="text/vtt"))
        assert not has_media_type(AdaptationSet(content_type="video"))
        assert not has_media_type(AdaptationSet(mime_type="video/mp4"))
