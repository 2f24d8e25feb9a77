"""
Tests for YouTube URL helpers.
"""

import pytest

from app.core.youtube import extract_video_id


@pytest.mark.parametrize(
    "url, expected",
    [
        ("https://www.youtube.com/watch?v=ABC123&t=5", "ABC123"),
        ("https://youtu.be/XYZ789?foo=1", "XYZ789"),
        ("https://www.youtube.com/watch?v=dQw4w9WgXcQ", "dQw4w9WgXcQ"),
        ("https://youtu.be/dQw4w9WgXcQ", "dQw4w9WgXcQ"),
    ],
)
def test_extract_video_id(url, expected):
    """Test extracting IDs from the two supported URL shapes."""
    assert extract_video_id(url) == expected


@pytest.mark.parametrize(
    "url",
    ["https://example.com/some/page", "not a url", "", None],
)
def test_extract_video_id_unknown_shape(url):
    """Test that unknown URLs give an empty ID instead of an error."""
    assert extract_video_id(url) == ""
