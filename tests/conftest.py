"""
Configuration for pytest tests.
"""

import os
import pytest
from unittest.mock import MagicMock
from google.genai import types


@pytest.fixture(scope="session", autouse=True)
def setup_test_environment():
    """Setup test environment variables."""
    os.environ["GEMINI_API_KEY"] = os.environ.get("GEMINI_API_KEY", "test_api_key")
    os.environ["ENVIRONMENT"] = "development"
    yield


@pytest.fixture(scope="session")
def test_video_url():
    """Return a test YouTube video URL."""
    return "https://www.youtube.com/watch?v=ABC123&t=5"


def make_text_response(text):
    """Build a text model response carrying ``text`` as its only part."""
    if text is None:
        return types.GenerateContentResponse(candidates=[])
    return types.GenerateContentResponse(
        candidates=[
            types.Candidate(content=types.Content(role="model", parts=[types.Part(text=text)]))
        ]
    )


def make_image_response(*parts):
    """Build an image model response from the given parts."""
    return types.GenerateContentResponse(
        candidates=[types.Candidate(content=types.Content(role="model", parts=list(parts)))]
    )


@pytest.fixture
def text_response():
    """Factory fixture for text model responses."""
    return make_text_response


@pytest.fixture
def image_response():
    """Factory fixture for image model responses."""
    return make_image_response


@pytest.fixture
def valid_analysis_text():
    """Return a well-formed analysis reply."""
    return (
        '{"videoTitle": "How Fusion Works", '
        '"summary": "1. Atoms fuse\\n2. Energy is released\\n3. Stars do it", '
        '"imagePrompt": "A whiteboard drawing of the sun"}'
    )


@pytest.fixture
def image_part():
    """Return a part carrying inline PNG data (the byte b"A")."""
    return types.Part(inline_data=types.Blob(mime_type="image/png", data=b"A"))


@pytest.fixture
def mock_genai_client():
    """Fixture for a google-genai client whose generate_content is mocked."""
    return MagicMock()
