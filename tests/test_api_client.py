"""
Tests for the front-end API client.
"""

import pytest
from unittest.mock import MagicMock, patch

from app.frontend.api_client import ApiClient
from app.models.schemas import VisualStyle
from app.utils.error_handling import InfographicError, ModelReportedError


def make_response(status_code, body):
    response = MagicMock()
    response.ok = status_code < 400
    response.status_code = status_code
    response.json.return_value = body
    return response


@pytest.fixture
def api_client():
    return ApiClient("http://localhost:8000", api_key="user-key")


@patch("app.frontend.api_client.requests.post")
def test_analyze(mock_post, api_client):
    """Test that analyze posts the request and parses the camelCase reply."""
    mock_post.return_value = make_response(
        200, {"videoTitle": "T", "summary": "s", "imagePrompt": "p"}
    )

    analysis = api_client.analyze("https://youtu.be/XYZ789", VisualStyle.CUSTOM, "Neon")

    assert analysis.video_title == "T"
    assert analysis.image_prompt == "p"
    args, kwargs = mock_post.call_args
    assert args[0] == "http://localhost:8000/api/v1/analyze"
    assert kwargs["json"] == {
        "url": "https://youtu.be/XYZ789",
        "style": "Custom",
        "custom_style_prompt": "Neon",
    }
    assert kwargs["headers"] == {"X-Api-Key": "user-key"}


@patch("app.frontend.api_client.requests.post")
def test_generate(mock_post, api_client):
    mock_post.return_value = make_response(200, {"image_url": "data:image/png;base64,QQ=="})

    assert api_client.generate("p") == "data:image/png;base64,QQ=="
    assert mock_post.call_args[0][0] == "http://localhost:8000/api/v1/illustrate"


@patch("app.frontend.api_client.requests.post")
def test_server_error_is_rebuilt(mock_post, api_client):
    """Test that server-side failures come back typed and with their message."""
    mock_post.return_value = make_response(
        422, {"detail": "video not found", "error_type": "model_reported_error"}
    )

    with pytest.raises(ModelReportedError) as exc_info:
        api_client.analyze("https://youtu.be/XYZ789", VisualStyle.WHITEBOARD)

    assert str(exc_info.value) == "video not found"


@patch("app.frontend.api_client.requests.post")
def test_validation_error_detail(mock_post, api_client):
    mock_post.return_value = make_response(422, {"detail": [{"msg": "field required"}]})

    with pytest.raises(InfographicError) as exc_info:
        api_client.generate("p")

    assert "422" in str(exc_info.value)


