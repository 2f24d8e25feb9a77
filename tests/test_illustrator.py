"""
Tests for the infographic generator module.
"""

import pytest
from google.genai import types

from app.core.illustrator import InfographicGenerator, extract_image_data_url
from app.utils.error_handling import NoImageDataError


def test_extract_image_after_text_part(image_response, image_part):
    """Test that the first inline-data part is used, skipping text parts."""
    response = image_response(types.Part(text="Here is your infographic"), image_part)

    assert extract_image_data_url(response) == "data:image/png;base64,QQ=="


def test_extract_image_uses_first_image(image_response, image_part):
    second = types.Part(inline_data=types.Blob(mime_type="image/png", data=b"B"))
    response = image_response(image_part, second)

    assert extract_image_data_url(response) == "data:image/png;base64,QQ=="


def test_extract_image_without_inline_data(image_response):
    response = image_response(types.Part(text="I can only describe it in words."))

    with pytest.raises(NoImageDataError):
        extract_image_data_url(response)


def test_extract_image_without_candidates():
    with pytest.raises(NoImageDataError):
        extract_image_data_url(types.GenerateContentResponse(candidates=[]))


def test_generate(mock_genai_client, image_response, image_part):
    """Test one image generation call against a mocked client."""
    mock_genai_client.models.generate_content.return_value = image_response(image_part)
    generator = InfographicGenerator(client=mock_genai_client)

    image_url = generator.generate("A whiteboard drawing of the sun")

    assert image_url == "data:image/png;base64,QQ=="
    kwargs = mock_genai_client.models.generate_content.call_args.kwargs
    assert kwargs["contents"].parts[0].text == "A whiteboard drawing of the sun"
    assert len(kwargs["contents"].parts) == 1
    assert kwargs["config"].image_config.aspect_ratio == "16:9"
    assert kwargs["config"].image_config.image_size == "2K"


def test_generate_without_image(mock_genai_client, image_response):
    mock_genai_client.models.generate_content.return_value = image_response(
        types.Part(text="no image today")
    )
    generator = InfographicGenerator(client=mock_genai_client)

    with pytest.raises(NoImageDataError):
        generator.generate("prompt")
