"""
Module for rendering an infographic from an image prompt.
"""

import base64
from typing import Optional

from google import genai
from google.genai import types

from app.core.credentials import create_client
from app.models.schemas import ImageGenerationConfig
from app.utils.error_handling import NoImageDataError
from app.utils.logger import logging


DATA_URL_PREFIX = "data:image/png;base64,"


def extract_image_data_url(response: types.GenerateContentResponse) -> str:
    """
    Return the first inline image of a response as a PNG data URI.

    Args:
        response: Image model response

    Returns:
        ``data:image/png;base64,...`` string

    Raises:
        NoImageDataError: if no part carries inline data
    """
    candidates = response.candidates or []
    content = candidates[0].content if candidates else None
    parts = (content.parts if content else None) or []

    for part in parts:
        inline_data = part.inline_data
        if inline_data is None or not inline_data.data:
            continue
        data = inline_data.data
        if isinstance(data, bytes):
            data = base64.b64encode(data).decode("ascii")
        return f"{DATA_URL_PREFIX}{data}"

    raise NoImageDataError()


class InfographicGenerator:
    """Class to handle the image synthesis step."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        client: Optional[genai.Client] = None,
        image_config: Optional[ImageGenerationConfig] = None,
    ):
        """
        Initialize the generator.

        Args:
            api_key: Gemini API key (if None, google-genai reads it from the environment)
            client: Pre-built google-genai client, mostly for tests
            image_config: Model settings for the image call
        """
        self.api_key = api_key
        self._client = client
        self.image_config = image_config or ImageGenerationConfig()

    @property
    def client(self) -> genai.Client:
        """Client built on first use."""
        if self._client is None:
            self._client = create_client(self.api_key)
        return self._client

    def generate(self, image_prompt: str) -> str:
        """
        Render an image prompt.

        Args:
            image_prompt: Prompt produced by the analysis step

        Returns:
            The rendered image as a PNG data URI
        """
        logging.info(f"Generating infographic with {self.image_config.model}")
        response = self.client.models.generate_content(
            model=self.image_config.model,
            contents=types.Content(role="user", parts=[types.Part(text=image_prompt)]),
            config=types.GenerateContentConfig(
                image_config=types.ImageConfig(
                    aspect_ratio=self.image_config.aspect_ratio,
                    image_size=self.image_config.image_size,
                ),
            ),
        )

        image_url = extract_image_data_url(response)
        logging.info("Infographic generated")
        return image_url
