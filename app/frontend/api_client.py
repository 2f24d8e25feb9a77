"""
API client for communicating with the MindCanvas backend.
"""

import requests
from typing import Dict, Any, Optional
from urllib.parse import urljoin
from app.config import config
from app.models.schemas import AnalysisResponse, VisualStyle
from app.utils.error_handling import InfographicError, error_from_type


class ApiClient:
    """
    Client for interacting with the MindCanvas API.

    Implements ``analyze`` and ``generate`` so it can stand in for the
    in-process analyzer and illustrator inside an ``InfographicPipeline``.
    """

    def __init__(self, base_url: str = config.PUBLIC_URL, api_key: Optional[str] = None):
        """
        Initialize the API client.

        Args:
            base_url: Base URL of the API
            api_key: Gemini API key selected by the user, sent as ``X-Api-Key``
        """
        self.base_url = base_url
        self.api_base = urljoin(base_url, "/api/v1/")
        self.api_key = api_key

    def _url(self, endpoint: str) -> str:
        """Get the full URL for an endpoint."""
        return urljoin(self.api_base, endpoint)

    def _headers(self) -> Dict[str, str]:
        if self.api_key:
            return {"X-Api-Key": self.api_key}
        return {}

    def _handle(self, response: requests.Response) -> Any:
        """Return the JSON body, or raise the server's error with its message."""
        if response.ok:
            return response.json()

        try:
            body = response.json()
        except ValueError:
            body = {}

        detail = body.get("detail") if isinstance(body, dict) else None
        if not isinstance(detail, str):
            # FastAPI validation errors carry a list here
            raise InfographicError(f"Request failed with status {response.status_code}")
        raise error_from_type(body.get("error_type", ""), detail)

    def analyze(
        self,
        video_url: str,
        style: VisualStyle,
        custom_style_prompt: Optional[str] = None,
    ) -> AnalysisResponse:
        """
        Request the analysis of a video.

        Args:
            video_url: YouTube video URL
            style: Visual style for the image prompt
            custom_style_prompt: Free-text style used with the Custom style

        Returns:
            AnalysisResponse with summary and image prompt
        """
        response = requests.post(
            self._url("analyze"),
            json={
                "url": video_url,
                "style": VisualStyle(style).value,
                "custom_style_prompt": custom_style_prompt,
            },
            headers=self._headers(),
        )
        return AnalysisResponse.model_validate(self._handle(response))

    def generate(self, image_prompt: str) -> str:
        """
        Request image synthesis for a prompt.

        Args:
            image_prompt: Prompt from the analysis step

        Returns:
            PNG data URI
        """
        response = requests.post(
            self._url("illustrate"),
            json={"image_prompt": image_prompt},
            headers=self._headers(),
        )
        return self._handle(response)["image_url"]
