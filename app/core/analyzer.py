"""
Module for researching a YouTube video with a search-grounded Gemini model.
"""

import json
import re
from typing import Any, Optional, Tuple

from google import genai
from google.genai import types
from pydantic import ValidationError

from app.core.credentials import create_client
from app.core.prompts import SYSTEM_INSTRUCTION, build_analysis_prompt, style_description
from app.core.youtube import extract_video_id
from app.models.schemas import (
    AnalysisConfig,
    AnalysisFailure,
    AnalysisOutcome,
    AnalysisResponse,
    VisualStyle,
)
from app.utils.error_handling import (
    IncompleteDataError,
    InvalidFormatError,
    ModelRefusedError,
    ModelReportedError,
    NoResponseError,
)
from app.utils.logger import logging


FENCED_JSON_PATTERN = re.compile(r"```(?:json)?\s*(\{[\s\S]*?\})\s*```")

REFUSAL_PHRASES = (
    "unavailable",
    "restricted",
    "cannot access",
    "unable to access",
    "sorry",
)


def extract_json_candidate(text: str) -> str:
    """
    Pick the part of a model reply most likely to be the JSON payload.

    A fenced code block wins; otherwise the span from the first ``{`` to the
    last ``}``; otherwise the trimmed text itself.
    """
    candidate = text.strip()

    match = FENCED_JSON_PATTERN.search(candidate)
    if match:
        return match.group(1)

    start = candidate.find("{")
    end = candidate.rfind("}")
    if start != -1 and end > start:
        return candidate[start:end + 1]

    return candidate


def detect_refusal(text: str) -> bool:
    """Whether a prose reply reads like the model refusing or failing to find the video."""
    lower_text = (text or "").lower()
    return any(phrase in lower_text for phrase in REFUSAL_PHRASES)


def decode_analysis_payload(data: Any) -> AnalysisOutcome:
    """
    Decode parsed JSON into either a success or a failure envelope.

    Raises:
        IncompleteDataError: if the payload is neither a usable result nor an error
    """
    if not isinstance(data, dict):
        raise IncompleteDataError()

    if data.get("error"):
        return AnalysisFailure(error=str(data["error"]))

    try:
        return AnalysisResponse.model_validate(data)
    except ValidationError as e:
        logging.warning(f"Analysis payload failed validation: {e}")
        raise IncompleteDataError() from e


def parse_analysis_response(text: Optional[str]) -> AnalysisResponse:
    """
    Turn the raw analysis reply into a structured result.

    Args:
        text: Reply text, which may carry markdown fences or surrounding prose

    Returns:
        AnalysisResponse with summary and image prompt

    Raises:
        NoResponseError, ModelReportedError, IncompleteDataError,
        ModelRefusedError, InvalidFormatError
    """
    if not text:
        raise NoResponseError()

    candidate = extract_json_candidate(text)

    try:
        data = json.loads(candidate)
    except json.JSONDecodeError:
        logging.error(f"Failed to parse analysis JSON: {text}")
        if detect_refusal(text):
            raise ModelRefusedError(text)
        raise InvalidFormatError()

    outcome = decode_analysis_payload(data)
    if isinstance(outcome, AnalysisFailure):
        raise ModelReportedError(outcome.error)
    return outcome


class VideoAnalyzer:
    """Class to handle the video analysis step."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        client: Optional[genai.Client] = None,
        analysis_config: Optional[AnalysisConfig] = None,
    ):
        """
        Initialize the analyzer.

        Args:
            api_key: Gemini API key (if None, google-genai reads it from the environment)
            client: Pre-built google-genai client, mostly for tests
            analysis_config: Model settings for the analysis call
        """
        self.api_key = api_key
        self._client = client
        self.analysis_config = analysis_config or AnalysisConfig()

    @property
    def client(self) -> genai.Client:
        """Client built on first use, so requests can be validated without credentials."""
        if self._client is None:
            self._client = create_client(self.api_key)
        return self._client

    def build_request(
        self,
        video_url: str,
        style: VisualStyle,
        custom_style_prompt: Optional[str] = None,
    ) -> Tuple[str, types.GenerateContentConfig]:
        """Build the prompt and model config for one video."""
        video_id = extract_video_id(video_url)
        prompt = build_analysis_prompt(
            video_url, style_description(style, custom_style_prompt), video_id
        )

        # response_mime_type cannot be combined with the search tool
        tools = []
        if self.analysis_config.use_search:
            tools.append(types.Tool(google_search=types.GoogleSearch()))

        content_config = types.GenerateContentConfig(
            tools=tools,
            system_instruction=SYSTEM_INSTRUCTION,
            thinking_config=types.ThinkingConfig(
                thinking_budget=self.analysis_config.thinking_budget
            ),
        )
        return prompt, content_config

    def analyze(
        self,
        video_url: str,
        style: VisualStyle,
        custom_style_prompt: Optional[str] = None,
    ) -> AnalysisResponse:
        """
        Research a video and produce its summary and image prompt.

        Args:
            video_url: YouTube URL
            style: Visual style for the image prompt
            custom_style_prompt: Free-text style used with VisualStyle.CUSTOM

        Returns:
            AnalysisResponse
        """
        prompt, content_config = self.build_request(video_url, style, custom_style_prompt)

        logging.info(f"Analyzing video {video_url} with {self.analysis_config.model}")
        response = self.client.models.generate_content(
            model=self.analysis_config.model,
            contents=prompt,
            config=content_config,
        )

        analysis = parse_analysis_response(response.text)
        logging.info(f"Analysis complete: {analysis.video_title or 'untitled video'}")
        return analysis
