"""
API routes for the MindCanvas application.
"""

from typing import List, Optional
from fastapi import APIRouter, Depends, Header

from app.api.schems import (
    ErrorResponse,
    GenerateRequest,
    IllustrateRequest,
    IllustrateResponse,
    StyleInfo,
)
from app.core.analyzer import VideoAnalyzer
from app.core.illustrator import InfographicGenerator
from app.core.pipeline import InfographicPipeline
from app.core.prompts import STYLE_LABELS, style_description
from app.config import config
from app.models.schemas import AnalysisResponse, GenerationResult, VisualStyle
from app.utils.error_handling import EmptyInputError
from app.utils.logger import logging

router = APIRouter(prefix="/api/v1", tags=["infographics"])

ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Empty input or rejected API key"},
    401: {"model": ErrorResponse, "description": "No API key available"},
    422: {"model": ErrorResponse, "description": "The model reported or refused"},
    502: {"model": ErrorResponse, "description": "The model reply was unusable"},
}


# Dependencies
def get_api_key(x_api_key: Optional[str] = Header(default=None)) -> Optional[str]:
    """Key selected by the user, else the configured key."""
    return x_api_key or config.GEMINI_API_KEY or None


def get_analyzer(api_key: Optional[str] = Depends(get_api_key)) -> VideoAnalyzer:
    return VideoAnalyzer(api_key=api_key)


def get_illustrator(api_key: Optional[str] = Depends(get_api_key)) -> InfographicGenerator:
    return InfographicGenerator(api_key=api_key)


@router.get("/styles", response_model=List[StyleInfo])
async def list_styles():
    """List the selectable visual styles."""
    return [
        StyleInfo(style=style, label=STYLE_LABELS[style], description=style_description(style))
        for style in VisualStyle
    ]


@router.post("/analyze", response_model=AnalysisResponse, response_model_by_alias=True,
             responses=ERROR_RESPONSES)
def analyze_video(
    request: GenerateRequest,
    analyzer: VideoAnalyzer = Depends(get_analyzer),
):
    """
    Research a YouTube video and return its summary and image prompt.

    This call is slow: the model searches the web and reasons at length.
    """
    if not request.url.strip():
        raise EmptyInputError()

    logging.info(f"Analyze request for {request.url} ({request.style.value})")
    return analyzer.analyze(request.url.strip(), request.style, request.custom_style_prompt)


@router.post("/illustrate", response_model=IllustrateResponse, responses=ERROR_RESPONSES)
def illustrate(
    request: IllustrateRequest,
    illustrator: InfographicGenerator = Depends(get_illustrator),
):
    """Render an image prompt into a PNG data URI."""
    return IllustrateResponse(image_url=illustrator.generate(request.image_prompt))


@router.post("/generate", response_model=GenerationResult, responses=ERROR_RESPONSES)
def generate_infographic(
    request: GenerateRequest,
    analyzer: VideoAnalyzer = Depends(get_analyzer),
    illustrator: InfographicGenerator = Depends(get_illustrator),
):
    """Run analysis and image synthesis back to back."""
    pipeline = InfographicPipeline(analyzer, illustrator)
    return pipeline.generate(request.url, request.style, request.custom_style_prompt)
