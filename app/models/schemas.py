"""
Data models for the MindCanvas application.
"""
import time
from enum import Enum
from typing import Optional, Union
from pydantic import BaseModel, ConfigDict, Field, field_validator
from app.config import config


class VisualStyle(str, Enum):
    """Visual aesthetics an infographic can be drawn in."""
    WHITEBOARD = "Whiteboard"
    NOTEBOOK = "Notebook"
    CUSTOM = "Custom"


class AppStatus(str, Enum):
    """Lifecycle of a single generation request."""
    IDLE = "IDLE"
    ANALYZING = "ANALYZING"
    GENERATING = "GENERATING"
    COMPLETE = "COMPLETE"
    ERROR = "ERROR"


class AnalysisResponse(BaseModel):
    """Structured result of the video analysis step."""
    model_config = ConfigDict(populate_by_name=True)

    video_title: Optional[str] = Field(default=None, alias="videoTitle")
    summary: str
    image_prompt: str = Field(alias="imagePrompt")

    @field_validator("video_title", mode="before")
    def drop_non_text_title(cls, v):
        return v if isinstance(v, str) else None

    @field_validator("summary", "image_prompt", mode="before")
    def coerce_to_text(cls, v):
        # Models sometimes send the summary points as a JSON list
        if isinstance(v, list):
            return "\n".join(str(item) for item in v)
        if v is None or isinstance(v, str):
            return v
        return str(v)

    @field_validator("summary", "image_prompt")
    def require_content(cls, v):
        if not v or not v.strip():
            raise ValueError("must not be empty")
        return v


class AnalysisFailure(BaseModel):
    """Error envelope the analysis model returns when it cannot verify a video."""
    error: str


AnalysisOutcome = Union[AnalysisResponse, AnalysisFailure]


class AnalysisConfig(BaseModel):
    """Configuration for the search-grounded analysis call."""
    model: str = config.ANALYSIS_MODEL
    thinking_budget: int = config.THINKING_BUDGET
    use_search: bool = True


class ImageGenerationConfig(BaseModel):
    """Configuration for the image synthesis call."""
    model: str = config.IMAGE_MODEL
    aspect_ratio: str = config.IMAGE_ASPECT_RATIO
    image_size: str = config.IMAGE_SIZE


class GenerationResult(BaseModel):
    """Terminal artifact of one request: the rendered image and its summary."""
    image_url: str
    summary: str
    video_title: Optional[str] = None
    created_at: str = Field(default_factory=lambda: time.strftime("%Y-%m-%d %H:%M:%S"))
