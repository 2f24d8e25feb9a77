from pydantic import BaseModel
from typing import Optional
from app.models.schemas import VisualStyle


class GenerateRequest(BaseModel):
    """Model for requesting a video analysis or a full generation."""
    url: str
    style: VisualStyle = VisualStyle.WHITEBOARD
    custom_style_prompt: Optional[str] = None


class IllustrateRequest(BaseModel):
    """Model for requesting image synthesis from a prompt."""
    image_prompt: str


class IllustrateResponse(BaseModel):
    """Model for image synthesis responses."""
    image_url: str


class StyleInfo(BaseModel):
    """Model describing a selectable visual style."""
    style: VisualStyle
    label: str
    description: str


class ErrorResponse(BaseModel):
    """Model for error responses."""
    detail: str
    error_type: str
