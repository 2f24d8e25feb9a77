"""
MindCanvas: YouTube videos as hand-drawn infographics.

This application researches a YouTube video with a search-grounded Gemini
model and renders the findings as a single illustrated summary image.
"""

from app.config import config

__version__ = config.APP_VERSION
