"""
Configuration settings for the MindCanvas application.
"""

import os
from pathlib import Path
from dotenv import load_dotenv


# Ensure environment variables are loaded
load_dotenv()


class Config:
    """Base configuration class."""

    # Application info
    APP_NAME = "MindCanvas"
    APP_VERSION = "0.2.0"

    # Data directories
    BASE_DIR = Path(__file__).resolve().parent.parent.absolute()
    DATA_DIR = BASE_DIR / "data"
    OUTPUT_DIR = DATA_DIR / "infographics"

    # API keys
    GEMINI_API_KEY = os.getenv("GEMINI_API_KEY")

    # Default models
    ANALYSIS_MODEL = os.getenv("ANALYSIS_MODEL", "gemini-3-pro-preview")
    IMAGE_MODEL = os.getenv("IMAGE_MODEL", "gemini-3-pro-image-preview")
    THINKING_BUDGET = int(os.getenv("THINKING_BUDGET", "32768"))

    # Image output
    IMAGE_ASPECT_RATIO = "16:9"
    IMAGE_SIZE = "2K"
    DOWNLOAD_PREFIX = "mindcanvas-visual"

    PUBLIC_URL = os.getenv("PUBLIC_URL", "http://localhost:8000")

    # Create data directories if they don't exist
    @classmethod
    def initialize(cls):
        """Initialize the application configuration."""
        cls.OUTPUT_DIR.mkdir(parents=True, exist_ok=True)

        if not cls.GEMINI_API_KEY:
            print("WARNING: GEMINI_API_KEY environment variable not set.")
            print("Falling back to GOOGLE_API_KEY or a key selected in the UI.")


class DevelopmentConfig(Config):
    """Development configuration."""

    DEBUG = True
    LOG_LEVEL = "DEBUG"


class ProductionConfig(Config):
    """Production configuration."""

    DEBUG = False
    LOG_LEVEL = "INFO"


# Determine which configuration to use based on environment
def get_config():
    """Get the appropriate configuration based on environment."""
    env = os.getenv("ENVIRONMENT", "development").lower()
    if env == "production":
        return ProductionConfig
    else:
        return DevelopmentConfig


# Create a config instance
config = get_config()
config.initialize()
