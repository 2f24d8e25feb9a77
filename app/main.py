"""
Main entry point for the MindCanvas application.
"""

import argparse
import sys
from pathlib import Path
from dotenv import load_dotenv
from typing import Optional

from app.models.schemas import VisualStyle, GenerationResult
from app.core.analyzer import VideoAnalyzer
from app.core.illustrator import InfographicGenerator
from app.core.pipeline import InfographicPipeline
from app.core.credentials import resolve_api_key
from app.config import config
from app.utils.error_handling import InfographicError, user_message
from app.utils.helpers import build_download_filename, data_url_to_bytes, save_json
from app.utils.logger import logging


def save_infographic(result: GenerationResult, output_file: Optional[str] = None) -> Path:
    """Write the generated image to a PNG file, with its summary in a JSON file beside it."""
    if output_file is None:
        output_dir = Path(config.OUTPUT_DIR)
        output_dir.mkdir(parents=True, exist_ok=True)
        output_file = output_dir / build_download_filename()
    else:
        output_file = Path(output_file)
        output_file.parent.mkdir(parents=True, exist_ok=True)

    image_bytes, _ = data_url_to_bytes(result.image_url)
    output_file.write_bytes(image_bytes)
    save_json(result.model_dump(exclude={"image_url"}), output_file.with_suffix(".json"))

    logging.info(f"Infographic saved to: {output_file}")
    return output_file


def create_infographic(
    url: str,
    style: VisualStyle = VisualStyle.WHITEBOARD,
    custom_style_prompt: Optional[str] = None,
    api_key: Optional[str] = None,
    output_file: Optional[str] = None,
) -> GenerationResult:
    """
    Turn a YouTube video into an infographic and save it.

    Args:
        url: YouTube video URL
        style: Visual style of the infographic
        custom_style_prompt: Free-text style used with VisualStyle.CUSTOM
        api_key: Gemini API key (defaults to the configured key)
        output_file: Optional file path to save the image

    Returns:
        GenerationResult object
    """
    api_key = api_key or resolve_api_key()

    analyzer = VideoAnalyzer(api_key=api_key)
    illustrator = InfographicGenerator(api_key=api_key)
    pipeline = InfographicPipeline(analyzer, illustrator)

    result = pipeline.generate(url, style, custom_style_prompt)
    save_infographic(result, output_file)
    return result


def main():
    """Main function to run the application from command line."""
    parser = argparse.ArgumentParser(description="MindCanvas: YouTube video to infographic")
    parser.add_argument("url", help="YouTube video URL")
    parser.add_argument("--style", default=VisualStyle.WHITEBOARD.value,
                        type=lambda s: VisualStyle(s.capitalize()),
                        choices=list(VisualStyle),
                        help="Visual style: whiteboard, notebook or custom")
    parser.add_argument("--custom-prompt", help="Style description for the custom style")
    parser.add_argument("--output", help="Output file path for the PNG")

    args = parser.parse_args()

    # Load environment variables
    load_dotenv()

    try:
        result = create_infographic(args.url, args.style, args.custom_prompt, output_file=args.output)
    except InfographicError as e:
        print(f"Error: {user_message(e)}", file=sys.stderr)
        sys.exit(1)

    print("\n" + "=" * 80)
    print(result.video_title or "Video Summary")
    print("=" * 80)
    print(result.summary)
    print("=" * 80)


if __name__ == "__main__":
    main()
