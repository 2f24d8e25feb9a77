"""
YouTube URL helpers.
"""

from app.utils.logger import logging


def extract_video_id(url: str) -> str:
    """
    Extract the video ID from a YouTube URL.

    Understands ``watch?v=ID&...`` and ``youtu.be/ID?...`` links. Extraction
    is a hint for the search step only, so anything else yields an empty
    string instead of an error.

    Args:
        url: YouTube URL as typed by the user

    Returns:
        Video ID or "" if it could not be found
    """
    if not url:
        return ""

    if "v=" in url:
        return url.split("v=", 1)[1].split("&", 1)[0]

    if "youtu.be/" in url:
        return url.split("youtu.be/", 1)[1].split("?", 1)[0]

    logging.debug(f"No video ID found in URL: {url}")
    return ""
