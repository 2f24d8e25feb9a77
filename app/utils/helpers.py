"""
Helper utility functions for the MindCanvas application.
"""

import base64
import binascii
import json
import time
from typing import Any, Dict, Optional, Tuple

from app.config import config


def build_download_filename(prefix: Optional[str] = None) -> str:
    """
    Build the filename offered when an infographic is downloaded.

    Args:
        prefix: Filename prefix, defaults to the configured download prefix

    Returns:
        Filename of the form ``<prefix>-<epoch millis>.png``
    """
    prefix = prefix or config.DOWNLOAD_PREFIX
    return f"{prefix}-{int(time.time() * 1000)}.png"


def data_url_to_bytes(data_url: str) -> Tuple[bytes, str]:
    """
    Decode a base64 ``data:`` URI.

    Args:
        data_url: URI such as ``data:image/png;base64,iVBOR...``

    Returns:
        Tuple of (raw bytes, mime type)
    """
    if not data_url.startswith("data:") or "," not in data_url:
        raise ValueError("Not a data URI")

    header, payload = data_url.split(",", 1)
    mime = header[len("data:"):].split(";")[0] or "application/octet-stream"
    if ";base64" not in header:
        raise ValueError("Only base64 data URIs are supported")

    try:
        return base64.b64decode(payload, validate=True), mime
    except binascii.Error as e:
        raise ValueError(f"Invalid base64 payload: {e}") from e


def save_json(data: Dict[str, Any], filepath: str, pretty: bool = True) -> None:
    """
    Save data to a JSON file.

    Args:
        data: Data to save
        filepath: Path to save the file
        pretty: Whether to format the JSON for readability
    """
    with open(filepath, 'w', encoding='utf-8') as f:
        if pretty:
            json.dump(data, f, indent=2, ensure_ascii=False, default=str)
        else:
            json.dump(data, f, ensure_ascii=False, default=str)
