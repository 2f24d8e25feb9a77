"""
Centralized error handling for the application.

Every failure a user can see while turning a video into an infographic is an
``InfographicError``. The message is shown to the user as-is, so subclasses
keep their wording short and human readable.
"""

import json
from typing import Any, Dict

from app.config import config
from app.utils.logger import logging


DEFAULT_ERROR_MESSAGE = "Something went wrong. Please try again."


class InfographicError(Exception):
    """Base class for all request-terminating failures."""

    error_type = "infographic_error"
    status_code = 500
    default_message = DEFAULT_ERROR_MESSAGE

    def __init__(self, message: str = None):
        super().__init__(message or self.default_message)


class EmptyInputError(InfographicError):
    error_type = "empty_input"
    status_code = 400
    default_message = "Please enter a valid YouTube URL."


class NoResponseError(InfographicError):
    error_type = "no_response"
    status_code = 502
    default_message = "No response from AI analysis."


class ModelReportedError(InfographicError):
    """The model answered with a structured ``{"error": ...}`` envelope."""

    error_type = "model_reported_error"
    status_code = 422


class IncompleteDataError(InfographicError):
    error_type = "incomplete_data"
    status_code = 502
    default_message = "Incomplete analysis data received."


class ModelRefusedError(InfographicError):
    """The model answered in prose and the prose reads like a refusal."""

    error_type = "model_refused"
    status_code = 422


class InvalidFormatError(InfographicError):
    error_type = "invalid_format"
    status_code = 502
    default_message = (
        "AI analysis failed to produce valid data. The video might be "
        "inaccessible or the response format was invalid."
    )


class NoImageDataError(InfographicError):
    error_type = "no_image_data"
    status_code = 502
    default_message = "No image data found in response."


class CredentialSelectionFailedError(InfographicError):
    error_type = "credential_selection_failed"
    status_code = 400
    default_message = "Could not select API key. Please try again."


class MissingCredentialsError(InfographicError):
    error_type = "missing_credentials"
    status_code = 401
    default_message = "No API key available. Connect an API key or set GEMINI_API_KEY."


class RequestInProgressError(InfographicError):
    error_type = "request_in_progress"
    status_code = 409
    default_message = "A generation is already in progress."


ERROR_TYPES = {
    cls.error_type: cls
    for cls in (
        EmptyInputError,
        NoResponseError,
        ModelReportedError,
        IncompleteDataError,
        ModelRefusedError,
        InvalidFormatError,
        NoImageDataError,
        CredentialSelectionFailedError,
        MissingCredentialsError,
        RequestInProgressError,
    )
}


def error_from_type(error_type: str, message: str) -> InfographicError:
    """
    Rebuild a typed error from its tag, e.g. after it crossed the HTTP API.

    Unknown tags map to the base ``InfographicError``.
    """
    error_class = ERROR_TYPES.get(error_type, InfographicError)
    return error_class(message)


def user_message(error: Exception) -> str:
    """Message to show the end user for a failed request."""
    message = str(error).strip()
    return message or DEFAULT_ERROR_MESSAGE


def log_diagnostic_info(context: Dict[str, Any]):
    """
    Log diagnostic information for debugging.

    Args:
        context: Dictionary of diagnostic information
    """
    if not config.DEBUG:
        return

    try:
        logging.info(f"Diagnostic info: {json.dumps(context, default=str)}")
    except (TypeError, ValueError) as e:
        logging.error(f"Error logging diagnostic info: {str(e)}")
