# -*- coding: utf-8 -*-
"""Centralized error message mapper."""

from services.translation_manager import tr
from services.exceptions import ApiException, ValidationException, NetworkException
from utils.logger import get_logger

logger = get_logger(__name__)


def map_api_error(error: ApiException) -> str:
    """Map API exception to a user-friendly message.

    Technical details are logged only - never shown to the user.
    """
    status = error.status_code

    if status in (400, 422):
        details = _extract_validation_details(error.response_data)
        if details:
            logger.warning(f"API validation error ({status}): {details}")
        return tr("error.api.validation")

    if status == 409:
        logger.warning(f"API conflict (409): {error}")
        return tr("error.api.duplicate")

    if status:
        logger.warning(f"API error ({status}): {error}")

    return tr("error.api.connection")


def map_network_error(error: NetworkException) -> str:
    """Map network exception to user-friendly translated message."""
    msg = str(error.original_error) if error.original_error else ""
    if "timeout" in msg.lower() or "timed out" in msg.lower():
        return tr("error.api.timeout")
    return tr("error.api.connection")


def map_exception(error: Exception, context: str = None) -> str:
    """Map any exception to a user-friendly message.

    Technical details are logged only - never shown to the user.
    """
    if isinstance(error, ApiException):
        if not error.context and context:
            error.context = context
        return map_api_error(error)

    if isinstance(error, NetworkException):
        return map_network_error(error)

    if isinstance(error, ValidationException):
        if error.errors:
            logger.warning(f"Validation error: {error.errors}")
        return tr("error.api.validation")

    logger.warning(f"Unexpected error: {error}")
    return tr("error.api.connection")


def _extract_validation_details(response_data: dict) -> str:
    """Extract validation error details from an API response.

    Handles the FastAPI shape ``{"detail": [{"loc": [...], "msg": ...}]}``
    as well as a plain ``{"detail": "..."}``.
    """
    if not response_data:
        return ""

    detail = response_data.get("detail")
    if isinstance(detail, str):
        return detail

    if isinstance(detail, list):
        lines = []
        for item in detail:
            if isinstance(item, dict):
                loc = ".".join(str(part) for part in item.get("loc", []))
                lines.append(f"• {loc}: {item.get('msg', '')}")
            else:
                lines.append(f"• {item}")
        return "\n".join(lines)

    return ""
