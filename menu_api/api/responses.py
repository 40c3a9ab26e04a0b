# menu_api/api/responses.py
"""
Uniform response envelope: {"success": true, "data": ...} on success,
{"success": false, "error": "..."} on failure.
"""

import logging
from functools import wraps

from flask import jsonify
from pydantic import BaseModel

from menu_api.core.errors import MenuApiError
from menu_api.models.response_models import ErrorResponse, SuccessResponse

logger = logging.getLogger(__name__)


def to_payload(result):
    """Turn models (or lists of models) into plain JSON-ready data."""
    if isinstance(result, BaseModel):
        return result.model_dump(by_alias=True)
    if isinstance(result, list):
        return [to_payload(r) for r in result]
    return result


def success(data, status: int = 200):
    return jsonify(SuccessResponse(data=data).model_dump()), status


def failure(message: str, status: int = 500):
    return jsonify(ErrorResponse(error=message).model_dump()), status


def enveloped(handler):
    """
    Wrap a handler returning a JSON-ready payload.

    Known errors become their status code plus message. Anything else is left
    for the app-wide handler, which hides the message.
    """

    @wraps(handler)
    def wrapper(*args, **kwargs):
        try:
            data = handler(*args, **kwargs)
        except MenuApiError as e:
            logger.warning("%s failed: %s", handler.__name__, e.message)
            return failure(e.message, e.status_code)
        return success(data)

    return wrapper
