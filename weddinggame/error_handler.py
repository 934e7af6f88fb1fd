"""Map raised errors to JSON HTTP responses."""

from __future__ import annotations

import json
import logging
from http import HTTPStatus

from werkzeug.wrappers import Response

from .errors import (
    AccessTokenNotFoundError,
    AuthenticationError,
    AuthorizationError,
    NotFoundError,
    ValidationError,
)

logger = logging.getLogger(__name__)

_FIELD_VALIDATION_MARKER = "Error:Field validation for"


def handle_error(error: BaseException | None) -> tuple[int, dict[str, str]] | None:
    """Return the HTTP status and JSON payload for an error, or None without one."""
    if error is None:
        return None

    if isinstance(error, (AccessTokenNotFoundError, AuthenticationError, AuthorizationError)):
        return HTTPStatus.FORBIDDEN, {"status": "error", "message": "access denied"}

    if isinstance(error, ValidationError) or _FIELD_VALIDATION_MARKER in str(error):
        return HTTPStatus.BAD_REQUEST, {"status": "error", "message": str(error)}

    if isinstance(error, NotFoundError):
        return HTTPStatus.NOT_FOUND, {"status": "error", "message": str(error)}

    logger.error("%s", error)
    return HTTPStatus.INTERNAL_SERVER_ERROR, {
        "status": "error",
        "message": "An unexpected error occurred.",
    }


def error_response(error: BaseException | None) -> Response | None:
    """Build a JSON response for an error, or return None without one."""
    handled = handle_error(error)
    if handled is None:
        return None
    status, payload = handled
    body = json.dumps(payload, separators=(",", ":"), sort_keys=True)
    return Response(body, status=int(status), mimetype="application/json")