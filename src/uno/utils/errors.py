"""
Errors raised by the UNO tool service and the JSON bodies the Flask app
returns for them.

Every error body carries "error" (message) and "error_code"; tool errors
add "details" when they have any.
"""

import logging
import traceback
from typing import Optional, Dict, Any
from flask import jsonify, request
from werkzeug.exceptions import HTTPException

logger = logging.getLogger(__name__)


class APIError(Exception):
    """An error with a machine-readable code and the HTTP status to answer with."""

    def __init__(
        self,
        message: str,
        error_code: str,
        status_code: int = 500,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.status_code = status_code
        self.details = details or {}


class ValidationError(APIError):
    """Tool arguments were missing, mistyped or out of range."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            message=message,
            error_code="VALIDATION_ERROR",
            status_code=400,
            details=details
        )


class NotFoundError(APIError):
    """Unknown tool name or URL."""

    def __init__(self, resource_type: str, resource_id: str):
        super().__init__(
            message=f"{resource_type} '{resource_id}' not found.",
            error_code="NOT_FOUND",
            status_code=404,
            details={"resource_type": resource_type, "resource_id": resource_id}
        )


class RateLimitError(APIError):
    """A per-route analyze or enhance limit was exceeded."""

    def __init__(self, limit: Optional[str] = None):
        message = "Too many text requests. Please try again later."
        details = {"limit": limit} if limit else None
        super().__init__(
            message=message,
            error_code="RATE_LIMIT_EXCEEDED",
            status_code=429,
            details=details
        )


class InternalError(APIError):
    """Analysis or enhancement failed unexpectedly."""

    def __init__(self, original: Exception, operation: Optional[str] = None):
        details = {"error_type": type(original).__name__}
        if operation:
            details["operation"] = operation
        super().__init__(
            message=f"Error processing request: {original}",
            error_code="INTERNAL_ERROR",
            status_code=500,
            details=details
        )


def create_error_response(error: Exception, include_traceback: bool = False) -> tuple:
    """
    Build the JSON error body for an exception.

    Args:
        error: Exception raised while handling the request
        include_traceback: Add the formatted traceback (development only)

    Returns:
        Tuple of (json_response, status_code)
    """
    if isinstance(error, APIError):
        if error.status_code < 500:
            logger.warning(f"{error.error_code} on {request.path}: {error.message}")
        else:
            logger.error(f"{error.error_code} on {request.path}: {error.message}", exc_info=True)

        response = {"error": error.message, "error_code": error.error_code}
        if error.details:
            response["details"] = error.details
        status_code = error.status_code
    else:
        logger.error(f"Unhandled {type(error).__name__} on {request.method} {request.path}", exc_info=True)
        # Raw exception text only leaves the server in development
        response = {
            "error": str(error) if include_traceback else
            "An unexpected error occurred while processing the text.",
            "error_code": "INTERNAL_ERROR",
            "error_type": type(error).__name__,
        }
        status_code = 500

    if include_traceback:
        response["traceback"] = traceback.format_exc()
    return jsonify(response), status_code


def register_error_handlers(app, debug: bool = False):
    """
    Register JSON error handlers on the Flask app.

    Args:
        app: Flask application instance
        debug: Whether to include tracebacks in error responses
    """
    @app.errorhandler(APIError)
    def handle_api_error(error: APIError):
        return create_error_response(error, include_traceback=debug)

    @app.errorhandler(404)
    def handle_not_found(error):
        return create_error_response(NotFoundError("Resource", request.path))

    @app.errorhandler(429)
    def handle_rate_limit(error):
        return create_error_response(RateLimitError(getattr(error, "description", None)))

    @app.errorhandler(HTTPException)
    def handle_http_exception(error: HTTPException):
        # e.g. 405 -> METHOD_NOT_ALLOWED
        return jsonify({
            "error": error.description,
            "error_code": error.name.upper().replace(" ", "_"),
        }), error.code

    @app.errorhandler(Exception)
    def handle_unexpected_error(error: Exception):
        return create_error_response(error, include_traceback=debug)
