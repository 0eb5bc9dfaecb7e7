"""
Base Controller Class.
Provides standardized response handling for all controllers.
"""
from typing import Any, Tuple
from flask import jsonify, request, g, Response
from pydantic import ValidationError
from sitecms.services.firebase.firebase_client import (
    FirebaseNotInitializedError,
    FIREBASE_NOT_CONFIGURED_MESSAGE,
)
from sitecms.common.base.base_service import NotFoundError, ServiceValidationError
from sitecms.services.system.logger_service import get_logger

logger = get_logger(__name__)

PUBLIC_CACHE_CONTROL = 'public, s-maxage=60, stale-while-revalidate=30'


class BaseController:
    """
    Abstract base class for all controllers.
    Enforces standardized response format.
    """

    def handle_response(self, data: Any, status: int = 200) -> Tuple[Response, int]:
        """
        Standardized success response.
        :param data: The payload to return.
        :param status: HTTP status code (default 200).
        :return: Flask JSON response.
        """
        # Payloads that already carry a `success` key are returned unchanged.
        if isinstance(data, dict) and 'success' in data:
            return jsonify(data), status

        return jsonify({'success': True, 'data': data}), status

    def handle_error(self, message: Any, status: int = 500) -> Tuple[Response, int]:
        """
        Standardized error response.
        """
        logger.error(f"Controller error ({status}): {message}")
        return jsonify({'success': False, 'error': message}), status

    def handle_exception(self, error: Exception, action: str) -> Tuple[Response, int]:
        """
        Map service exceptions onto HTTP responses.
        Only errors raised on purpose become 4xx; anything else (including a
        stray ValueError from a library) is logged and answered with 500.
        """
        if isinstance(error, ValidationError):
            return self.handle_error(error.errors(include_url=False, include_context=False), 400)
        if isinstance(error, FirebaseNotInitializedError):
            return self.handle_error(FIREBASE_NOT_CONFIGURED_MESSAGE, 503)
        if isinstance(error, NotFoundError):
            return self.handle_error(str(error), 404)
        if isinstance(error, ServiceValidationError):
            return self.handle_error(str(error), 400)
        logger.error(f"Failed to {action}", extra={"error": str(error)}, exc_info=True)
        return self.handle_error(f"Failed to {action}: {error}", 500)

    def cached(self, payload: Any, status: int = 200) -> Tuple[Response, int]:
        """JSON response with the CDN caching headers used by public reads."""
        response = jsonify(payload)
        response.headers['Cache-Control'] = PUBLIC_CACHE_CONTROL
        response.headers['CDN-Cache-Control'] = PUBLIC_CACHE_CONTROL
        return response, status

    def json_body(self) -> dict:
        """Request JSON object, or {} when the body is missing or not an object."""
        data = request.get_json(silent=True)
        return data if isinstance(data, dict) else {}

    def admin_id(self):
        """uid of the authenticated admin (set by the auth middleware)."""
        return getattr(g, 'user_id', None)
