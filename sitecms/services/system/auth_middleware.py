"""
Global Authentication Middleware
Protects CMS write endpoints with Firebase token verification.
Supports both Bearer tokens and Firebase session cookies.

Content reads (GET) are public because the marketing site renders from
them; writes and admin-only reads require a signed-in admin.
"""
import re
from functools import wraps
from typing import Any, Dict, Optional

from flask import request, jsonify, g
from firebase_admin import auth

from sitecms.services.firebase.firebase_client import initialize_firebase
from sitecms.services.system.logger_service import get_logger

logger = get_logger(__name__)

# (method, path pattern) pairs that never require authentication
PUBLIC_ENDPOINTS = [
    ('POST', re.compile(r'^/api/contacts$')),  # Public contact form
    ('POST', re.compile(r'^/api/posts/[^/]+/views$')),  # Blog view counter
]

# Reads that expose admin-only data or mutate state still require a session
PROTECTED_READ_PREFIXES = [
    '/api/users',
    '/api/contacts',
    '/api/migrate-categories',
]

# Session cookie name (set by the site's login route)
SESSION_COOKIE_NAME = 'session'


class AuthenticationError(Exception):
    """Raised when a token or session cookie cannot be verified."""


def is_public_endpoint(path: str, method: str = 'GET') -> bool:
    """Check whether the endpoint is public (no auth required)."""
    if method == 'OPTIONS':
        return True
    path = path.rstrip('/') or '/'
    if method in ('GET', 'HEAD'):
        return not any(path.startswith(prefix) for prefix in PROTECTED_READ_PREFIXES)
    return any(method == m and pattern.match(path) for m, pattern in PUBLIC_ENDPOINTS)


def verify_firebase_token(id_token: str) -> Dict[str, Any]:
    """
    Verify Firebase ID token and return decoded claims

    Args:
        id_token: The Firebase ID token from Authorization header

    Returns:
        dict: Decoded token with user claims

    Raises:
        AuthenticationError: If token is invalid
    """
    initialize_firebase()
    try:
        return auth.verify_id_token(id_token, check_revoked=True)
    except auth.RevokedIdTokenError:
        raise AuthenticationError('Token has been revoked')
    except auth.ExpiredIdTokenError:
        raise AuthenticationError('Token has expired')
    except auth.InvalidIdTokenError:
        raise AuthenticationError('Invalid token')
    except Exception as e:
        raise AuthenticationError(f'Token verification failed: {str(e)}')


def verify_session_cookie(session_cookie: str) -> Dict[str, Any]:
    """
    Verify Firebase session cookie and return decoded claims

    Raises:
        AuthenticationError: If session cookie is invalid
    """
    initialize_firebase()
    try:
        return auth.verify_session_cookie(session_cookie, check_revoked=True)
    except auth.RevokedIdTokenError:
        raise AuthenticationError('Session has been revoked')
    except auth.ExpiredSessionCookieError:
        raise AuthenticationError('Session has expired')
    except auth.InvalidSessionCookieError:
        raise AuthenticationError('Invalid session')
    except Exception as e:
        raise AuthenticationError(f'Session verification failed: {str(e)}')


def _store_claims(claims: Dict[str, Any]) -> None:
    g.user_id = claims.get('uid')
    g.user_email = claims.get('email')
    g.is_super_admin = bool(claims.get('superAdmin')) or claims.get('role') == 'super_admin'
    g.is_admin = bool(claims.get('admin')) or g.is_super_admin


def authenticate_request() -> Optional[Dict[str, Any]]:
    """Return decoded claims from the Bearer token or session cookie, or None."""
    auth_header = request.headers.get('Authorization')
    if auth_header and auth_header.startswith('Bearer '):
        try:
            return verify_firebase_token(auth_header.split('Bearer ', 1)[1])
        except AuthenticationError as e:
            logger.debug(f"Bearer token verification failed: {e}")
            # Fall through to try session cookie

    session_cookie = request.cookies.get(SESSION_COOKIE_NAME)
    if session_cookie:
        try:
            return verify_session_cookie(session_cookie)
        except AuthenticationError as e:
            logger.debug(f"Session cookie verification failed: {e}")

    return None


def global_auth_middleware():
    """
    Global before_request handler for authentication
    Applied to all /api/* endpoints
    """
    if not request.path.startswith('/api'):
        return None

    if is_public_endpoint(request.path, request.method):
        return None

    claims = authenticate_request()
    if claims is not None:
        _store_claims(claims)
        logger.debug(
            "Auth passed",
            extra={
                'user_id': g.user_id,
                'user_email': g.user_email,
                'is_admin': g.is_admin,
                'path': request.path
            }
        )
        return None

    logger.warning(
        "Unauthorized API access attempt",
        extra={
            'path': request.path,
            'method': request.method,
            'ip': request.remote_addr,
            'user_agent': request.headers.get('User-Agent', 'unknown'),
            'has_auth_header': bool(request.headers.get('Authorization')),
            'has_session_cookie': bool(request.cookies.get(SESSION_COOKIE_NAME))
        }
    )
    return jsonify({
        'success': False,
        'error': 'Unauthorized'
    }), 401


def require_super_admin(f):
    """
    Decorator to require super admin privileges
    Relies on global_auth_middleware having populated flask.g
    """
    @wraps(f)
    def decorated_function(*args, **kwargs):
        if not getattr(g, 'is_super_admin', False):
            logger.warning(
                "Super admin access denied",
                extra={
                    'user_id': getattr(g, 'user_id', 'unknown'),
                    'path': request.path
                }
            )
            return jsonify({
                'success': False,
                'error': 'Forbidden: Only super admins can perform this action'
            }), 403
        return f(*args, **kwargs)
    return decorated_function


def require_admin(f):
    """
    Decorator to require admin privileges
    Relies on global_auth_middleware having populated flask.g
    """
    @wraps(f)
    def decorated_function(*args, **kwargs):
        if not getattr(g, 'is_admin', False):
            logger.warning(
                "Admin access denied",
                extra={
                    'user_id': getattr(g, 'user_id', 'unknown'),
                    'path': request.path
                }
            )
            return jsonify({
                'success': False,
                'error': 'Admin privileges required'
            }), 403
        return f(*args, **kwargs)
    return decorated_function
