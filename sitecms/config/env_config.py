"""
Environment configuration loader for the Site CMS backend.
Loads Firebase, upload provider and server settings from the environment / .env file.
"""

import os
from typing import Dict, Any, Optional

from dotenv import load_dotenv

from sitecms.services.system.logger_service import get_logger

logger = get_logger(__name__)

DEFAULT_UPLOAD_TIMEOUT_SECONDS = 45
DEFAULT_PROVIDER_TIMEOUT_SECONDS = 30


def _clean(value: Optional[str]) -> Optional[str]:
    """Treat empty strings and template placeholders as unset."""
    if value is None:
        return None
    value = value.strip()
    if not value or value.startswith('your_'):
        return None
    return value


def _as_float(value: Optional[str], default: float) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        return default


def load_env_file(env_path: Optional[str] = None) -> bool:
    """
    Load variables from a .env file without overriding the real environment.

    Args:
        env_path: Path to .env file (default: .env in project root)

    Returns:
        True when a file was found and loaded
    """
    if env_path is None:
        project_root = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
        env_path = os.path.join(project_root, '.env')

    if not os.path.exists(env_path):
        logger.debug("No .env file found", extra={"path": str(env_path)})
        return False

    loaded = load_dotenv(env_path, override=False)
    logger.debug("Loaded .env file", extra={"path": str(env_path)})
    return loaded


def get_firebase_config() -> Dict[str, Any]:
    """Firebase Admin credentials and bucket settings."""
    project_id = _clean(os.getenv('FIREBASE_PROJECT_ID'))
    private_key = _clean(os.getenv('FIREBASE_PRIVATE_KEY'))
    if private_key and '\\n' in private_key:
        # Hosting dashboards store multiline secrets with literal \n
        private_key = private_key.replace('\\n', '\n')

    bucket = _clean(os.getenv('FIREBASE_STORAGE_BUCKET'))
    if not bucket and project_id:
        bucket = f"{project_id}.firebasestorage.app"

    return {
        'project_id': project_id,
        'client_email': _clean(os.getenv('FIREBASE_CLIENT_EMAIL')),
        'private_key': private_key,
        'private_key_id': os.getenv('FIREBASE_PRIVATE_KEY_ID', ''),
        'client_id': os.getenv('FIREBASE_CLIENT_ID', ''),
        'storage_bucket': bucket,
        'use_application_default': bool(_clean(os.getenv('GOOGLE_APPLICATION_CREDENTIALS'))),
    }


def get_upload_config() -> Dict[str, Any]:
    """
    Get image upload provider configuration.

    Returns:
        Dictionary with provider keys and timeouts
    """
    config = {
        'imgbb_api_key': _clean(os.getenv('IMGBB_API_KEY')),
        'cloudinary_url': _clean(os.getenv('CLOUDINARY_URL')),
        'cloudinary_preset': _clean(os.getenv('CLOUDINARY_PRESET')),
        'upload_timeout_seconds': _as_float(os.getenv('UPLOAD_TIMEOUT_SECONDS'), DEFAULT_UPLOAD_TIMEOUT_SECONDS),
        'provider_timeout_seconds': _as_float(os.getenv('PROVIDER_TIMEOUT_SECONDS'), DEFAULT_PROVIDER_TIMEOUT_SECONDS),
    }

    fallbacks = []
    if config['imgbb_api_key']:
        fallbacks.append('imgbb')
    if config['cloudinary_url'] and config['cloudinary_preset']:
        fallbacks.append('cloudinary')
    logger.debug("Upload fallbacks configured", extra={"fallback_providers": fallbacks})

    return config


def get_app_config() -> Dict[str, Any]:
    """Server-level settings used by app.py."""
    environment = os.getenv('ENVIRONMENT', 'development').lower()
    return {
        'environment': environment,
        'is_production': environment == 'production',
        'host': os.getenv('FLASK_RUN_HOST', os.getenv('HOST', '0.0.0.0')),
        'port': int(os.getenv('FLASK_RUN_PORT', os.getenv('PORT', '5000'))),
        'frontend_origin': os.getenv('FRONTEND_ORIGIN', '*'),
        'rate_limit_storage_uri': os.getenv('RATE_LIMIT_STORAGE_URI', 'memory://'),
    }
