"""Shared Firebase Admin initialization helper."""
from __future__ import annotations

import threading
from typing import Any, Optional

import firebase_admin
from firebase_admin import credentials, firestore, storage

from sitecms.config.env_config import get_firebase_config, load_env_file
from sitecms.services.system.logger_service import get_logger, log_error

logger = get_logger(__name__)

FIREBASE_NOT_INITIALIZED = 'Firebase Admin not initialized'
FIREBASE_NOT_CONFIGURED_MESSAGE = (
    'Firebase Admin is not configured. Please set FIREBASE_PROJECT_ID, '
    'FIREBASE_CLIENT_EMAIL, and FIREBASE_PRIVATE_KEY environment variables.'
)

# Thread-safe initialization lock
_firebase_init_lock = threading.Lock()
_firebase_app: Optional[firebase_admin.App] = None
# True after the first attempt; a failed init is not retried
_firebase_init_attempted = False


class FirebaseNotInitializedError(RuntimeError):
    """Raised when Firestore/Storage is requested without Admin credentials."""

    def __init__(self, message: str = FIREBASE_NOT_INITIALIZED):
        super().__init__(message)


def initialize_firebase() -> Optional[firebase_admin.App]:
    """Initialize the Firebase Admin SDK once per process.

    Thread-safe for multi-worker environments (Gunicorn threads). Returns the
    initialized app, or None when no credentials are configured.
    """
    global _firebase_app, _firebase_init_attempted

    if _firebase_app is not None or _firebase_init_attempted:
        return _firebase_app

    with _firebase_init_lock:
        # Double-check after acquiring lock
        if _firebase_app is not None or _firebase_init_attempted:
            return _firebase_app

        if firebase_admin._apps:
            logger.debug("Firebase already initialized, reusing existing app")
            _firebase_app = firebase_admin.get_app()
            return _firebase_app

        _firebase_init_attempted = True
        load_env_file()
        config = get_firebase_config()
        options = {}
        if config['storage_bucket']:
            options['storageBucket'] = config['storage_bucket']

        try:
            if config['project_id'] and config['client_email'] and config['private_key']:
                logger.info("Initializing Firebase with environment variables",
                            extra={"project_id": config['project_id']})
                client_email = config['client_email']
                cred = credentials.Certificate({
                    "type": "service_account",
                    "project_id": config['project_id'],
                    "private_key_id": config['private_key_id'],
                    "private_key": config['private_key'],
                    "client_email": client_email,
                    "client_id": config['client_id'],
                    "auth_uri": "https://accounts.google.com/o/oauth2/auth",
                    "token_uri": "https://oauth2.googleapis.com/token",
                    "auth_provider_x509_cert_url": "https://www.googleapis.com/oauth2/v1/certs",
                    "client_x509_cert_url": f"https://www.googleapis.com/robot/v1/metadata/x509/{client_email}"
                })
                _firebase_app = firebase_admin.initialize_app(cred, options or None)
            elif config['use_application_default']:
                logger.info("Initializing Firebase with application default credentials")
                _firebase_app = firebase_admin.initialize_app(options=options or None)
            else:
                logger.warning("Firebase Admin env vars are missing. Admin features will be disabled.")
                return None
        except Exception as e:
            log_error(logger, e, context={"service": "firebase", "operation": "initialize"})
            return None

        logger.info("Firebase initialized successfully",
                    extra={"storage_bucket": config['storage_bucket']})
        return _firebase_app


def reset_firebase_state() -> None:
    """Forget a failed initialization so the next call retries (e.g. after credentials change)."""
    global _firebase_init_attempted
    with _firebase_init_lock:
        _firebase_init_attempted = False


def is_firebase_configured() -> bool:
    return initialize_firebase() is not None


def get_db() -> Any:
    """Return the Firestore client or raise FirebaseNotInitializedError."""
    app = initialize_firebase()
    if app is None:
        raise FirebaseNotInitializedError()
    return firestore.client(app)


def get_bucket() -> Any:
    """Return the default Storage bucket or raise FirebaseNotInitializedError."""
    app = initialize_firebase()
    if app is None:
        raise FirebaseNotInitializedError()
    return storage.bucket(app=app)
