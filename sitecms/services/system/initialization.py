"""
Service initialization module for the Flask application.
Handles initialization of external services before the first request.
"""
from sitecms.config.env_config import load_env_file, get_upload_config
from sitecms.services.firebase.firebase_client import initialize_firebase, reset_firebase_state
from sitecms.services.system.logger_service import get_logger, log_error

logger = get_logger(__name__)

# Service availability flags
FIREBASE_AVAILABLE = False
SERVICES_INITIALIZING = True  # Flag to indicate services are still loading


def _load_env():
    """Load environment variables (fast operation)"""
    try:
        load_env_file()
        logger.info("Loaded environment variables from .env")
    except OSError as e:
        logger.warning("Could not load .env", extra={"error": str(e)})


def initialize_firebase_admin():
    """Initialize Firebase Admin; the API still serves public reads without it."""
    global FIREBASE_AVAILABLE
    try:
        reset_firebase_state()
        FIREBASE_AVAILABLE = initialize_firebase() is not None
    except Exception as e:
        log_error(logger, e, context={"service": "firebase", "operation": "initialize"})
        FIREBASE_AVAILABLE = False

    if not FIREBASE_AVAILABLE:
        logger.warning("Firebase Admin unavailable - writes will return 503")


def initialize_all_services():
    """Initialize all services"""
    global SERVICES_INITIALIZING

    logger.info("Starting backend server")
    _load_env()
    initialize_firebase_admin()

    upload_config = get_upload_config()
    SERVICES_INITIALIZING = False

    logger.info("All services initialized successfully")
    logger.debug("Service availability status", extra={
        "firebase": FIREBASE_AVAILABLE,
        "imgbb": bool(upload_config['imgbb_api_key']),
        "cloudinary": bool(upload_config['cloudinary_url'] and upload_config['cloudinary_preset']),
    })


def is_services_initializing():
    """Check if services are still initializing"""
    return SERVICES_INITIALIZING
