"""
Security service for handling Rate Limiting and other security extensions.
"""
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address
from sitecms.config.env_config import get_app_config
from sitecms.services.system.logger_service import get_logger

logger = get_logger(__name__)

# Public form and upload endpoints get tighter limits than plain reads
CONTACT_FORM_LIMIT = "10 per minute"
UPLOAD_LIMIT = "20 per minute"

# Storage is read from RATELIMIT_STORAGE_URI at init_app time
limiter = Limiter(
    key_func=get_remote_address,
    strategy="fixed-window"
)


def configure_limiter(app):
    """
    Configure the limiter with the app instance.
    RATE_LIMIT_STORAGE_URI switches to a shared store (e.g. redis://) across workers.
    """
    storage_uri = get_app_config()['rate_limit_storage_uri']
    app.config.setdefault('RATELIMIT_STORAGE_URI', storage_uri)
    logger.info("Initializing Flask-Limiter for request rate limiting",
                extra={"storage": storage_uri.split('://', 1)[0]})
    limiter.init_app(app)
