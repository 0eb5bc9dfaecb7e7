"""
Base Service Class.
Provides common utility methods for all services.
"""
from datetime import datetime, timezone
from sitecms.services.system.logger_service import get_logger

logger = get_logger(__name__)


class BaseService:
    """
    Abstract base class for all services.
    """

    def now(self) -> datetime:
        """Return current server time (UTC)."""
        return datetime.now(timezone.utc)

    def now_iso(self) -> str:
        """ISO-8601 timestamp stored on documents written by API routes."""
        return self.now().isoformat().replace('+00:00', 'Z')

    @staticmethod
    def clean_text(value) -> str:
        """Trimmed string for optional text fields; None and non-strings become ''."""
        if not isinstance(value, str):
            return ''
        return value.strip()


class NotFoundError(ValueError):
    """Raised by services when the requested document does not exist."""


class ServiceValidationError(ValueError):
    """Raised by services when a request is rejected by a business rule (answered with 400)."""
