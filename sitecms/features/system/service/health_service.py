from datetime import datetime, timezone, timedelta
from sitecms.common.base.base_service import BaseService
from sitecms.config.env_config import get_firebase_config, get_upload_config
from sitecms.services.firebase.firebase_client import is_firebase_configured
from sitecms.services.system.initialization import is_services_initializing
from sitecms.services.system.logger_service import get_logger

logger = get_logger(__name__)


class HealthService(BaseService):
    def __init__(self):
        self.startup_time = datetime.now(timezone.utc)

    def _get_server_time_payload(self):
        localized = datetime.now(timezone.utc).astimezone()
        offset = localized.utcoffset() or timedelta(0)

        tzinfo = localized.tzinfo
        tz_label = getattr(tzinfo, 'key', None) if tzinfo else None
        if not tz_label and tzinfo:
            tz_label = tzinfo.tzname(localized)

        return {
            'timestamp': localized.isoformat(),
            'timezone': tz_label or 'UTC',
            'utc_offset_minutes': int(offset.total_seconds() // 60)
        }

    def get_health_data(self):
        initializing = is_services_initializing()
        firestore_ready = is_firebase_configured()
        upload_config = get_upload_config()

        uptime_duration = datetime.now(timezone.utc) - self.startup_time

        services_health = {
            'firestore': firestore_ready,
            # Storage rides on the same Admin app plus a bucket name
            'storage': firestore_ready and bool(get_firebase_config()['storage_bucket']),
            'imgbb': bool(upload_config['imgbb_api_key']),
            'cloudinary': bool(upload_config['cloudinary_url'] and upload_config['cloudinary_preset']),
        }

        if initializing:
            status = 'initializing'
        elif firestore_ready:
            status = 'healthy'
        else:
            status = 'degraded'

        return {
            'status': status,
            'initializing': initializing,
            **self._get_server_time_payload(),
            'uptime_hours': round(uptime_duration.total_seconds() / 3600, 2),
            'services': services_health,
            'all_services_healthy': services_health['firestore'] and services_health['storage'] and not initializing
        }
