from flask import jsonify
from sitecms.common.base.base_controller import BaseController
from sitecms.features.system.service.health_service import HealthService
from sitecms.services.system.logger_service import get_logger

logger = get_logger(__name__)


class HealthController(BaseController):
    def __init__(self, health_service: HealthService):
        self.health_service = health_service

    def health_check(self):
        try:
            data = self.health_service.get_health_data()
            logger.debug("Health check", extra={"initializing": data.get('initializing')})
            return jsonify(data)
        except Exception as e:
            return jsonify({
                'status': 'unhealthy',
                'error': str(e)
            }), 500
