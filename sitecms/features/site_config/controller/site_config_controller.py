"""
Site Config Controller.
"""
from flask import jsonify
from sitecms.common.base.base_controller import BaseController
from sitecms.features.site_config.service.site_config_service import SiteConfigService
from sitecms.services.firebase.firebase_client import FirebaseNotInitializedError
from sitecms.services.system.logger_service import get_logger

logger = get_logger(__name__)


class SiteConfigController(BaseController):
    def __init__(self, config_service: SiteConfigService):
        self.config_service = config_service

    def get_config(self):
        try:
            config = self.config_service.get_stored_config()
        except FirebaseNotInitializedError:
            logger.warning("Firebase Admin not initialized, returning null config")
            config = None
        except Exception as e:
            return self.handle_exception(e, 'load configuration')
        return self.cached({'config': config})

    def save_config(self):
        try:
            self.config_service.save_hero_slides(self.json_body().get('heroSlides'), admin_id=self.admin_id())
            return jsonify({'ok': True})
        except Exception as e:
            return self.handle_exception(e, 'save configuration')

    def get_site_config(self):
        try:
            return self.cached({'config': self.config_service.get_site_config()})
        except Exception as e:
            return self.handle_exception(e, 'load site configuration')
