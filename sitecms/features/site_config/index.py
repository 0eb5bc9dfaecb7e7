"""
Site Config Feature Module.
"""
from flask import Blueprint
from sitecms.features.site_config.controller.site_config_controller import SiteConfigController
from sitecms.features.site_config.service.site_config_service import SiteConfigService
from sitecms.features.site_config.repository.config_repository import ConfigRepository
from sitecms.features.slides.repository.slide_repository import SlideRepository

# Dependency Injection
config_service = SiteConfigService(config_repository=ConfigRepository(), slide_repository=SlideRepository())
config_controller = SiteConfigController(config_service=config_service)

# Blueprint
site_config_bp = Blueprint('site_config', __name__)

# Routes
site_config_bp.add_url_rule('/api/config', view_func=config_controller.get_site_config, methods=['GET'])
site_config_bp.add_url_rule('/api/config/get', view_func=config_controller.get_config, methods=['GET'])
site_config_bp.add_url_rule('/api/config/save', view_func=config_controller.save_config, methods=['POST'])
