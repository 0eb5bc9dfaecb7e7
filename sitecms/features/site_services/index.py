"""
Services Catalog Feature Module.
"""
from flask import Blueprint
from sitecms.features.site_services.controller.service_controller import ServiceController
from sitecms.features.site_services.service.service_service import ServiceCatalogService
from sitecms.features.site_services.repository.service_repository import ServiceRepository
from sitecms.services.system.auth_middleware import require_admin

# Dependency Injection
service_repository = ServiceRepository()
catalog_service = ServiceCatalogService(service_repository=service_repository)
service_controller = ServiceController(catalog_service=catalog_service)

# Blueprint
services_bp = Blueprint('site_services', __name__)

# Routes
services_bp.add_url_rule('/api/services', view_func=service_controller.list_services, methods=['GET'])
services_bp.add_url_rule('/api/services', view_func=service_controller.create_service, methods=['POST'])
services_bp.add_url_rule(
    '/api/services/migrate',
    view_func=require_admin(service_controller.migrate_services),
    endpoint='migrate_services',
    methods=['POST']
)
services_bp.add_url_rule(
    '/api/services/<service_id>',
    view_func=service_controller.update_service,
    methods=['PUT']
)
services_bp.add_url_rule(
    '/api/services/<service_id>',
    view_func=service_controller.delete_service,
    methods=['DELETE']
)
