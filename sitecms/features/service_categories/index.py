"""
Service Categories Feature Module.
"""
from flask import Blueprint
from sitecms.features.service_categories.controller.service_category_controller import ServiceCategoryController
from sitecms.features.service_categories.service.service_category_service import ServiceCategoryService
from sitecms.features.service_categories.repository.service_category_repository import ServiceCategoryRepository

# Dependency Injection
service_category_repository = ServiceCategoryRepository()
service_category_service = ServiceCategoryService(category_repository=service_category_repository)
service_category_controller = ServiceCategoryController(category_service=service_category_service)

# Blueprint
service_categories_bp = Blueprint('service_categories', __name__)

# Routes
service_categories_bp.add_url_rule(
    '/api/service-categories',
    view_func=service_category_controller.list_categories,
    methods=['GET']
)
service_categories_bp.add_url_rule(
    '/api/service-categories',
    view_func=service_category_controller.create_category,
    methods=['POST']
)
service_categories_bp.add_url_rule(
    '/api/service-categories/<category_id>',
    view_func=service_category_controller.update_category,
    methods=['PUT']
)
service_categories_bp.add_url_rule(
    '/api/service-categories/<category_id>',
    view_func=service_category_controller.delete_category,
    methods=['DELETE']
)
