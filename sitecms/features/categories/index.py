"""
Blog Categories Feature Module.
"""
from flask import Blueprint
from sitecms.features.categories.controller.category_controller import CategoryController
from sitecms.features.categories.service.category_service import CategoryService
from sitecms.features.categories.repository.category_repository import CategoryRepository
from sitecms.features.service_categories.repository.service_category_repository import ServiceCategoryRepository
from sitecms.features.site_services.repository.service_repository import ServiceRepository
from sitecms.services.system.auth_middleware import require_admin

# Dependency Injection
category_service = CategoryService(
    category_repository=CategoryRepository(),
    service_category_repository=ServiceCategoryRepository(),
    service_repository=ServiceRepository(),
)
category_controller = CategoryController(category_service=category_service)

# Blueprint
categories_bp = Blueprint('categories', __name__)

# Routes
categories_bp.add_url_rule('/api/categories', view_func=category_controller.list_categories, methods=['GET'])
categories_bp.add_url_rule('/api/categories', view_func=category_controller.create_category, methods=['POST'])
categories_bp.add_url_rule(
    '/api/categories/<category_id>',
    view_func=category_controller.update_category,
    methods=['PUT']
)
categories_bp.add_url_rule(
    '/api/categories/<category_id>',
    view_func=category_controller.delete_category,
    methods=['DELETE']
)
categories_bp.add_url_rule(
    '/api/migrate-categories',
    view_func=require_admin(category_controller.migrate_categories),
    endpoint='migrate_categories',
    methods=['GET']
)
