"""
Shop Products Feature Module.
"""
from flask import Blueprint
from sitecms.features.products.controller.product_controller import ProductController
from sitecms.features.products.service.product_service import ProductService
from sitecms.features.products.repository.product_repository import ProductRepository
from sitecms.features.uploads.index import upload_service
from sitecms.services.system.auth_middleware import require_super_admin

# Dependency Injection
product_repository = ProductRepository()
product_service = ProductService(product_repository=product_repository, upload_service=upload_service)
product_controller = ProductController(product_service=product_service)

# Blueprint
product_bp = Blueprint('products', __name__)

# Routes
product_bp.add_url_rule('/api/products', view_func=product_controller.list_products, methods=['GET'])
product_bp.add_url_rule('/api/products', view_func=product_controller.create_product, methods=['POST'])
product_bp.add_url_rule('/api/products/stats', view_func=product_controller.get_stats, methods=['GET'])
product_bp.add_url_rule('/api/products/<product_id>', view_func=product_controller.get_product, methods=['GET'])
product_bp.add_url_rule('/api/products/<product_id>', view_func=product_controller.update_product, methods=['PUT'])
product_bp.add_url_rule(
    '/api/products/<product_id>',
    view_func=require_super_admin(product_controller.delete_product),
    endpoint='delete_product',
    methods=['DELETE']
)
