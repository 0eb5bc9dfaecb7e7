"""
Product Controller.
"""
from flask import request, jsonify
from pydantic import ValidationError
from sitecms.common.base.base_controller import BaseController
from sitecms.features.products.dto.product_request import ProductListRequest, ProductRequest
from sitecms.features.products.service.product_service import ProductService
from sitecms.services.system.logger_service import get_logger

logger = get_logger(__name__)


class ProductController(BaseController):
    def __init__(self, product_service: ProductService):
        self.product_service = product_service

    def list_products(self):
        try:
            try:
                params = ProductListRequest(search=request.args.get('search'))
            except ValidationError as e:
                return jsonify({'success': False, 'error': e.errors()}), 400

            products = self.product_service.list_products(search=params.search)
            return jsonify({'success': True, 'products': products, 'count': len(products)})
        except Exception as e:
            return self.handle_exception(e, 'fetch products')

    def get_stats(self):
        try:
            return jsonify({'success': True, 'stats': self.product_service.get_stats()})
        except Exception as e:
            return self.handle_exception(e, 'fetch product stats')

    def get_product(self, product_id: str):
        try:
            return jsonify({'success': True, 'product': self.product_service.get_product(product_id)})
        except Exception as e:
            return self.handle_exception(e, 'fetch product')

    def create_product(self):
        try:
            req_dto = ProductRequest(**self.json_body())
            product = self.product_service.create_product(req_dto, admin_id=self.admin_id())
            return jsonify({'success': True, 'product': product}), 201
        except Exception as e:
            return self.handle_exception(e, 'create product')

    def update_product(self, product_id: str):
        try:
            req_dto = ProductRequest(**self.json_body())
            product = self.product_service.update_product(product_id, req_dto, admin_id=self.admin_id())
            return jsonify({'success': True, 'product': product})
        except Exception as e:
            return self.handle_exception(e, 'update product')

    def delete_product(self, product_id: str):
        try:
            self.product_service.delete_product(product_id, admin_id=self.admin_id())
            logger.info("Product deleted", extra={"product_id": product_id})
            return jsonify({'success': True, 'message': 'Product deleted successfully'})
        except Exception as e:
            return self.handle_exception(e, 'delete product')
