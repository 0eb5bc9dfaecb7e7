"""
Service Category Controller.
"""
from flask import jsonify
from sitecms.common.base.base_controller import BaseController
from sitecms.features.service_categories.dto.service_category_request import ServiceCategoryRequest
from sitecms.features.service_categories.service.service_category_service import ServiceCategoryService


class ServiceCategoryController(BaseController):
    def __init__(self, category_service: ServiceCategoryService):
        self.category_service = category_service

    def list_categories(self):
        try:
            return self.cached({'categories': self.category_service.list_categories()})
        except Exception as e:
            return self.handle_exception(e, 'fetch service categories')

    def create_category(self):
        try:
            req_dto = ServiceCategoryRequest(**self.json_body())
            return jsonify(self.category_service.create_category(req_dto, admin_id=self.admin_id()))
        except Exception as e:
            return self.handle_exception(e, 'create service category')

    def update_category(self, category_id: str):
        try:
            req_dto = ServiceCategoryRequest(**self.json_body())
            return jsonify(self.category_service.update_category(category_id, req_dto, admin_id=self.admin_id()))
        except Exception as e:
            return self.handle_exception(e, 'update service category')

    def delete_category(self, category_id: str):
        try:
            self.category_service.delete_category(category_id, admin_id=self.admin_id())
            return jsonify({'success': True})
        except Exception as e:
            return self.handle_exception(e, 'delete service category')
