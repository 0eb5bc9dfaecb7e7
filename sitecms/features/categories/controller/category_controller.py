"""
Category Controller.
"""
from flask import jsonify
from sitecms.common.base.base_controller import BaseController
from sitecms.features.categories.dto.category_request import CategoryRequest
from sitecms.features.categories.service.category_service import CategoryService


class CategoryController(BaseController):
    def __init__(self, category_service: CategoryService):
        self.category_service = category_service

    def list_categories(self):
        try:
            return jsonify(self.category_service.list_categories())
        except Exception as e:
            return self.handle_exception(e, 'fetch categories')

    def create_category(self):
        try:
            req_dto = CategoryRequest(**self.json_body())
            return jsonify(self.category_service.create_category(req_dto, admin_id=self.admin_id()))
        except Exception as e:
            return self.handle_exception(e, 'create category')

    def update_category(self, category_id: str):
        try:
            req_dto = CategoryRequest(**self.json_body())
            return jsonify(self.category_service.update_category(category_id, req_dto, admin_id=self.admin_id()))
        except Exception as e:
            return self.handle_exception(e, 'update category')

    def delete_category(self, category_id: str):
        try:
            self.category_service.delete_category(category_id, admin_id=self.admin_id())
            return jsonify({'success': True})
        except Exception as e:
            return self.handle_exception(e, 'delete category')

    def migrate_categories(self):
        try:
            return jsonify(self.category_service.migrate_categories())
        except Exception as e:
            return self.handle_exception(e, 'migrate categories')
