"""
Service Category Service.
"""
from typing import Any, Dict, List
from sitecms.common.base.base_service import BaseService
from sitecms.features.service_categories.dto.service_category_request import ServiceCategoryRequest
from sitecms.features.service_categories.repository.service_category_repository import ServiceCategoryRepository
from sitecms.services.system.logger_service import get_logger, log_content_operation

logger = get_logger(__name__)


class ServiceCategoryService(BaseService):
    def __init__(self, category_repository: ServiceCategoryRepository):
        super().__init__()
        self.category_repository = category_repository

    def list_categories(self) -> List[Dict[str, Any]]:
        return self.category_repository.list_with_fallback('createdAt', descending=True)

    def create_category(self, request: ServiceCategoryRequest, admin_id=None) -> Dict[str, Any]:
        now = self.now_iso()
        data = {
            'title': request.title,
            'subtitle': request.subtitle,
            'imageUrl': request.imageUrl,
            'createdAt': now,
            'updatedAt': now,
        }
        category_id = self.category_repository.add(data)
        log_content_operation(logger, 'CREATE', 'service_category', category_id, admin_id)
        return {'id': category_id, **data}

    def update_category(self, category_id: str, request: ServiceCategoryRequest, admin_id=None) -> Dict[str, Any]:
        """Merge the fields and return the stored document."""
        self.category_repository.set(category_id, {
            'title': request.title,
            'subtitle': request.subtitle,
            'imageUrl': request.imageUrl,
            'updatedAt': self.now_iso(),
        }, merge=True)
        log_content_operation(logger, 'UPDATE', 'service_category', category_id, admin_id)
        return self.category_repository.find_by_id(category_id) or {'id': category_id}

    def delete_category(self, category_id: str, admin_id=None) -> None:
        self.category_repository.delete(category_id)
        log_content_operation(logger, 'DELETE', 'service_category', category_id, admin_id)
