"""
Category Service.
Blog categories plus the one-off migration that rebuilds them from service categories.
"""
from typing import Any, Dict, List
from sitecms.common.base.base_service import BaseService
from sitecms.features.categories.dto.category_request import CategoryRequest
from sitecms.features.categories.repository.category_repository import CategoryRepository
from sitecms.features.service_categories.repository.service_category_repository import ServiceCategoryRepository
from sitecms.features.site_services.repository.service_repository import ServiceRepository
from sitecms.services.system.logger_service import get_logger, log_content_operation

logger = get_logger(__name__)


def to_category_item(doc: Dict[str, Any]) -> Dict[str, Any]:
    name = doc.get('name') or ''
    return {
        'id': doc['id'],
        'name': name,
        'title': name,
        'subtitle': doc.get('subtitle') or '',
        'imageUrl': doc.get('imageUrl') or '',
    }


class CategoryService(BaseService):
    def __init__(self, category_repository: CategoryRepository,
                 service_category_repository: ServiceCategoryRepository,
                 service_repository: ServiceRepository):
        super().__init__()
        self.category_repository = category_repository
        self.service_category_repository = service_category_repository
        self.service_repository = service_repository

    def list_categories(self) -> List[Dict[str, Any]]:
        docs = self.category_repository.list_all(order_by='name')
        return [to_category_item(doc) for doc in docs]

    def _fields(self, request: CategoryRequest) -> Dict[str, Any]:
        data = {'name': request.name, 'updatedAt': self.now_iso()}
        if request.subtitle is not None:
            data['subtitle'] = request.subtitle
        if request.imageUrl is not None:
            data['imageUrl'] = request.imageUrl
        return data

    def create_category(self, request: CategoryRequest, admin_id=None) -> Dict[str, Any]:
        data = self._fields(request)
        data['createdAt'] = data['updatedAt']
        category_id = self.category_repository.add(data)
        log_content_operation(logger, 'CREATE', 'category', category_id, admin_id, category_name=request.name)
        return to_category_item({'id': category_id, **data})

    def update_category(self, category_id: str, request: CategoryRequest, admin_id=None) -> Dict[str, Any]:
        data = self._fields(request)
        self.category_repository.set(category_id, data, merge=True)
        log_content_operation(logger, 'UPDATE', 'category', category_id, admin_id, category_name=request.name)
        return to_category_item({'id': category_id, **data})

    def delete_category(self, category_id: str, admin_id=None) -> None:
        self.category_repository.delete(category_id)
        log_content_operation(logger, 'DELETE', 'category', category_id, admin_id)

    def _migration_source(self):
        source = [
            {
                'title': doc.get('title') or '',
                'subtitle': doc.get('subtitle') or '',
                'imageUrl': doc.get('imageUrl') or '',
                'createdAt': doc.get('createdAt'),
            }
            for doc in self.service_category_repository.list_all()
        ]
        if source:
            return source, 'service_categories'

        names = []
        for service in self.service_repository.list_all():
            category = service.get('category')
            if isinstance(category, str) and category and category not in names:
                names.append(category)
        return [{'title': name, 'subtitle': 'Service Category', 'imageUrl': ''} for name in names], \
            'services (fallback)'

    def migrate_categories(self) -> Dict[str, Any]:
        """Replace `categories` with the admin-managed service categories."""
        source, source_name = self._migration_source()
        if not source:
            return {'message': 'No categories to migrate found in service_categories or services'}

        removed = self.category_repository.delete_all()
        now = self.now_iso()
        migrated = self.category_repository.add_many([
            {
                'title': item['title'],
                'subtitle': item['subtitle'],
                'imageUrl': item['imageUrl'],
                'name': item['title'],
                'createdAt': item.get('createdAt') or now,
                'updatedAt': now,
            }
            for item in source
        ])
        logger.info("Categories migrated", extra={"migrated": migrated, "removed": removed, "source": source_name})
        return {'success': True, 'migratedCount': migrated, 'source': source_name}
