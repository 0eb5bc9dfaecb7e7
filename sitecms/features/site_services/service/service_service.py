"""
Service catalog business logic.
"""
from typing import Any, Dict, List
from sitecms.common.base.base_service import BaseService, NotFoundError
from sitecms.features.site_services.dto.service_request import ServiceRequest
from sitecms.features.site_services.repository.service_repository import ServiceRepository
from sitecms.features.site_services.service.default_services import DEFAULT_SERVICES
from sitecms.services.system.logger_service import get_logger, log_content_operation

logger = get_logger(__name__)


class ServiceCatalogService(BaseService):
    def __init__(self, service_repository: ServiceRepository):
        super().__init__()
        self.service_repository = service_repository

    @staticmethod
    def _fields(request: ServiceRequest) -> Dict[str, Any]:
        return {
            'title': request.title,
            'description': request.description,
            'imageUrl': request.imageUrl,
            'category': request.category or 'General',
        }

    def list_services(self) -> List[Dict[str, Any]]:
        return self.service_repository.list_with_fallback('createdAt', descending=True)

    def create_service(self, request: ServiceRequest, admin_id=None) -> Dict[str, Any]:
        now = self.now_iso()
        data = {**self._fields(request), 'createdAt': now, 'updatedAt': now}
        service_id = self.service_repository.add(data)
        log_content_operation(logger, 'CREATE', 'service', service_id, admin_id, title=request.title)
        return {'id': service_id, **data}

    def update_service(self, service_id: str, request: ServiceRequest, admin_id=None) -> Dict[str, Any]:
        if not self.service_repository.exists(service_id):
            raise NotFoundError('Service not found')
        data = {**self._fields(request), 'updatedAt': self.now_iso()}
        self.service_repository.update(service_id, data)
        log_content_operation(logger, 'UPDATE', 'service', service_id, admin_id)
        return {'id': service_id, **data}

    def delete_service(self, service_id: str, admin_id=None) -> None:
        if not self.service_repository.exists(service_id):
            raise NotFoundError('Service not found')
        self.service_repository.delete(service_id)
        log_content_operation(logger, 'DELETE', 'service', service_id, admin_id)

    def migrate_default_services(self) -> Dict[str, Any]:
        """Seed the default catalog once; a non-empty collection is left untouched."""
        if not self.service_repository.is_empty():
            logger.info("Migration skipped - services already exist")
            return {
                'success': True,
                'message': 'Services already exist in database. Migration skipped.',
                'count': 0,
            }

        now = self.now_iso()
        count = self.service_repository.add_many(
            [{**service, 'createdAt': now, 'updatedAt': now} for service in DEFAULT_SERVICES]
        )
        logger.info("Default services migrated", extra={"count": count})
        return {
            'success': True,
            'message': f'Successfully migrated {count} services to database',
            'count': count,
        }
