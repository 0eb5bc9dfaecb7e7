"""
Service Controller.
"""
from flask import jsonify
from sitecms.common.base.base_controller import BaseController
from sitecms.features.site_services.dto.service_request import ServiceRequest
from sitecms.features.site_services.service.service_service import ServiceCatalogService


class ServiceController(BaseController):
    def __init__(self, catalog_service: ServiceCatalogService):
        self.catalog_service = catalog_service

    def list_services(self):
        try:
            return self.cached({'services': self.catalog_service.list_services()})
        except Exception as e:
            return self.handle_exception(e, 'fetch services')

    def create_service(self):
        try:
            service = self.catalog_service.create_service(ServiceRequest(**self.json_body()),
                                                          admin_id=self.admin_id())
            return jsonify(service)
        except Exception as e:
            return self.handle_exception(e, 'create service')

    def update_service(self, service_id: str):
        try:
            service = self.catalog_service.update_service(service_id, ServiceRequest(**self.json_body()),
                                                          admin_id=self.admin_id())
            return jsonify({**service, 'success': True})
        except Exception as e:
            return self.handle_exception(e, 'update service')

    def delete_service(self, service_id: str):
        try:
            self.catalog_service.delete_service(service_id, admin_id=self.admin_id())
            return jsonify({'success': True})
        except Exception as e:
            return self.handle_exception(e, 'delete service')

    def migrate_services(self):
        try:
            return jsonify(self.catalog_service.migrate_default_services())
        except Exception as e:
            return self.handle_exception(e, 'migrate services')
