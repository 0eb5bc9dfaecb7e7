"""
Contact Submissions Feature Module.
"""
from flask import Blueprint
from sitecms.features.contacts.controller.contact_controller import ContactController
from sitecms.features.contacts.service.contact_service import ContactService
from sitecms.features.contacts.repository.contact_repository import ContactRepository
from sitecms.services.system.auth_middleware import require_admin
from sitecms.services.system.security import limiter, CONTACT_FORM_LIMIT

# Dependency Injection
contact_repository = ContactRepository()
contact_service = ContactService(contact_repository=contact_repository)
contact_controller = ContactController(contact_service=contact_service)

# Blueprint
contacts_bp = Blueprint('contacts', __name__)

# Routes
contacts_bp.add_url_rule(
    '/api/contacts',
    view_func=limiter.limit(CONTACT_FORM_LIMIT)(contact_controller.create_submission),
    endpoint='create_submission',
    methods=['POST']
)
contacts_bp.add_url_rule(
    '/api/contacts',
    view_func=require_admin(contact_controller.list_submissions),
    endpoint='list_submissions',
    methods=['GET']
)
contacts_bp.add_url_rule(
    '/api/contacts/<submission_id>/status',
    view_func=require_admin(contact_controller.update_status),
    endpoint='update_status',
    methods=['PATCH']
)
contacts_bp.add_url_rule(
    '/api/contacts/<submission_id>',
    view_func=require_admin(contact_controller.update_submission),
    endpoint='update_submission',
    methods=['PUT']
)
contacts_bp.add_url_rule(
    '/api/contacts/<submission_id>',
    view_func=require_admin(contact_controller.delete_submission),
    endpoint='delete_submission',
    methods=['DELETE']
)
