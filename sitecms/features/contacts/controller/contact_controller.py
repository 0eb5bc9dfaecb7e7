"""
Contact Submission Controller.
"""
from flask import request, jsonify
from sitecms.common.base.base_controller import BaseController
from sitecms.features.contacts.dto.contact_request import (
    ContactStatusRequest, CreateContactRequest, UpdateContactRequest,
)
from sitecms.features.contacts.service.contact_service import ContactService, DEFAULT_TAKE


class ContactController(BaseController):
    def __init__(self, contact_service: ContactService):
        self.contact_service = contact_service

    def create_submission(self):
        try:
            req_dto = CreateContactRequest(**self.json_body())
            submission_id = self.contact_service.create_submission(req_dto)
            return jsonify({'success': True, 'id': submission_id}), 201
        except Exception as e:
            return self.handle_exception(e, 'submit contact form')

    def list_submissions(self):
        try:
            take = request.args.get('take', DEFAULT_TAKE, type=int)
            submissions = self.contact_service.list_submissions(take=take)
            return jsonify({'success': True, 'submissions': submissions, 'count': len(submissions)})
        except Exception as e:
            return self.handle_exception(e, 'fetch contact submissions')

    def update_status(self, submission_id: str):
        try:
            req_dto = ContactStatusRequest(**self.json_body())
            self.contact_service.update_status(submission_id, req_dto.status, admin_id=self.admin_id())
            return jsonify({'success': True, 'status': req_dto.status})
        except Exception as e:
            return self.handle_exception(e, 'update contact status')

    def update_submission(self, submission_id: str):
        try:
            req_dto = UpdateContactRequest(**self.json_body())
            changes = self.contact_service.update_submission(submission_id, req_dto, admin_id=self.admin_id())
            return jsonify({'success': True, 'id': submission_id, **changes})
        except Exception as e:
            return self.handle_exception(e, 'update contact submission')

    def delete_submission(self, submission_id: str):
        try:
            self.contact_service.delete_submission(submission_id, admin_id=self.admin_id())
            return jsonify({'success': True})
        except Exception as e:
            return self.handle_exception(e, 'delete contact submission')
