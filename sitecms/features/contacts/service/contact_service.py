"""
Contact Submission Service.
"""
from typing import Any, Dict, List
from sitecms.common.base.base_service import BaseService, NotFoundError
from sitecms.features.contacts.dto.contact_request import CreateContactRequest, UpdateContactRequest
from sitecms.features.contacts.repository.contact_repository import ContactRepository
from sitecms.services.system.logger_service import get_logger, log_content_operation
from sitecms.utils.date_utils import display_date

logger = get_logger(__name__)

DEFAULT_TAKE = 100


def normalize_contact(data: Dict[str, Any]) -> Dict[str, Any]:
    return {
        **data,
        'firstName': data.get('firstName') or '',
        'lastName': data.get('lastName') or '',
        'email': data.get('email') or '',
        'phone': data.get('phone') or '',
        'service': data.get('service') or '',
        'message': data.get('message') or '',
        'status': data.get('status') or 'new',
        'formattedDate': display_date(data.get('createdAt')),
    }


class ContactService(BaseService):
    def __init__(self, contact_repository: ContactRepository):
        super().__init__()
        self.contact_repository = contact_repository

    def create_submission(self, request: CreateContactRequest) -> str:
        now = self.now_iso()
        submission_id = self.contact_repository.add({
            'firstName': request.firstName,
            'lastName': request.lastName,
            'email': request.email,
            'phone': (request.phone or '').strip(),
            'service': (request.service or '').strip(),
            'message': request.message,
            'status': 'new',
            'createdAt': now,
            'updatedAt': now,
        })
        # No message body or contact details in logs
        logger.info("Contact submission received", extra={"submission_id": submission_id,
                                                           "service_interest": request.service or None})
        return submission_id

    def list_submissions(self, take: int = DEFAULT_TAKE) -> List[Dict[str, Any]]:
        docs = self.contact_repository.list_with_fallback('createdAt', descending=True)
        return [normalize_contact(doc) for doc in docs[:max(take, 0)]]

    def _require(self, submission_id: str) -> None:
        if not self.contact_repository.exists(submission_id):
            raise NotFoundError('Contact submission not found')

    def update_status(self, submission_id: str, status: str, admin_id=None) -> None:
        self._require(submission_id)
        self.contact_repository.update(submission_id, {'status': status, 'updatedAt': self.now_iso()})
        log_content_operation(logger, 'STATUS', 'contact', submission_id, admin_id, status=status)

    def update_submission(self, submission_id: str, request: UpdateContactRequest, admin_id=None) -> Dict[str, Any]:
        self._require(submission_id)
        changes = request.model_dump(exclude_unset=True, exclude_none=True)
        changes['updatedAt'] = self.now_iso()
        self.contact_repository.set(submission_id, changes, merge=True)
        log_content_operation(logger, 'UPDATE', 'contact', submission_id, admin_id, fields=sorted(changes))
        return changes

    def delete_submission(self, submission_id: str, admin_id=None) -> None:
        self.contact_repository.delete(submission_id)
        log_content_operation(logger, 'DELETE', 'contact', submission_id, admin_id)
