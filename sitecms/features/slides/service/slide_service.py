"""
Hero Slide Service.
"""
import time
from typing import Any, Dict, List, Optional
from sitecms.common.base.base_service import BaseService, ServiceValidationError
from sitecms.features.slides.dto.slide_request import CreateSlideRequest, UpdateSlideRequest
from sitecms.features.slides.repository.slide_repository import SlideRepository
from sitecms.services.firebase.firebase_client import FirebaseNotInitializedError
from sitecms.services.system.logger_service import get_logger, log_content_operation

logger = get_logger(__name__)

# Firestore documents are capped at 1MiB; inline images must stay well under it
MAX_IMAGE_URL_BYTES = 1_000_000

DEFAULT_CTA_LABEL = 'Get Started Today'
DEFAULT_CTA_HREF = '#contact'


def check_image_url_size(image_url: Optional[str]) -> None:
    if not image_url:
        return
    size = len(image_url.encode('utf-8'))
    if size <= MAX_IMAGE_URL_BYTES:
        return
    if image_url.startswith('data:'):
        raise ServiceValidationError('Base64/Data URLs are too large for Firestore. Please upload the image file '
                         'instead or use a public image URL.')
    raise ServiceValidationError('Image URL is too long (max 1MB). Please use a shorter URL or upload the image file.')


class SlideService(BaseService):
    def __init__(self, slide_repository: SlideRepository):
        super().__init__()
        self.slide_repository = slide_repository

    def list_slides(self) -> List[Dict[str, Any]]:
        return self.slide_repository.list_ordered()

    def _next_order(self) -> int:
        try:
            return self.slide_repository.count() + 1
        except FirebaseNotInitializedError:
            raise
        except Exception as e:
            logger.warning("Failed to count slides, using timestamp-based order", extra={"error": str(e)})
            return int(time.time() * 1000)

    def create_slide(self, request: CreateSlideRequest, admin_id=None) -> Dict[str, Any]:
        check_image_url_size(request.imageUrl)
        order = request.order if request.order is not None else self._next_order()
        now = self.now_iso()
        data = {
            'imageUrl': request.imageUrl or '',
            'title': request.title or '',
            'subtitle': request.subtitle or '',
            'ctaLabel': request.ctaLabel or DEFAULT_CTA_LABEL,
            'ctaHref': request.ctaHref or DEFAULT_CTA_HREF,
            'order': order,
            'createdAt': now,
            'updatedAt': now,
        }
        slide_id = self.slide_repository.add(data)
        log_content_operation(logger, 'CREATE', 'slide', slide_id, admin_id, order=order)
        return {'id': slide_id, **data}

    def update_slide(self, slide_id: str, request: UpdateSlideRequest, admin_id=None) -> Dict[str, Any]:
        changes = request.model_dump(exclude_unset=True)
        check_image_url_size(changes.get('imageUrl'))
        changes['updatedAt'] = self.now_iso()
        self.slide_repository.update(slide_id, changes)
        log_content_operation(logger, 'UPDATE', 'slide', slide_id, admin_id, fields=sorted(changes))
        return changes

    def delete_slide(self, slide_id: str, admin_id=None) -> None:
        self.slide_repository.delete(slide_id)
        log_content_operation(logger, 'DELETE', 'slide', slide_id, admin_id)
