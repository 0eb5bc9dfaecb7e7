"""
Hero Slide Controller.
"""
from flask import jsonify
from sitecms.common.base.base_controller import BaseController
from sitecms.features.slides.dto.slide_request import CreateSlideRequest, UpdateSlideRequest
from sitecms.features.slides.service.slide_service import SlideService
from sitecms.services.firebase.firebase_client import FirebaseNotInitializedError
from sitecms.services.system.logger_service import get_logger

logger = get_logger(__name__)


class SlideController(BaseController):
    def __init__(self, slide_service: SlideService):
        self.slide_service = slide_service

    def list_slides(self):
        try:
            slides = self.slide_service.list_slides()
        except FirebaseNotInitializedError:
            # The public site still renders without admin credentials
            logger.warning("Firebase Admin not initialized, returning empty slides array")
            slides = []
        except Exception as e:
            return self.handle_exception(e, 'fetch slides')
        return self.cached({'slides': slides})

    def create_slide(self):
        try:
            req_dto = CreateSlideRequest(**self.json_body())
            return jsonify(self.slide_service.create_slide(req_dto, admin_id=self.admin_id()))
        except Exception as e:
            return self.handle_exception(e, 'create slide')

    def update_slide(self, slide_id: str):
        try:
            req_dto = UpdateSlideRequest(**self.json_body())
            self.slide_service.update_slide(slide_id, req_dto, admin_id=self.admin_id())
            return jsonify({'success': True})
        except Exception as e:
            return self.handle_exception(e, 'update slide')

    def delete_slide(self, slide_id: str):
        try:
            self.slide_service.delete_slide(slide_id, admin_id=self.admin_id())
            return jsonify({'success': True})
        except Exception as e:
            return self.handle_exception(e, 'delete slide')
