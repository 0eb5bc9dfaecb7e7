"""
Uploads Feature Module.
"""
from flask import Blueprint
from sitecms.features.uploads.controller.upload_controller import UploadController
from sitecms.features.uploads.service.image_upload_service import ImageUploadService
from sitecms.services.system.security import limiter, UPLOAD_LIMIT

# Dependency Injection
upload_service = ImageUploadService()
upload_controller = UploadController(upload_service=upload_service)

# Blueprint
uploads_bp = Blueprint('uploads', __name__)

# Routes
uploads_bp.add_url_rule(
    '/api/upload',
    view_func=limiter.limit(UPLOAD_LIMIT)(upload_controller.upload_profile_picture),
    endpoint='upload_profile_picture',
    methods=['POST']
)

uploads_bp.add_url_rule(
    '/api/test-upload',
    view_func=limiter.limit(UPLOAD_LIMIT)(upload_controller.test_upload),
    endpoint='test_upload',
    methods=['POST']
)

uploads_bp.add_url_rule(
    '/api/test-upload',
    view_func=upload_controller.test_upload_info,
    methods=['GET']
)
