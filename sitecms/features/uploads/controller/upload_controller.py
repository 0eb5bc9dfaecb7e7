"""
Upload Controller.
"""
from flask import request, jsonify
from sitecms.common.base.base_controller import BaseController
from sitecms.features.uploads.domain.upload_entity import UploadFile
from sitecms.features.uploads.service.image_upload_service import ImageUploadService
from sitecms.features.uploads.service.upload_providers import ImageUploadError
from sitecms.services.system.logger_service import get_logger

logger = get_logger(__name__)

PROFILE_PICTURE_PREFIX = 'profile-pictures'
TEST_UPLOAD_PREFIX = 'api-test-uploads'


class UploadController(BaseController):
    def __init__(self, upload_service: ImageUploadService):
        self.upload_service = upload_service

    def _file_from_request(self):
        file_storage = request.files.get('file')
        if file_storage is None or not file_storage.filename:
            return None
        return UploadFile.from_file_storage(file_storage)

    def upload_profile_picture(self):
        upload = self._file_from_request()
        if upload is None:
            return jsonify({'error': 'No file provided'}), 400

        logger.info("File received", extra={
            "file_name": upload.filename, "size_bytes": upload.size, "content_type": upload.content_type
        })
        try:
            result = self.upload_service.upload_to_firebase(upload, PROFILE_PICTURE_PREFIX)
        except ImageUploadError as e:
            return jsonify({'error': 'Upload failed', 'details': str(e)}), 500

        return jsonify({'success': True, 'downloadURL': result.url, 'path': result.path})

    def test_upload(self):
        upload = self._file_from_request()
        if upload is None:
            return jsonify({'error': 'No file provided'}), 400

        try:
            result = self.upload_service.upload_image(upload, TEST_UPLOAD_PREFIX)
        except Exception as e:
            logger.error("Test upload error", extra={"error": str(e)}, exc_info=True)
            return jsonify({'error': 'Upload failed', 'details': str(e)}), 500

        body = {
            'success': True,
            'url': result.url,
            'fileName': upload.filename,
            'provider': result.provider,
        }
        # Data URLs are inline; only hosted copies are checked
        if result.url.startswith(('http://', 'https://')):
            body['accessibility'] = self.upload_service.check_image_accessibility(result.url)
        return jsonify(body)

    def test_upload_info(self):
        return jsonify({
            'message': 'Test upload endpoint. Use POST with form data containing a "file" field.'
        })
