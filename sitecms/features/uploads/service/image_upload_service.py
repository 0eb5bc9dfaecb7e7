"""
Image Upload Service
====================

Compresses an uploaded image, then stores it with the first provider that
accepts it: Firebase Storage, ImgBB, Cloudinary, and finally an inline data
URL. Firebase-only uploads (profile pictures) skip the fallbacks and let the
error reach the caller.
"""
import random
from typing import Any, Dict, List, Optional

import requests

from sitecms.common.base.base_service import BaseService
from sitecms.features.uploads.domain.upload_entity import UploadFile, UploadResult
from sitecms.features.uploads.service.image_compression import compress_image
from sitecms.features.uploads.service.upload_providers import (
    CloudinaryProvider,
    DataUrlProvider,
    FirebaseStorageProvider,
    ImageUploadError,
    ImgBBProvider,
    storage_path_from_url,
)
from sitecms.config.env_config import get_upload_config
from sitecms.services.system.logger_service import get_logger, log_error, log_upload_operation

logger = get_logger(__name__)

FALLBACK_IMAGE_URLS = [
    'https://images.unsplash.com/photo-1581578731548-c13940b8c309?w=1200&h=600&fit=crop&crop=center&auto=format',
    'https://images.unsplash.com/photo-1585421514738-01798e348b17?w=1200&h=600&fit=crop&crop=center&auto=format',
    'https://images.unsplash.com/photo-1558618666-fcd25c85cd64?w=1200&h=600&fit=crop&crop=center&auto=format',
]

ACCESSIBILITY_TIMEOUT_SECONDS = 10


def fallback_image_url() -> str:
    """A stock photo for slides and cards that have no image of their own."""
    return random.choice(FALLBACK_IMAGE_URLS)


class ImageUploadService(BaseService):
    def __init__(self, firebase_provider: Optional[FirebaseStorageProvider] = None,
                 fallback_providers: Optional[List[Any]] = None,
                 config: Optional[Dict[str, Any]] = None):
        super().__init__()
        config = config or get_upload_config()
        self.firebase_provider = firebase_provider or FirebaseStorageProvider(
            timeout_seconds=config['upload_timeout_seconds']
        )
        if fallback_providers is None:
            fallback_providers = [
                ImgBBProvider(config['imgbb_api_key'], timeout_seconds=config['provider_timeout_seconds']),
                CloudinaryProvider(config['cloudinary_url'], config['cloudinary_preset'],
                                   timeout_seconds=config['provider_timeout_seconds']),
            ]
        self.fallback_providers = fallback_providers
        self.last_resort = DataUrlProvider()

    def prepare(self, upload: UploadFile) -> UploadFile:
        return compress_image(upload)

    def upload_to_firebase(self, upload: UploadFile, path_prefix: str = 'uploads',
                           compress: bool = True) -> UploadResult:
        """
        Upload straight to Firebase Storage.

        Raises:
            UploadTimeoutError: the upload exceeded the deadline
            StorageUploadError: Firebase rejected the upload
        """
        prepared = self.prepare(upload) if compress else upload
        try:
            result = self.firebase_provider.upload(prepared, path_prefix)
        except ImageUploadError as e:
            log_upload_operation(logger, self.firebase_provider.name, upload.filename, False,
                                 error=str(e), error_type=type(e).__name__)
            raise
        log_upload_operation(logger, result.provider, upload.filename, True,
                             storage_path=result.path, size_bytes=result.size)
        return result

    def upload_image(self, upload: UploadFile, path_prefix: str = 'uploads') -> UploadResult:
        """
        Upload an image through the provider chain.

        Never raises for provider failures: when every remote provider fails
        the image comes back as a data URL.
        """
        logger.info("Upload started", extra={
            "file_name": upload.filename,
            "size_bytes": upload.size,
            "content_type": upload.content_type,
            "path_prefix": path_prefix,
        })
        prepared = self.prepare(upload)

        for provider in [self.firebase_provider, *self.fallback_providers]:
            try:
                result = provider.upload(prepared, path_prefix)
            except ImageUploadError as e:
                log_upload_operation(logger, provider.name, upload.filename, False,
                                     error=str(e), error_type=type(e).__name__)
                continue
            log_upload_operation(logger, result.provider, upload.filename, True,
                                 storage_path=result.path, size_bytes=result.size)
            return result

        logger.warning("All upload providers failed, converting to data URL",
                       extra={"file_name": upload.filename})
        return self.last_resort.upload(prepared, path_prefix)

    def check_image_accessibility(self, image_url: str) -> Dict[str, Any]:
        """HEAD the URL and report whether it is reachable."""
        try:
            response = requests.head(image_url, timeout=ACCESSIBILITY_TIMEOUT_SECONDS,
                                     allow_redirects=True)
        except requests.exceptions.RequestException as e:
            return {'accessible': False, 'error': str(e)}
        return {'accessible': response.ok, 'status': response.status_code}

    def delete_image(self, image_url: Optional[str]) -> bool:
        """Delete a Firebase-hosted image; foreign URLs are ignored."""
        if not image_url or storage_path_from_url(image_url) is None:
            return False
        try:
            return self.firebase_provider.delete_by_url(image_url)
        except Exception as e:
            log_error(logger, e, context={"operation": "delete_image", "image_url": image_url})
            return False
