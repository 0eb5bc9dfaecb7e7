"""
Upload Providers
================

Storage backends tried in order by the image upload service:

1. Firebase Storage (token download URL, 45s deadline)
2. ImgBB
3. Cloudinary (unsigned preset)
4. Inline data URL (always succeeds)
"""
import base64
import re
import time
import uuid
from concurrent.futures import ThreadPoolExecutor, TimeoutError as FuturesTimeoutError
from typing import Callable, Optional
from urllib.parse import quote, unquote, urlparse

import requests

from sitecms.features.uploads.domain.upload_entity import UploadFile, UploadResult
from sitecms.services.firebase.firebase_client import get_bucket
from sitecms.services.system.logger_service import get_logger

logger = get_logger(__name__)

FIREBASE_STORAGE_HOST = 'firebasestorage.googleapis.com'
IMGBB_UPLOAD_URL = 'https://api.imgbb.com/1/upload'


class ImageUploadError(Exception):
    """Base class for upload failures."""

    provider = 'unknown'

    def __init__(self, message: str, provider: Optional[str] = None):
        super().__init__(message)
        if provider:
            self.provider = provider


class StorageUploadError(ImageUploadError):
    """The provider rejected or failed the upload."""


class UploadTimeoutError(ImageUploadError):
    """The upload did not finish before the deadline."""


class ProviderNotConfiguredError(ImageUploadError):
    """The provider has no credentials configured."""


def sanitize_filename(filename: str) -> str:
    return re.sub(r'\s+', '_', filename or 'upload')


def build_storage_path(filename: str, path_prefix: str = 'uploads',
                       timestamp_ms: Optional[int] = None) -> str:
    """`{prefix}/{timestamp_ms}_{filename}` with whitespace runs replaced by `_`."""
    if timestamp_ms is None:
        timestamp_ms = int(time.time() * 1000)
    prefix = (path_prefix or 'uploads').strip('/')
    return f"{prefix}/{timestamp_ms}_{sanitize_filename(filename)}"


def build_download_url(bucket_name: str, storage_path: str, token: str) -> str:
    return (
        f"https://{FIREBASE_STORAGE_HOST}/v0/b/{bucket_name}/o/"
        f"{quote(storage_path, safe='')}?alt=media&token={token}"
    )


def storage_path_from_url(url: str) -> Optional[str]:
    """Object path encoded in a Firebase download URL, or None for foreign URLs."""
    if not url or FIREBASE_STORAGE_HOST not in url:
        return None
    parsed = urlparse(url)
    parts = parsed.path.split('/o/', 1)
    if len(parts) < 2 or not parts[1]:
        return None
    return unquote(parts[1])


def parse_json_payload(response, provider: str, label: str) -> dict:
    """Decode a provider response body, rejecting anything that is not a JSON object."""
    try:
        payload = response.json()
    except ValueError as e:
        # requests.JSONDecodeError is a ValueError subclass
        raise StorageUploadError(f"{label} returned a non-JSON response", provider=provider) from e
    if not isinstance(payload, dict):
        raise StorageUploadError(f"{label} returned an unexpected response", provider=provider)
    return payload


class FirebaseStorageProvider:
    """Uploads to the default Firebase Storage bucket under a deadline."""

    name = 'firebase'

    def __init__(self, timeout_seconds: float = 45, bucket_factory: Callable = get_bucket):
        self.timeout_seconds = timeout_seconds
        self._bucket_factory = bucket_factory

    def _put(self, upload: UploadFile, storage_path: str) -> str:
        bucket = self._bucket_factory()
        token = str(uuid.uuid4())
        blob = bucket.blob(storage_path)
        blob.metadata = {'firebaseStorageDownloadTokens': token}
        blob.upload_from_string(upload.content, content_type=upload.content_type)
        return build_download_url(bucket.name, storage_path, token)

    def upload(self, upload: UploadFile, path_prefix: str = 'uploads') -> UploadResult:
        storage_path = build_storage_path(upload.filename, path_prefix)
        executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix='firebase-upload')
        try:
            future = executor.submit(self._put, upload, storage_path)
            url = future.result(timeout=self.timeout_seconds)
        except FuturesTimeoutError:
            raise UploadTimeoutError(
                f"Upload timeout after {self.timeout_seconds:g} seconds", provider=self.name
            )
        except ImageUploadError:
            raise
        except Exception as e:
            raise StorageUploadError(f"Firebase Storage upload failed: {e}", provider=self.name) from e
        finally:
            # The worker thread cannot be interrupted; abandon it on timeout
            executor.shutdown(wait=False, cancel_futures=True)

        return UploadResult(
            url=url,
            provider=self.name,
            file_name=upload.filename,
            size=upload.size,
            content_type=upload.content_type,
            path=storage_path,
        )

    def delete_by_url(self, url: str) -> bool:
        storage_path = storage_path_from_url(url)
        if not storage_path:
            return False
        self._bucket_factory().blob(storage_path).delete()
        logger.info("Deleted storage object", extra={"storage_path": storage_path})
        return True


class ImgBBProvider:
    name = 'imgbb'

    def __init__(self, api_key: Optional[str], timeout_seconds: float = 30, session=None):
        self.api_key = api_key
        self.timeout_seconds = timeout_seconds
        self.session = session or requests

    def upload(self, upload: UploadFile, path_prefix: str = 'uploads') -> UploadResult:
        if not self.api_key:
            raise ProviderNotConfiguredError('Missing IMGBB_API_KEY', provider=self.name)

        name = f"{int(time.time() * 1000)}_{sanitize_filename(upload.filename)}"
        try:
            response = self.session.post(
                IMGBB_UPLOAD_URL,
                params={'key': self.api_key},
                files={'image': (upload.filename, upload.content, upload.content_type)},
                data={'name': name},
                timeout=self.timeout_seconds,
            )
        except requests.exceptions.Timeout as e:
            raise UploadTimeoutError(
                f"ImgBB upload timed out after {self.timeout_seconds:g} seconds", provider=self.name
            ) from e
        except requests.exceptions.RequestException as e:
            raise StorageUploadError(f"ImgBB upload failed: {e}", provider=self.name) from e

        if not response.ok:
            raise StorageUploadError(
                f"ImgBB upload failed: {response.status_code} {response.reason}", provider=self.name
            )

        data = parse_json_payload(response, self.name, 'ImgBB').get('data') or {}
        if not isinstance(data, dict):
            raise StorageUploadError('ImgBB returned an unexpected response', provider=self.name)
        url = data.get('display_url') or data.get('url')
        if not url:
            raise StorageUploadError('ImgBB response missing URL', provider=self.name)

        return UploadResult(url=url, provider=self.name, file_name=upload.filename,
                            size=upload.size, content_type=upload.content_type)


class CloudinaryProvider:
    name = 'cloudinary'

    def __init__(self, upload_url: Optional[str], preset: Optional[str],
                 timeout_seconds: float = 30, session=None):
        self.upload_url = upload_url
        self.preset = preset
        self.timeout_seconds = timeout_seconds
        self.session = session or requests

    def upload(self, upload: UploadFile, path_prefix: str = 'uploads') -> UploadResult:
        if not self.upload_url or not self.preset:
            raise ProviderNotConfiguredError('Cloudinary not configured', provider=self.name)

        try:
            response = self.session.post(
                self.upload_url,
                files={'file': (upload.filename, upload.content, upload.content_type)},
                data={'upload_preset': self.preset},
                timeout=self.timeout_seconds,
            )
        except requests.exceptions.RequestException as e:
            raise StorageUploadError(f"Cloudinary upload failed: {e}", provider=self.name) from e

        if not response.ok:
            raise StorageUploadError(f"Cloudinary upload failed: {response.status_code}",
                                     provider=self.name)

        data = parse_json_payload(response, self.name, 'Cloudinary')
        url = data.get('secure_url') or data.get('url')
        if not url:
            raise StorageUploadError('Cloudinary response missing URL', provider=self.name)

        return UploadResult(url=url, provider=self.name, file_name=upload.filename,
                            size=upload.size, content_type=upload.content_type)


class DataUrlProvider:
    """Inline base64 encoding; the last resort when every remote store fails."""

    name = 'data_url'

    def upload(self, upload: UploadFile, path_prefix: str = 'uploads') -> UploadResult:
        encoded = base64.b64encode(upload.content).decode('ascii')
        return UploadResult(
            url=f"data:{upload.content_type};base64,{encoded}",
            provider=self.name,
            file_name=upload.filename,
            size=upload.size,
            content_type=upload.content_type,
        )
