import base64
import threading
from unittest.mock import MagicMock

import pytest
import requests

from sitecms.features.uploads.domain.upload_entity import UploadFile
from sitecms.features.uploads.service.upload_providers import (
    CloudinaryProvider,
    DataUrlProvider,
    FirebaseStorageProvider,
    ImgBBProvider,
    ProviderNotConfiguredError,
    StorageUploadError,
    UploadTimeoutError,
    build_download_url,
    build_storage_path,
    storage_path_from_url,
)


@pytest.fixture
def upload():
    return UploadFile('my photo.jpg', b'\xff\xd8\xff' + b'\x01' * 32, 'image/jpeg')


@pytest.fixture
def bucket():
    bucket = MagicMock()
    bucket.name = 'demo.firebasestorage.app'
    return bucket


def test_build_storage_path_replaces_whitespace():
    assert build_storage_path('my  hero\tphoto.jpg', 'slides', timestamp_ms=1700000000000) == \
        'slides/1700000000000_my_hero_photo.jpg'


def test_build_storage_path_defaults_prefix():
    assert build_storage_path('a.png', '', timestamp_ms=1).startswith('uploads/1_')


def test_download_url_encodes_path_and_round_trips():
    url = build_download_url('demo.firebasestorage.app', 'profile-pictures/1_a b.jpg', 'tok')
    assert url == ('https://firebasestorage.googleapis.com/v0/b/demo.firebasestorage.app/o/'
                   'profile-pictures%2F1_a%20b.jpg?alt=media&token=tok')
    assert storage_path_from_url(url) == 'profile-pictures/1_a b.jpg'


def test_storage_path_from_foreign_url_is_none():
    assert storage_path_from_url('https://i.ibb.co/abc/photo.jpg') is None
    assert storage_path_from_url('') is None


def test_firebase_upload_sets_token_metadata(upload, bucket):
    provider = FirebaseStorageProvider(bucket_factory=lambda: bucket)

    result = provider.upload(upload, 'profile-pictures')

    blob = bucket.blob.return_value
    token = blob.metadata['firebaseStorageDownloadTokens']
    blob.upload_from_string.assert_called_once_with(upload.content, content_type='image/jpeg')
    assert result.provider == 'firebase'
    assert result.path.startswith('profile-pictures/')
    assert result.path.endswith('_my_photo.jpg')
    assert result.url.endswith(f'?alt=media&token={token}')


def test_firebase_upload_times_out(upload, bucket):
    release = threading.Event()

    def slow_bucket():
        release.wait(5)
        return bucket

    provider = FirebaseStorageProvider(timeout_seconds=0.05, bucket_factory=slow_bucket)
    try:
        with pytest.raises(UploadTimeoutError) as exc_info:
            provider.upload(upload)
    finally:
        release.set()

    assert 'Upload timeout after 0.05 seconds' in str(exc_info.value)
    assert exc_info.value.provider == 'firebase'


def test_firebase_upload_wraps_storage_errors(upload, bucket):
    bucket.blob.return_value.upload_from_string.side_effect = RuntimeError('403 Forbidden')
    provider = FirebaseStorageProvider(bucket_factory=lambda: bucket)

    with pytest.raises(StorageUploadError, match='Firebase Storage upload failed: 403 Forbidden'):
        provider.upload(upload)


def test_firebase_delete_ignores_foreign_urls(bucket):
    provider = FirebaseStorageProvider(bucket_factory=lambda: bucket)
    assert provider.delete_by_url('https://res.cloudinary.com/x/image.jpg') is False
    bucket.blob.assert_not_called()


def test_imgbb_requires_api_key(upload):
    with pytest.raises(ProviderNotConfiguredError):
        ImgBBProvider(None).upload(upload)


def test_imgbb_returns_display_url(upload):
    session = MagicMock()
    session.post.return_value.ok = True
    session.post.return_value.json.return_value = {
        'data': {'display_url': 'https://i.ibb.co/x/photo.jpg', 'url': 'https://i.ibb.co/raw.jpg'}
    }

    result = ImgBBProvider('key', session=session).upload(upload)

    assert result.url == 'https://i.ibb.co/x/photo.jpg'
    assert session.post.call_args.kwargs['params'] == {'key': 'key'}


def test_imgbb_timeout_is_reported(upload):
    session = MagicMock()
    session.post.side_effect = requests.exceptions.Timeout()

    with pytest.raises(UploadTimeoutError):
        ImgBBProvider('key', session=session).upload(upload)


def test_cloudinary_http_error(upload):
    session = MagicMock()
    session.post.return_value.ok = False
    session.post.return_value.status_code = 401

    provider = CloudinaryProvider('https://api.cloudinary.com/v1_1/demo/image/upload', 'unsigned',
                                  session=session)
    with pytest.raises(StorageUploadError, match='401'):
        provider.upload(upload)


def _ok_session(json_body=None, json_error=None):
    session = MagicMock()
    session.post.return_value.ok = True
    if json_error is not None:
        session.post.return_value.json.side_effect = json_error
    else:
        session.post.return_value.json.return_value = json_body
    return session


@pytest.mark.parametrize('session', [
    _ok_session(json_error=requests.exceptions.JSONDecodeError('Expecting value', '<html>', 0)),
    _ok_session(json_body=['unexpected']),
    _ok_session(json_body={'data': ['unexpected']}),
])
def test_imgbb_malformed_body_is_an_upload_error(upload, session):
    with pytest.raises(StorageUploadError):
        ImgBBProvider('key', session=session).upload(upload)


@pytest.mark.parametrize('session', [
    _ok_session(json_error=requests.exceptions.JSONDecodeError('Expecting value', '<html>', 0)),
    _ok_session(json_body=['unexpected']),
])
def test_cloudinary_malformed_body_is_an_upload_error(upload, session):
    provider = CloudinaryProvider('https://api.cloudinary.com/v1_1/demo/image/upload', 'unsigned',
                                  session=session)
    with pytest.raises(StorageUploadError):
        provider.upload(upload)


def test_data_url_provider(upload):
    result = DataUrlProvider().upload(upload)
    prefix = 'data:image/jpeg;base64,'
    assert result.url.startswith(prefix)
    assert base64.b64decode(result.url[len(prefix):]) == upload.content
