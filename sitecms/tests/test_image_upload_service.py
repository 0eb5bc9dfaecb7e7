from unittest.mock import MagicMock, patch

import pytest
import requests

from sitecms.features.uploads.domain.upload_entity import UploadFile, UploadResult
from sitecms.features.uploads.service.image_upload_service import (
    FALLBACK_IMAGE_URLS, ImageUploadService, fallback_image_url,
)
from sitecms.features.uploads.service.upload_providers import (
    CloudinaryProvider, ImgBBProvider, ProviderNotConfiguredError, StorageUploadError, UploadTimeoutError,
)


def _provider(name, error=None, url=None):
    provider = MagicMock()
    provider.name = name
    if error is not None:
        provider.upload.side_effect = error
    else:
        provider.upload.return_value = UploadResult(url=url, provider=name, file_name='a.png',
                                                    size=3, content_type='image/png')
    return provider


@pytest.fixture
def upload():
    return UploadFile('a.png', b'png', 'image/png')


def test_first_successful_provider_wins(upload):
    firebase = _provider('firebase', error=UploadTimeoutError('Upload timeout after 45 seconds'))
    imgbb = _provider('imgbb', url='https://i.ibb.co/a.png')
    cloudinary = _provider('cloudinary', url='https://res.cloudinary.com/a.png')
    service = ImageUploadService(firebase_provider=firebase, fallback_providers=[imgbb, cloudinary])

    result = service.upload_image(upload, 'slides')

    assert result.provider == 'imgbb'
    assert result.url == 'https://i.ibb.co/a.png'
    cloudinary.upload.assert_not_called()


def test_all_providers_failing_yields_data_url(upload):
    firebase = _provider('firebase', error=StorageUploadError('denied'))
    imgbb = _provider('imgbb', error=ProviderNotConfiguredError('Missing IMGBB_API_KEY'))
    service = ImageUploadService(firebase_provider=firebase, fallback_providers=[imgbb])

    result = service.upload_image(upload)

    assert result.provider == 'data_url'
    assert result.url.startswith('data:image/png;base64,')


def test_malformed_provider_responses_fall_through_to_data_url(upload):
    imgbb_session = MagicMock()
    imgbb_session.post.return_value.ok = True
    imgbb_session.post.return_value.json.side_effect = requests.exceptions.JSONDecodeError(
        'Expecting value', '<html>proxy error</html>', 0
    )
    cloudinary_session = MagicMock()
    cloudinary_session.post.return_value.ok = True
    cloudinary_session.post.return_value.json.return_value = ['unexpected']
    service = ImageUploadService(
        firebase_provider=_provider('firebase', error=StorageUploadError('denied')),
        fallback_providers=[
            ImgBBProvider('key', session=imgbb_session),
            CloudinaryProvider('https://api.cloudinary.com/v1_1/demo/image/upload', 'unsigned',
                               session=cloudinary_session),
        ],
    )

    result = service.upload_image(upload)

    assert result.provider == 'data_url'
    imgbb_session.post.assert_called_once()
    cloudinary_session.post.assert_called_once()


def test_upload_to_firebase_propagates_errors(upload):
    firebase = _provider('firebase', error=UploadTimeoutError('Upload timeout after 45 seconds'))
    service = ImageUploadService(firebase_provider=firebase, fallback_providers=[])

    with pytest.raises(UploadTimeoutError):
        service.upload_to_firebase(upload, 'profile-pictures')


def test_delete_image_ignores_foreign_urls():
    firebase = _provider('firebase')
    service = ImageUploadService(firebase_provider=firebase, fallback_providers=[])

    assert service.delete_image('https://i.ibb.co/a.png') is False
    assert service.delete_image(None) is False
    firebase.delete_by_url.assert_not_called()


def test_delete_image_swallows_storage_errors():
    firebase = _provider('firebase')
    firebase.delete_by_url.side_effect = RuntimeError('404')
    service = ImageUploadService(firebase_provider=firebase, fallback_providers=[])
    url = 'https://firebasestorage.googleapis.com/v0/b/demo/o/products%2F1_a.png?alt=media&token=t'

    assert service.delete_image(url) is False
    firebase.delete_by_url.assert_called_once_with(url)


def test_fallback_image_url_is_from_pool():
    assert fallback_image_url() in FALLBACK_IMAGE_URLS


@patch('sitecms.features.uploads.service.image_upload_service.requests.head')
def test_check_image_accessibility(mock_head):
    service = ImageUploadService(firebase_provider=_provider('firebase'), fallback_providers=[])
    mock_head.return_value.ok = True
    mock_head.return_value.status_code = 200
    assert service.check_image_accessibility('https://example.com/a.png') == {'accessible': True, 'status': 200}

    mock_head.side_effect = requests.exceptions.ConnectionError('refused')
    result = service.check_image_accessibility('https://example.com/a.png')
    assert result['accessible'] is False
    assert 'refused' in result['error']
