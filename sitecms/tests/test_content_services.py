from unittest.mock import MagicMock

import pytest

from sitecms.common.base.base_service import NotFoundError, ServiceValidationError
from sitecms.features.categories.service.category_service import CategoryService
from sitecms.features.posts.dto.post_request import CreatePostRequest, UpdatePostRequest
from sitecms.features.posts.service.post_service import DATA_URL_IMAGE_ERROR, PostService
from sitecms.features.site_config.service.site_config_service import SiteConfigService
from sitecms.features.site_services.service.default_services import DEFAULT_SERVICES
from sitecms.features.site_services.service.service_service import ServiceCatalogService
from sitecms.features.slides.dto.slide_request import CreateSlideRequest
from sitecms.features.slides.service.slide_service import (
    DEFAULT_CTA_HREF, DEFAULT_CTA_LABEL, SlideService, check_image_url_size,
)
from sitecms.features.uploads.service.image_upload_service import FALLBACK_IMAGE_URLS
from sitecms.services.firebase.firebase_client import FirebaseNotInitializedError


@pytest.fixture
def repo():
    return MagicMock()


def test_create_post_sets_defaults(repo):
    repo.add.return_value = 'post-1'
    service = PostService(post_repository=repo)

    post_id = service.create_post(CreatePostRequest(title=' Spring clean ', content='word ' * 401,
                                                    category='Tips'))

    assert post_id == 'post-1'
    saved = repo.add.call_args.args[0]
    assert saved['title'] == 'Spring clean'
    assert saved['readTime'] == '3 min read'
    assert saved['views'] == 0
    assert saved['author'] == 'Willsther Team'
    assert saved['createdAt'] == saved['updatedAt'] == saved['date']
    assert saved['createdAt'].endswith('Z')


def test_create_post_rejects_data_url_image(repo):
    service = PostService(post_repository=repo)
    request = CreatePostRequest(title='t', content='c', category='x', image='data:image/png;base64,AAA')

    with pytest.raises(ServiceValidationError, match=DATA_URL_IMAGE_ERROR):
        service.create_post(request)
    repo.add.assert_not_called()


def test_update_missing_post_is_not_found(repo):
    repo.exists.return_value = False
    service = PostService(post_repository=repo)

    with pytest.raises(NotFoundError):
        service.update_post('nope', UpdatePostRequest(title='x'))


def test_update_post_recomputes_read_time(repo):
    repo.exists.return_value = True
    service = PostService(post_repository=repo)

    changes = service.update_post('p1', UpdatePostRequest(content='word ' * 250))

    assert changes['readTime'] == '2 min read'
    repo.update.assert_called_once()


def test_get_post_normalizes_legacy_documents(repo):
    repo.find_by_id.return_value = {'id': 'p1', 'title': 'Old', 'content': 'short', 'createdAt': '2023-01-01T00:00:00Z'}
    post = PostService(post_repository=repo).get_post('p1')
    assert post['status'] == 'draft'
    assert post['tags'] == []
    assert post['date'] == '2023-01-01T00:00:00Z'
    assert post['formattedDate'] == '01/01/2023'
    assert post['readTime'] == '1 min read'


def test_migrate_default_services_only_when_empty(repo):
    service = ServiceCatalogService(service_repository=repo)

    repo.is_empty.return_value = False
    assert service.migrate_default_services()['count'] == 0
    repo.add_many.assert_not_called()

    repo.is_empty.return_value = True
    repo.add_many.return_value = len(DEFAULT_SERVICES)
    result = service.migrate_default_services()
    assert result['success'] is True
    assert result['count'] == len(DEFAULT_SERVICES)


def test_migrate_categories_prefers_service_categories():
    categories, service_categories, services = MagicMock(), MagicMock(), MagicMock()
    service_categories.list_all.return_value = [
        {'id': 'a', 'title': 'Home Cleaning', 'subtitle': 'Homes', 'imageUrl': 'https://x/a.jpg'},
    ]
    categories.delete_all.return_value = 4
    categories.add_many.return_value = 1
    service = CategoryService(categories, service_categories, services)

    result = service.migrate_categories()

    assert result == {'success': True, 'migratedCount': 1, 'source': 'service_categories'}
    written = categories.add_many.call_args.args[0]
    assert written[0]['name'] == written[0]['title'] == 'Home Cleaning'
    services.list_all.assert_not_called()


def test_migrate_categories_falls_back_to_distinct_service_categories():
    categories, service_categories, services = MagicMock(), MagicMock(), MagicMock()
    service_categories.list_all.return_value = []
    services.list_all.return_value = [
        {'id': '1', 'category': 'Office'}, {'id': '2', 'category': 'Office'}, {'id': '3', 'category': 'Laundry'},
    ]
    categories.add_many.side_effect = len
    service = CategoryService(categories, service_categories, services)

    result = service.migrate_categories()

    assert result['source'] == 'services (fallback)'
    assert result['migratedCount'] == 2


def test_migrate_categories_with_nothing_to_migrate():
    categories, service_categories, services = MagicMock(), MagicMock(), MagicMock()
    service_categories.list_all.return_value = []
    services.list_all.return_value = []
    result = CategoryService(categories, service_categories, services).migrate_categories()
    assert 'message' in result
    categories.delete_all.assert_not_called()


def test_create_slide_defaults_cta_and_order(repo):
    repo.count.return_value = 2
    repo.add.return_value = 'slide-3'
    service = SlideService(slide_repository=repo)

    slide = service.create_slide(CreateSlideRequest(imageUrl='https://x/hero.jpg', title='Shine'))

    assert slide['order'] == 3
    assert slide['ctaLabel'] == DEFAULT_CTA_LABEL
    assert slide['ctaHref'] == DEFAULT_CTA_HREF


def test_oversized_data_url_is_rejected():
    with pytest.raises(ServiceValidationError, match='Base64/Data URLs are too large'):
        check_image_url_size('data:image/png;base64,' + 'A' * 1_000_001)
    check_image_url_size('https://x/hero.jpg')


def test_site_config_uses_live_slides_only_when_present():
    config_repo, slide_repo = MagicMock(), MagicMock()
    config_repo.get_document.return_value = {'heroSlides': [{'title': 'Saved', 'imageUrl': 'https://x/saved.jpg'}]}
    slide_repo.list_ordered.return_value = []
    service = SiteConfigService(config_repository=config_repo, slide_repository=slide_repo)

    assert service.get_site_config()['heroSlides'] == [{'title': 'Saved', 'imageUrl': 'https://x/saved.jpg'}]

    slide_repo.list_ordered.return_value = [{'id': 's1', 'title': 'Live', 'imageUrl': 'https://x/live.jpg'}]
    assert service.get_site_config()['heroSlides'] == [{'id': 's1', 'title': 'Live', 'imageUrl': 'https://x/live.jpg'}]


def test_site_config_fills_missing_slide_images():
    config_repo, slide_repo = MagicMock(), MagicMock()
    config_repo.get_document.return_value = None
    slide_repo.list_ordered.return_value = [{'id': 's1', 'imageUrl': '  '}, {'id': 's2'}]
    slides = SiteConfigService(config_repository=config_repo, slide_repository=slide_repo).get_site_config()['heroSlides']
    assert [s['id'] for s in slides] == ['s1', 's2']
    assert all(s['imageUrl'] in FALLBACK_IMAGE_URLS for s in slides)


def test_site_config_defaults_without_firebase():
    config_repo, slide_repo = MagicMock(), MagicMock()
    config_repo.get_document.side_effect = FirebaseNotInitializedError()
    config = SiteConfigService(config_repository=config_repo, slide_repository=slide_repo).get_site_config()
    assert config['heroSlides']


def test_save_hero_slides_coerces_non_list():
    config_repo = MagicMock()
    service = SiteConfigService(config_repository=config_repo, slide_repository=MagicMock())
    service.save_hero_slides('nope')
    config_repo.merge_document.assert_called_once_with('site', {'heroSlides': []})
