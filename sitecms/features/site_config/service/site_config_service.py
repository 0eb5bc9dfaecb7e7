"""
Site Config Service.
"""
from typing import Any, Dict, List, Optional
from sitecms.common.base.base_service import BaseService
from sitecms.features.site_config.repository.config_repository import (
    ConfigRepository, HERO_DOCUMENT, SITE_DOCUMENT,
)
from sitecms.features.site_config.service.default_config import default_site_config, merge_site_config
from sitecms.features.slides.repository.slide_repository import SlideRepository
from sitecms.features.uploads.service.image_upload_service import fallback_image_url
from sitecms.services.firebase.firebase_client import FirebaseNotInitializedError
from sitecms.services.system.logger_service import get_logger, log_content_operation

logger = get_logger(__name__)


def with_slide_image(slide: Dict[str, Any]) -> Dict[str, Any]:
    image_url = slide.get('imageUrl')
    image_url = image_url.strip() if isinstance(image_url, str) else ''
    return {**slide, 'imageUrl': image_url or fallback_image_url()}


class SiteConfigService(BaseService):
    def __init__(self, config_repository: ConfigRepository, slide_repository: SlideRepository):
        super().__init__()
        self.config_repository = config_repository
        self.slide_repository = slide_repository

    def get_stored_config(self) -> Optional[Dict[str, Any]]:
        """The admin-saved config document, or None when missing."""
        return self.config_repository.get_document(HERO_DOCUMENT)

    def save_hero_slides(self, hero_slides: Any, admin_id=None) -> None:
        slides = hero_slides if isinstance(hero_slides, list) else []
        self.config_repository.merge_document(SITE_DOCUMENT, {'heroSlides': slides})
        log_content_operation(logger, 'UPDATE', 'config', SITE_DOCUMENT, admin_id, slide_count=len(slides))

    def get_site_config(self) -> Dict[str, Any]:
        """Defaults overlaid with the saved config and the live hero slides."""
        config = default_site_config()
        try:
            stored = self.get_stored_config()
            slides: List[Dict[str, Any]] = self.slide_repository.list_ordered()
        except FirebaseNotInitializedError:
            logger.warning("Firebase Admin not initialized, serving default site config")
            return config

        config = merge_site_config(config, stored)
        if slides:
            config['heroSlides'] = slides
        config['heroSlides'] = [with_slide_image(s) for s in config.get('heroSlides') or [] if isinstance(s, dict)]
        return config
