"""
Post Service.
"""
from typing import Any, Dict, List
from sitecms.common.base.base_service import BaseService, NotFoundError, ServiceValidationError
from sitecms.features.posts.repository.post_repository import PostRepository
from sitecms.features.posts.dto.post_request import CreatePostRequest, UpdatePostRequest
from sitecms.services.system.logger_service import get_logger, log_content_operation
from sitecms.utils.date_utils import display_date
from sitecms.utils.text_utils import estimate_read_time

logger = get_logger(__name__)

DEFAULT_AUTHOR = 'Willsther Team'
DEFAULT_LIMIT = 50
DATA_URL_IMAGE_ERROR = 'Base64/Data URLs are not allowed. Please upload images to Firebase Storage.'


def normalize_post(data: Dict[str, Any]) -> Dict[str, Any]:
    """Fill defaults for documents written by older clients."""
    content = data.get('content') or ''
    created_at = data.get('createdAt') or ''
    return {
        **data,
        'title': data.get('title') or '',
        'excerpt': data.get('excerpt') or '',
        'content': content,
        'author': data.get('author') or DEFAULT_AUTHOR,
        'date': data.get('date') or created_at,
        'formattedDate': display_date(data.get('date') or created_at),
        'readTime': data.get('readTime') or estimate_read_time(content),
        'category': data.get('category') or 'General',
        'image': data.get('image') or '',
        'tags': data['tags'] if isinstance(data.get('tags'), list) else [],
        'status': data.get('status') or 'draft',
        'views': data.get('views') or 0,
    }


class PostService(BaseService):
    def __init__(self, post_repository: PostRepository):
        super().__init__()
        self.post_repository = post_repository

    @staticmethod
    def _check_image(image) -> None:
        if isinstance(image, str) and image.startswith('data:'):
            raise ServiceValidationError(DATA_URL_IMAGE_ERROR)

    def list_posts(self, published_only: bool = False, limit: int = DEFAULT_LIMIT) -> List[Dict[str, Any]]:
        if published_only:
            posts = self.post_repository.find_published(limit=limit)
        else:
            posts = self.post_repository.list_with_fallback('createdAt', descending=True, limit=limit)
        return [normalize_post(p) for p in posts]

    def get_post(self, post_id: str) -> Dict[str, Any]:
        post = self.post_repository.find_by_id(post_id)
        if not post:
            raise NotFoundError('Post not found')
        return normalize_post(post)

    def create_post(self, request: CreatePostRequest, admin_id=None) -> str:
        self._check_image(request.image)
        now = self.now_iso()
        post_data = {
            'title': request.title,
            'excerpt': request.excerpt or '',
            'content': request.content,
            'category': request.category,
            'image': request.image or '',
            'tags': request.tags or [],
            'status': request.status,
            'author': request.author or DEFAULT_AUTHOR,
            'views': 0,
            'date': now,
            'createdAt': now,
            'updatedAt': now,
            'readTime': estimate_read_time(request.content),
        }
        post_id = self.post_repository.add(post_data)
        log_content_operation(logger, 'CREATE', 'post', post_id, admin_id, status=request.status)
        return post_id

    def update_post(self, post_id: str, request: UpdatePostRequest, admin_id=None) -> Dict[str, Any]:
        changes = request.model_dump(exclude_unset=True, exclude_none=True)
        self._check_image(changes.get('image'))
        if not self.post_repository.exists(post_id):
            raise NotFoundError('Post not found')

        if changes.get('content'):
            changes['readTime'] = estimate_read_time(changes['content'])
        changes['updatedAt'] = self.now_iso()

        self.post_repository.update(post_id, changes)
        log_content_operation(logger, 'UPDATE', 'post', post_id, admin_id, fields=sorted(changes))
        return changes

    def update_status(self, post_id: str, status: str, admin_id=None) -> None:
        if not self.post_repository.exists(post_id):
            raise NotFoundError('Post not found')
        self.post_repository.update(post_id, {'status': status, 'updatedAt': self.now_iso()})
        log_content_operation(logger, 'STATUS', 'post', post_id, admin_id, status=status)

    def delete_post(self, post_id: str, admin_id=None) -> None:
        self.post_repository.delete(post_id)
        log_content_operation(logger, 'DELETE', 'post', post_id, admin_id)

    def increment_views(self, post_id: str) -> None:
        if not self.post_repository.exists(post_id):
            raise NotFoundError('Post not found')
        self.post_repository.increment_views(post_id)
