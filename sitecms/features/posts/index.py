"""
Posts Feature Module.
"""
from flask import Blueprint
from sitecms.features.posts.controller.post_controller import PostController
from sitecms.features.posts.service.post_service import PostService
from sitecms.features.posts.repository.post_repository import PostRepository

# Dependency Injection
post_repository = PostRepository()
post_service = PostService(post_repository=post_repository)
post_controller = PostController(post_service=post_service)

# Blueprint
posts_bp = Blueprint('posts', __name__)

# Routes
posts_bp.add_url_rule('/api/posts', view_func=post_controller.list_posts, methods=['GET'])
posts_bp.add_url_rule('/api/posts', view_func=post_controller.create_post, methods=['POST'])
posts_bp.add_url_rule(
    '/api/posts/create',
    view_func=post_controller.create_post,
    endpoint='create_post_legacy',
    methods=['POST']
)
posts_bp.add_url_rule('/api/posts/<post_id>', view_func=post_controller.get_post, methods=['GET'])
posts_bp.add_url_rule('/api/posts/<post_id>', view_func=post_controller.update_post, methods=['PUT'])
posts_bp.add_url_rule('/api/posts/<post_id>', view_func=post_controller.delete_post, methods=['DELETE'])
posts_bp.add_url_rule(
    '/api/posts/<post_id>/status',
    view_func=post_controller.update_status,
    methods=['PATCH']
)
posts_bp.add_url_rule(
    '/api/posts/<post_id>/views',
    view_func=post_controller.increment_views,
    methods=['POST']
)
