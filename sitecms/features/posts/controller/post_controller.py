"""
Post Controller.
"""
from flask import request, jsonify
from sitecms.common.base.base_controller import BaseController
from sitecms.features.posts.service.post_service import PostService, DEFAULT_LIMIT
from sitecms.features.posts.dto.post_request import (
    CreatePostRequest, UpdatePostRequest, PostStatusRequest,
)
from sitecms.services.system.logger_service import get_logger

logger = get_logger(__name__)


class PostController(BaseController):
    def __init__(self, post_service: PostService):
        self.post_service = post_service

    def list_posts(self):
        try:
            published_only = request.args.get('published', '').lower() in ('1', 'true', 'yes')
            limit = request.args.get('limit', DEFAULT_LIMIT, type=int)
            posts = self.post_service.list_posts(published_only=published_only, limit=limit)
            logger.info("Posts retrieved", extra={"count": len(posts), "published_only": published_only})
            return jsonify({'posts': posts})
        except Exception as e:
            return self.handle_exception(e, 'load posts')

    def get_post(self, post_id: str):
        try:
            return jsonify({'post': self.post_service.get_post(post_id)})
        except Exception as e:
            return self.handle_exception(e, 'load post')

    def create_post(self):
        try:
            req_dto = CreatePostRequest(**self.json_body())
            post_id = self.post_service.create_post(req_dto, admin_id=self.admin_id())
            return jsonify({'id': post_id})
        except Exception as e:
            return self.handle_exception(e, 'create post')

    def update_post(self, post_id: str):
        try:
            req_dto = UpdatePostRequest(**self.json_body())
            changes = self.post_service.update_post(post_id, req_dto, admin_id=self.admin_id())
            return jsonify({'success': True, 'id': post_id, **changes})
        except Exception as e:
            return self.handle_exception(e, 'update post')

    def update_status(self, post_id: str):
        try:
            req_dto = PostStatusRequest(**self.json_body())
            self.post_service.update_status(post_id, req_dto.status, admin_id=self.admin_id())
            return jsonify({'success': True, 'status': req_dto.status})
        except Exception as e:
            return self.handle_exception(e, 'update post status')

    def delete_post(self, post_id: str):
        try:
            self.post_service.delete_post(post_id, admin_id=self.admin_id())
            return jsonify({'success': True})
        except Exception as e:
            return self.handle_exception(e, 'delete post')

    def increment_views(self, post_id: str):
        try:
            self.post_service.increment_views(post_id)
            return jsonify({'success': True})
        except Exception as e:
            return self.handle_exception(e, 'record view')
