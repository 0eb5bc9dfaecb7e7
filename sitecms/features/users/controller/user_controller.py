from flask import jsonify
from sitecms.common.base.base_controller import BaseController
from sitecms.features.users.dto.user_request import (
    CreateUserRequest, UpdateUserRequest, UserRoleRequest, UserStatusRequest,
)
from sitecms.features.users.service.user_service import UserService
from sitecms.services.system.logger_service import get_logger

logger = get_logger(__name__)


class UserController(BaseController):
    def __init__(self, user_service: UserService):
        self.user_service = user_service

    def list_users(self):
        """List user profiles, newest first"""
        try:
            users = self.user_service.list_users()
            logger.info(f"Listed {len(users)} users")
            return jsonify({"success": True, "users": users})
        except Exception as e:
            return self.handle_exception(e, 'list users')

    def get_stats(self):
        try:
            return self.handle_response({"success": True, "stats": self.user_service.get_stats()})
        except Exception as e:
            return self.handle_exception(e, 'fetch user stats')

    def get_user(self, user_id: str):
        try:
            return jsonify({"success": True, "user": self.user_service.get_user(user_id)})
        except Exception as e:
            return self.handle_exception(e, 'fetch user')

    def create_user(self):
        """Create a user profile, with a Firebase Auth account when a password is given"""
        try:
            req_dto = CreateUserRequest(**self.json_body())
            user_id = self.user_service.create_user(req_dto, admin_id=self.admin_id())
            return jsonify({"success": True, "id": user_id, "message": "User created successfully"}), 201
        except Exception as e:
            return self.handle_exception(e, 'create user')

    def update_user(self, user_id: str):
        try:
            req_dto = UpdateUserRequest(**self.json_body())
            self.user_service.update_user(user_id, req_dto, admin_id=self.admin_id())
            return jsonify({"success": True, "message": "User updated successfully"})
        except Exception as e:
            return self.handle_exception(e, 'update user')

    def update_status(self, user_id: str):
        try:
            req_dto = UserStatusRequest(**self.json_body())
            self.user_service.update_status(user_id, req_dto.status, admin_id=self.admin_id())
            return jsonify({"success": True, "status": req_dto.status})
        except Exception as e:
            return self.handle_exception(e, 'update user status')

    def update_role(self, user_id: str):
        try:
            req_dto = UserRoleRequest(**self.json_body())
            self.user_service.update_role(user_id, req_dto.role, admin_id=self.admin_id())
            return jsonify({"success": True, "role": req_dto.role})
        except Exception as e:
            return self.handle_exception(e, 'update user role')

    def delete_user(self, user_id: str):
        try:
            self.user_service.delete_user(user_id, admin_id=self.admin_id())
            return jsonify({"success": True, "message": "User deleted successfully"})
        except Exception as e:
            return self.handle_exception(e, 'delete user')

    def seed_users(self):
        try:
            return self.handle_response(self.user_service.seed_initial_users(admin_id=self.admin_id()))
        except Exception as e:
            return self.handle_exception(e, 'seed users')
