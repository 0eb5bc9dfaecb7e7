from flask import Blueprint
from sitecms.features.users.controller.user_controller import UserController
from sitecms.features.users.service.user_service import UserService
from sitecms.features.users.repository.user_repository import UserRepository
from sitecms.services.system.auth_middleware import require_admin

# Initialize Module Components
user_repository = UserRepository()
user_service = UserService(user_repository)
user_controller = UserController(user_service)

# Create Blueprint
user_bp = Blueprint("users_feature", __name__)

# Register Routes - User Management (admins only)
user_bp.add_url_rule("/api/users", view_func=require_admin(user_controller.list_users),
                     endpoint="list_users", methods=["GET"])
user_bp.add_url_rule("/api/users", view_func=require_admin(user_controller.create_user),
                     endpoint="create_user", methods=["POST"])
user_bp.add_url_rule("/api/users/stats", view_func=require_admin(user_controller.get_stats),
                     endpoint="get_stats", methods=["GET"])
user_bp.add_url_rule("/api/users/seed", view_func=require_admin(user_controller.seed_users),
                     endpoint="seed_users", methods=["POST"])
user_bp.add_url_rule("/api/users/<user_id>", view_func=require_admin(user_controller.get_user),
                     endpoint="get_user", methods=["GET"])
user_bp.add_url_rule("/api/users/<user_id>", view_func=require_admin(user_controller.update_user),
                     endpoint="update_user", methods=["PUT"])
user_bp.add_url_rule("/api/users/<user_id>", view_func=require_admin(user_controller.delete_user),
                     endpoint="delete_user", methods=["DELETE"])
user_bp.add_url_rule("/api/users/<user_id>/status", view_func=require_admin(user_controller.update_status),
                     endpoint="update_status", methods=["PATCH"])
user_bp.add_url_rule("/api/users/<user_id>/role", view_func=require_admin(user_controller.update_role),
                     endpoint="update_role", methods=["PATCH"])
