"""
User Management Service.

Profiles live in the `users` collection. When a password is supplied the
user also gets a Firebase Auth account, and the profile document reuses the
Auth uid as its id.
"""
from typing import Any, Dict, List, Optional

from firebase_admin import auth

from sitecms.common.base.base_service import BaseService, NotFoundError, ServiceValidationError
from sitecms.features.users.dto.user_request import CreateUserRequest, UpdateUserRequest
from sitecms.features.users.repository.user_repository import UserRepository
from sitecms.services.firebase.firebase_client import initialize_firebase
from sitecms.services.system.logger_service import get_logger, log_content_operation

logger = get_logger(__name__)

ROLE_PERMISSIONS = {
    'super_admin': ['all'],
    'admin': ['read', 'write', 'delete', 'manage_users', 'manage_content'],
    'editor': ['read', 'write', 'manage_content'],
    'user': ['read'],
}

INITIAL_USERS = [
    {
        'name': 'Admin User',
        'email': 'admin@willsther.com',
        'role': 'admin',
        'status': 'active',
        'phone': '(233) 594 850 005',
        'department': 'Management',
    },
    {
        'name': 'Content Editor',
        'email': 'editor@willsther.com',
        'role': 'editor',
        'status': 'active',
        'phone': '(233) 594 850 006',
        'department': 'Content',
    },
    {
        'name': 'Support User',
        'email': 'support@willsther.com',
        'role': 'user',
        'status': 'active',
        'phone': '(233) 594 850 007',
        'department': 'Support',
    },
]


class EmailAlreadyExistsError(ServiceValidationError):
    """The email is already registered with Firebase Auth."""


def permissions_for_role(role: Optional[str]) -> List[str]:
    return list(ROLE_PERMISSIONS.get(role or 'user', ROLE_PERMISSIONS['user']))


def normalize_user(data: Dict[str, Any]) -> Dict[str, Any]:
    return {
        'id': data.get('id'),
        'name': data.get('name') or '',
        'email': data.get('email') or '',
        'role': data.get('role') or 'user',
        'status': data.get('status') or 'pending',
        'lastLogin': data.get('lastLogin') or '',
        'createdAt': data.get('createdAt') or '',
        'updatedAt': data.get('updatedAt') or '',
        'avatarUrl': data.get('avatarUrl') or '',
        'phone': data.get('phone') or '',
        'department': data.get('department') or '',
        'permissions': data.get('permissions') or [],
    }


class UserService(BaseService):
    def __init__(self, user_repository: UserRepository):
        super().__init__()
        self.user_repository = user_repository

    def list_users(self) -> List[Dict[str, Any]]:
        docs = self.user_repository.list_with_fallback('createdAt', descending=True)
        return [normalize_user(doc) for doc in docs]

    def get_user(self, user_id: str) -> Dict[str, Any]:
        data = self.user_repository.find_by_id(user_id)
        if not data:
            raise NotFoundError('User not found')
        return normalize_user(data)

    def get_stats(self) -> Dict[str, int]:
        users = self.list_users()

        def count(field: str, value: str) -> int:
            return sum(1 for u in users if u[field] == value)

        return {
            'total': len(users),
            'active': count('status', 'active'),
            'inactive': count('status', 'inactive'),
            'pending': count('status', 'pending'),
            'admins': count('role', 'admin'),
            'editors': count('role', 'editor'),
            'users': count('role', 'user'),
        }

    def _create_auth_account(self, request: CreateUserRequest) -> str:
        initialize_firebase()
        try:
            record = auth.create_user(
                email=request.email,
                password=request.password,
                display_name=request.name,
                email_verified=False,
                disabled=False,
            )
        except auth.EmailAlreadyExistsError:
            raise EmailAlreadyExistsError('Email already exists')
        logger.info("Created auth account", extra={"uid": record.uid})
        return record.uid

    def _profile_document(self, request: CreateUserRequest) -> Dict[str, Any]:
        now = self.now_iso()
        return {
            'name': request.name,
            'email': request.email,
            'role': request.role,
            'status': request.status,
            'phone': (request.phone or '').strip(),
            'department': (request.department or '').strip(),
            'createdAt': now,
            'updatedAt': now,
            'lastLogin': None,
            'permissions': permissions_for_role(request.role),
        }

    def create_user(self, request: CreateUserRequest, admin_id=None) -> str:
        document = self._profile_document(request)
        if request.password:
            user_id = self._create_auth_account(request)
            self.user_repository.set(user_id, document)
        else:
            user_id = self.user_repository.add(document)
        log_content_operation(logger, 'CREATE', 'user', user_id, admin_id,
                              role=request.role, with_auth=bool(request.password))
        return user_id

    def _require(self, user_id: str) -> None:
        if not self.user_repository.exists(user_id):
            raise NotFoundError('User not found')

    def update_user(self, user_id: str, request: UpdateUserRequest, admin_id=None) -> Dict[str, Any]:
        self._require(user_id)
        changes = request.model_dump(exclude_unset=True, exclude_none=True)
        changes['updatedAt'] = self.now_iso()
        self.user_repository.update(user_id, changes)
        log_content_operation(logger, 'UPDATE', 'user', user_id, admin_id, fields=sorted(changes))
        return changes

    def update_status(self, user_id: str, status: str, admin_id=None) -> None:
        self._require(user_id)
        self.user_repository.update(user_id, {'status': status, 'updatedAt': self.now_iso()})
        log_content_operation(logger, 'STATUS', 'user', user_id, admin_id, status=status)

    def update_role(self, user_id: str, role: str, admin_id=None) -> None:
        self._require(user_id)
        # Permissions stay as stored; role changes do not rewrite them
        self.user_repository.update(user_id, {'role': role, 'updatedAt': self.now_iso()})
        log_content_operation(logger, 'ROLE', 'user', user_id, admin_id, role=role)

    def delete_user(self, user_id: str, admin_id=None) -> None:
        self.user_repository.delete(user_id)
        initialize_firebase()
        try:
            auth.delete_user(user_id)
        except auth.UserNotFoundError:
            # Profile-only users have no Auth account
            logger.debug("No auth account for deleted user", extra={"uid": user_id})
        log_content_operation(logger, 'DELETE', 'user', user_id, admin_id)

    def seed_initial_users(self, admin_id=None) -> Dict[str, Any]:
        if not self.user_repository.is_empty():
            return {'seeded': False, 'count': 0, 'message': 'Users already exist'}
        for user in INITIAL_USERS:
            self.create_user(CreateUserRequest(**user), admin_id=admin_id)
        logger.info("Seeded initial users", extra={"count": len(INITIAL_USERS)})
        return {'seeded': True, 'count': len(INITIAL_USERS)}
