from typing import List, Literal, Optional
from pydantic import BaseModel, Field, field_validator

UserRole = Literal['super_admin', 'admin', 'editor', 'user']
UserStatus = Literal['active', 'inactive', 'pending']


class CreateUserRequest(BaseModel):
    name: str = Field(..., description="Display name")
    email: str = Field(..., description="Sign-in email")
    password: Optional[str] = Field(None, description="Creates a Firebase Auth account when set")
    role: UserRole = 'user'
    status: UserStatus = 'pending'
    phone: Optional[str] = ''
    department: Optional[str] = ''

    @field_validator('name', 'email')
    @classmethod
    def not_blank(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError('must not be empty')
        return v.strip()

    @field_validator('password')
    @classmethod
    def password_length(cls, v: Optional[str]) -> Optional[str]:
        # Firebase Auth rejects passwords shorter than six characters
        if v and len(v) < 6:
            raise ValueError('Password must be at least 6 characters')
        return v or None


class UpdateUserRequest(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None
    role: Optional[UserRole] = None
    status: Optional[UserStatus] = None
    phone: Optional[str] = None
    department: Optional[str] = None
    avatarUrl: Optional[str] = None
    permissions: Optional[List[str]] = None


class UserStatusRequest(BaseModel):
    status: UserStatus


class UserRoleRequest(BaseModel):
    role: UserRole
