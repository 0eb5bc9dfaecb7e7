"""
Contact Submission Request DTOs.
"""
from typing import Literal, Optional
from pydantic import BaseModel, field_validator

ContactStatus = Literal['new', 'in_progress', 'completed']


class CreateContactRequest(BaseModel):
    firstName: str
    lastName: str
    email: str
    message: str
    phone: Optional[str] = ''
    service: Optional[str] = ''

    @field_validator('firstName', 'lastName', 'email', 'message')
    @classmethod
    def required_text(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError('must not be empty')
        return v.strip()

    @field_validator('email')
    @classmethod
    def email_shape(cls, v: str) -> str:
        if '@' not in v or v.startswith('@') or v.endswith('@'):
            raise ValueError('invalid email address')
        return v


class UpdateContactRequest(BaseModel):
    firstName: Optional[str] = None
    lastName: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    service: Optional[str] = None
    message: Optional[str] = None
    status: Optional[ContactStatus] = None


class ContactStatusRequest(BaseModel):
    status: ContactStatus
