"""
Service Category Request DTOs.
"""
from typing import Optional
from pydantic import BaseModel, ConfigDict, field_validator


class ServiceCategoryRequest(BaseModel):
    model_config = ConfigDict(validate_default=True)

    title: Optional[str] = None
    subtitle: Optional[str] = None
    imageUrl: Optional[str] = None

    @field_validator('title')
    @classmethod
    def title_required(cls, v: Optional[str]) -> str:
        if not v or not v.strip():
            raise ValueError('Title is required')
        return v.strip()

    @field_validator('subtitle', 'imageUrl')
    @classmethod
    def strip_optional(cls, v: Optional[str]) -> str:
        return (v or '').strip()
