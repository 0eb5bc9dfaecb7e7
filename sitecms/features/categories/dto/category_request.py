"""
Category Request DTOs.
"""
from typing import Optional
from pydantic import BaseModel, ConfigDict, field_validator, model_validator


class CategoryRequest(BaseModel):
    """Blog category; older admin screens send `title` instead of `name`."""
    model_config = ConfigDict(validate_default=True)

    name: Optional[str] = None
    title: Optional[str] = None
    subtitle: Optional[str] = None
    imageUrl: Optional[str] = None

    @field_validator('subtitle', 'imageUrl')
    @classmethod
    def strip_optional(cls, v: Optional[str]) -> Optional[str]:
        return v.strip() if isinstance(v, str) else v

    @model_validator(mode='after')
    def name_required(self) -> 'CategoryRequest':
        name = (self.name or self.title or '').strip()
        if not name:
            raise ValueError('Category name is required')
        self.name = name
        return self
