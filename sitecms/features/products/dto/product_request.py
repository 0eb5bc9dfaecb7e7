"""
Product Request DTOs.
"""
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator


class ProductRequest(BaseModel):
    """Shop product as edited in the admin panel; title and price are required."""
    model_config = ConfigDict(validate_default=True)

    title: Optional[str] = None
    description: Optional[str] = ''
    price: Optional[float] = None
    imageUrl: Optional[str] = ''
    category: Optional[str] = None
    inStock: Optional[bool] = None

    @field_validator('title')
    @classmethod
    def title_required(cls, v: Optional[str]) -> str:
        if not v or not v.strip():
            raise ValueError('Title and price are required')
        return v.strip()

    @field_validator('price')
    @classmethod
    def price_required(cls, v: Optional[float]) -> float:
        # 0 counts as missing, matching the admin form
        if not v:
            raise ValueError('Title and price are required')
        if v < 0:
            raise ValueError('Price must not be negative')
        return v


class ProductListRequest(BaseModel):
    search: Optional[str] = Field(default=None, description="Search query over title and category")

    @field_validator('search')
    @classmethod
    def empty_string_to_none(cls, v):
        if v is not None and not v.strip():
            return None
        return v
