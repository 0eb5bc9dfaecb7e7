"""
Hero Slide Request DTOs.
"""
from typing import Optional, Union
from pydantic import BaseModel

Order = Union[int, float]


class CreateSlideRequest(BaseModel):
    imageUrl: Optional[str] = None
    title: Optional[str] = None
    subtitle: Optional[str] = None
    ctaLabel: Optional[str] = None
    ctaHref: Optional[str] = None
    order: Optional[Order] = None


class UpdateSlideRequest(BaseModel):
    """Only fields present in the request body are written."""
    imageUrl: Optional[str] = None
    title: Optional[str] = None
    subtitle: Optional[str] = None
    ctaLabel: Optional[str] = None
    ctaHref: Optional[str] = None
    order: Optional[Order] = None
