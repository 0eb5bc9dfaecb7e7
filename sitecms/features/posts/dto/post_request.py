"""
Post Request DTOs.
"""
from typing import List, Literal, Optional
from pydantic import BaseModel, Field, field_validator

PostStatus = Literal['draft', 'published', 'scheduled']


class CreatePostRequest(BaseModel):
    title: str
    content: str
    category: str
    excerpt: Optional[str] = ''
    image: Optional[str] = ''
    tags: Optional[List[str]] = Field(default_factory=list)
    status: PostStatus = 'draft'
    author: Optional[str] = None

    @field_validator('title', 'content', 'category')
    @classmethod
    def required_text(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError('must not be empty')
        return v.strip()


class UpdatePostRequest(BaseModel):
    title: Optional[str] = None
    content: Optional[str] = None
    category: Optional[str] = None
    excerpt: Optional[str] = None
    image: Optional[str] = None
    tags: Optional[List[str]] = None
    status: Optional[PostStatus] = None
    author: Optional[str] = None


class PostStatusRequest(BaseModel):
    status: PostStatus
