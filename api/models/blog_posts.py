from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator
from typing import Optional
from datetime import datetime


class Author(BaseModel):
    """Author name, sent as firstName/lastName"""
    model_config = ConfigDict(populate_by_name=True)

    first_name: str = Field(..., alias="firstName", min_length=1, max_length=100)
    last_name: str = Field(..., alias="lastName", min_length=1, max_length=100)


class BlogPostBase(BaseModel):
    author: Author
    title: str = Field(..., min_length=1, max_length=300)
    content: str


class BlogPostCreate(BlogPostBase):
    """Model for creating a new blog post"""
    created: Optional[datetime] = None


class BlogPostUpdate(BaseModel):
    """Model for updating a blog post. Only the fields sent are applied."""
    id: Optional[str] = None
    author: Optional[Author] = None
    title: Optional[str] = Field(None, min_length=1, max_length=300)
    content: Optional[str] = None

    @field_validator("author", "title", "content")
    @classmethod
    def not_null(cls, value):
        # Omit a field to leave it unchanged; null would erase it
        if value is None:
            raise ValueError("must not be null")
        return value


class BlogPostInDB(BlogPostBase):
    """Blog post as stored in MongoDB"""
    created: datetime


class BlogPostResponse(BlogPostBase):
    """Model for blog post API responses"""
    id: str
    created: datetime

    @computed_field(alias="authorName")
    @property
    def author_name(self) -> str:
        return f"{self.author.first_name} {self.author.last_name}".strip()
