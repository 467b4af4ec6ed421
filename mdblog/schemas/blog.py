import datetime
from typing import Optional

from pydantic import BaseModel, Field, field_validator


class Author(BaseModel):
    name: str = ""
    email: str = ""


class PostMetadata(BaseModel):
    slug: str = ""
    title: str = ""
    author: Author = Field(default_factory=Author)
    description: str = ""
    date: Optional[datetime.datetime] = None

    @field_validator("author", mode="before")
    @classmethod
    def _author_from_name(cls, value):
        # `author = "Jane"` is shorthand for `[author] name = "Jane"`
        if isinstance(value, str):
            return {"name": value}
        if value is None:
            return {}
        return value

    @field_validator("date", mode="before")
    @classmethod
    def _date_to_datetime(cls, value):
        if isinstance(value, datetime.date) and not isinstance(
            value, datetime.datetime
        ):
            return datetime.datetime.combine(value, datetime.time.min)
        return value

    @field_validator("date")
    @classmethod
    def _assume_utc(cls, value):
        if value is not None and value.tzinfo is None:
            return value.replace(tzinfo=datetime.timezone.utc)
        return value


class PostView(PostMetadata):
    content: str  # rendered HTML, inserted into the page unescaped
