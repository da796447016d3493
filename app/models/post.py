import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class Post(BaseModel):
    """A single markdown post as read from the content source.

    ``path`` is left empty by the parser and only filled in on the copy
    returned by ``assign_paths``.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    title: Optional[str] = None
    slug: Optional[str] = None
    date: Optional[datetime.date] = None
    include_date_in_url: bool = False
    published: bool = False
    tags: List[str] = Field(default_factory=list)
    series: Optional[str] = None
    description: Optional[str] = None
    excerpt: Optional[str] = None
    cover_image: Optional[str] = None
    updated_date: Optional[datetime.date] = None
    github_url: Optional[str] = None
    html: str = ""
    time_to_read: Optional[str] = None
    path: Optional[str] = None

    @property
    def summary(self) -> Optional[str]:
        return self.description or self.excerpt

    @property
    def last_modified(self) -> Optional[datetime.date]:
        return self.updated_date or self.date


class OrderedPost(BaseModel):
    model_config = ConfigDict(frozen=True)

    post: Post
    previous: Optional[Post] = None  # older
    next: Optional[Post] = None  # newer
