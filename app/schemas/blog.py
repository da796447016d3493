from typing import List, Optional

from pydantic import BaseModel, Field


class PostLink(BaseModel):
    path: str
    title: Optional[str] = None


class PostSummary(BaseModel):
    path: str
    title: Optional[str] = None
    description: Optional[str] = None
    date: Optional[str] = None
    tags: List[str] = Field(default_factory=list)
    coverImage: Optional[str] = None
    timeToRead: Optional[str] = None


class SeriesItem(PostLink):
    current: bool = False


class SeriesListing(BaseModel):
    name: str
    posts: List[SeriesItem] = Field(default_factory=list)


class PostDetail(PostSummary):
    url: str
    updatedDate: Optional[str] = None
    githubUrl: Optional[str] = None
    html: str
    previous: Optional[PostLink] = None
    next: Optional[PostLink] = None
    series: Optional[SeriesListing] = None
    recent: List[PostSummary] = Field(default_factory=list)


class PageResponse(BaseModel):
    number: int
    path: str
    posts: List[PostSummary] = Field(default_factory=list)
    previousPagePath: Optional[str] = None
    nextPagePath: Optional[str] = None
    totalPages: int


class FeedInfo(BaseModel):
    name: str
    title: Optional[str] = None
    output: str
    tagFilter: List[str] = Field(default_factory=list)
    entries: int = 0


class RebuildResult(BaseModel):
    posts: int
    pages: int
    feeds: int
    builtAt: str
