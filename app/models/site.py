import datetime
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from app.models.feed import FeedDefinition, FeedEntry
from app.models.post import OrderedPost, Post


class Page(BaseModel):
    model_config = ConfigDict(frozen=True)

    number: int
    path: str
    posts: List[Post] = Field(default_factory=list)
    previous_page_path: Optional[str] = None
    next_page_path: Optional[str] = None
    total_pages: int


class SitemapEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    url: str
    lastmod: Optional[datetime.date] = None
    changefreq: str = "daily"
    priority: float = 0.7


class SiteBuild(BaseModel):
    """Everything derived from one pass over the content source."""

    model_config = ConfigDict(frozen=True)

    built_at: datetime.datetime
    site_url: str
    site_title: str = ""
    site_description: str = ""
    ordered: List[OrderedPost] = Field(default_factory=list)
    pages: List[Page] = Field(default_factory=list)
    feed_definitions: List[FeedDefinition] = Field(default_factory=list)
    feeds: Dict[str, List[FeedEntry]] = Field(default_factory=dict)
    sitemap: List[SitemapEntry] = Field(default_factory=list)

    @property
    def posts(self) -> List[Post]:
        return [item.post for item in self.ordered]

    def get_page(self, number: int) -> Optional[Page]:
        if number < 1 or number > len(self.pages):
            return None
        return self.pages[number - 1]

    def get_post(self, path: str) -> Optional[OrderedPost]:
        return next((item for item in self.ordered if item.post.path == path), None)

    def get_feed_definition(self, name: str) -> Optional[FeedDefinition]:
        return next((f for f in self.feed_definitions if f.name == name), None)

    def get_feed_definition_by_output(self, output: str) -> Optional[FeedDefinition]:
        return next((f for f in self.feed_definitions if f.output == output), None)
