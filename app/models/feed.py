import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class FeedDefinition(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    output: str
    title: Optional[str] = None
    tag_filter: List[str] = Field(default_factory=list)


class FeedEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    date: Optional[datetime.date] = None
    description: Optional[str] = None
    url: str
    guid: str
    content_encoded: str = ""
    categories: List[str] = Field(default_factory=list)
