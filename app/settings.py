from pathlib import Path
from typing import List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from app.models.feed import FeedDefinition


def choose_env_file() -> str:
    return ".env.local" if Path(".env.local").exists() else ".env"


def default_feeds() -> List[FeedDefinition]:
    return [
        FeedDefinition(name="all", output="/rss/all.xml", title="All posts RSS Feed"),
        FeedDefinition(
            name="jvm",
            output="/rss/jvm.xml",
            title="JVM posts RSS Feed",
            tag_filter=["java", "spring", "kotlin"],
        ),
        FeedDefinition(
            name="corda",
            output="/rss/corda.xml",
            title="Corda posts RSS Feed",
            tag_filter=["corda"],
        ),
    ]


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=choose_env_file(),
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",  # tolerate unrelated env vars
    )

    # Content
    CONTENT_DIR: str = "content/blog"
    OUTPUT_DIR: str = "public"
    EXCERPT_LENGTH: int = 160

    # Site (public frontend, not this API)
    SITE_URL: str = "http://localhost:3000"
    SITE_TITLE: str = "Blog"
    SITE_DESCRIPTION: str = "Software Development Blog"

    # Blog
    BLOG_PREFIX: str = "/blog"
    PAGE_SIZE: int = 10
    RECENT_POSTS_LIMIT: int = 4

    # Feeds
    FEED_LIMIT: int = 1000
    FEEDS: List[FeedDefinition] = Field(default_factory=default_feeds)

    # Logging
    LOG_LEVEL: str = "INFO"

    # Our own API Key
    BLOG_API_KEY: str = ""

    @field_validator("SITE_URL")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @field_validator("PAGE_SIZE")
    @classmethod
    def _positive_page_size(cls, value: int) -> int:
        if value < 1:
            raise ValueError("PAGE_SIZE must be at least 1")
        return value

    @field_validator("FEED_LIMIT")
    @classmethod
    def _positive_feed_limit(cls, value: int) -> int:
        if value < 1:
            raise ValueError("FEED_LIMIT must be at least 1")
        return value

    @property
    def content_path(self) -> Path:
        return Path(self.CONTENT_DIR)

    @property
    def output_path(self) -> Path:
        return Path(self.OUTPUT_DIR)


# Global settings instance (evaluated at import, but reads env on construction)
settings = Settings()
