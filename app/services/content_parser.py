import datetime
import html
import logging
import math
import re
from typing import List, Optional

import frontmatter
import markdown
from pydantic import ValidationError

from app.errors import InvalidFrontmatterError
from app.models.post import Post

logger = logging.getLogger(__name__)

MARKDOWN_EXTENSIONS = ["fenced_code", "tables", "toc"]
WORDS_PER_MINUTE = 200

_TAG_PATTERN = re.compile(r"<[^>]+>")
_SPACES = re.compile(r"\s+")


class ContentParser:
    def __init__(
        self, excerpt_length: int = 160, extensions: Optional[List[str]] = None
    ):
        self.excerpt_length = excerpt_length
        self.extensions = extensions if extensions is not None else MARKDOWN_EXTENSIONS

    def parse(self, doc_id: str, text: str) -> Post:
        """Parse a markdown document with YAML frontmatter into a Post."""
        try:
            parsed = frontmatter.loads(text)
        except Exception as e:
            raise InvalidFrontmatterError(doc_id, f"unreadable frontmatter ({e})") from e

        metadata = parsed.metadata or {}
        body_html = self.render_html(parsed.content)

        try:
            post = Post(
                id=doc_id,
                title=_optional_str(metadata.get("title")),
                slug=_optional_str(metadata.get("slug")),
                date=_coerce_date(metadata.get("date")),
                include_date_in_url=metadata.get("include_date_in_url") is True,
                published=metadata.get("published") is True,
                tags=normalize_tags(metadata.get("tags")),
                series=_optional_str(metadata.get("series")),
                description=_optional_str(metadata.get("description")),
                excerpt=_optional_str(metadata.get("excerpt"))
                or make_excerpt(body_html, self.excerpt_length),
                cover_image=_optional_str(metadata.get("cover_image")),
                updated_date=_coerce_date(metadata.get("updated_date")),
                github_url=_optional_str(metadata.get("github_url")),
                html=body_html,
                time_to_read=estimate_reading_time(parsed.content),
            )
        except ValidationError as e:
            raise InvalidFrontmatterError(doc_id, str(e)) from e

        logger.debug(f"Parsed post {doc_id} ({post.title or post.slug})")
        return post

    def render_html(self, content: str) -> str:
        return markdown.markdown(content, extensions=self.extensions)


def estimate_reading_time(content: str, words_per_minute: int = WORDS_PER_MINUTE) -> str:
    """Rounded-up minutes to read the markdown body, never less than one."""
    minutes = max(1, math.ceil(len(content.split()) / words_per_minute))
    return f"{minutes} min"


def make_excerpt(body_html: str, length: int = 160) -> str:
    """Plain-text start of a post, cut on a word boundary."""
    text = html.unescape(_TAG_PATTERN.sub(" ", body_html))
    text = _SPACES.sub(" ", text).strip()
    if len(text) <= length:
        return text
    cut = text[:length]
    if " " in cut and not text[length].isspace():
        cut = cut.rsplit(" ", 1)[0]
    return cut.rstrip() + "…"


def normalize_tags(value) -> List[str]:
    if not value:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, (list, tuple, set)):
        return [str(item) for item in value if item]
    return [str(value)]


def _optional_str(value) -> Optional[str]:
    if value is None:
        return None
    return str(value)


def _coerce_date(value):
    # YAML gives datetimes for timestamps with a time part; only the day matters
    if isinstance(value, datetime.datetime):
        return value.date()
    return value
