import datetime
import logging
import xml.etree.ElementTree as ET
from email.utils import format_datetime
from typing import Iterable, List, Optional

from app.models.feed import FeedDefinition, FeedEntry
from app.models.post import Post
from app.services.ordering import published_only, sort_posts

logger = logging.getLogger(__name__)

CONTENT_NS = "http://purl.org/rss/1.0/modules/content/"
ET.register_namespace("content", CONTENT_NS)

DEFAULT_FEED_LIMIT = 1000
XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>\n'


def matches_tag_filter(post: Post, tag_filter: Iterable[str]) -> bool:
    wanted = set(tag_filter)
    if not wanted:
        return True
    return not wanted.isdisjoint(post.tags)


def serialize_feed(
    posts: Iterable[Post],
    feed: FeedDefinition,
    site_url: str,
    limit: int = DEFAULT_FEED_LIMIT,
) -> List[FeedEntry]:
    """Build the entries of one feed, newest first."""
    selected = [
        post
        for post in published_only(posts)
        if matches_tag_filter(post, feed.tag_filter)
    ]

    entries: List[FeedEntry] = []
    seen_urls = set()
    for post in sort_posts(selected):
        if len(entries) >= limit:
            break
        url = f"{site_url}{post.path}"
        if url in seen_urls:
            continue
        seen_urls.add(url)
        entries.append(
            FeedEntry(
                title=post.title or post.path,
                date=post.date,
                description=post.summary,
                url=url,
                guid=url,
                content_encoded=post.html,
                categories=list(post.tags),
            )
        )

    logger.debug(f"Feed {feed.name}: {len(entries)} entries")
    return entries


def _rfc822(value: datetime.date) -> str:
    if not isinstance(value, datetime.datetime):
        value = datetime.datetime.combine(value, datetime.time.min)
    if value.tzinfo is None:
        value = value.replace(tzinfo=datetime.timezone.utc)
    return format_datetime(value)


def _text(parent: ET.Element, tag: str, value: Optional[str], **attrib) -> None:
    if value is None:
        return
    element = ET.SubElement(parent, tag, attrib)
    element.text = value


def render_rss(
    feed: FeedDefinition,
    entries: Iterable[FeedEntry],
    *,
    site_url: str,
    site_title: str,
    site_description: str,
    built_at: Optional[datetime.datetime] = None,
) -> str:
    """Render feed entries as an RSS 2.0 document."""
    rss = ET.Element("rss", {"version": "2.0"})
    channel = ET.SubElement(rss, "channel")
    _text(channel, "title", feed.title or site_title)
    _text(channel, "link", site_url)
    _text(channel, "description", site_description)
    _text(channel, "generator", "blog-pipeline")
    built_at = built_at or datetime.datetime.now(datetime.timezone.utc)
    _text(channel, "lastBuildDate", _rfc822(built_at))

    for entry in entries:
        item = ET.SubElement(channel, "item")
        _text(item, "title", entry.title)
        _text(item, "description", entry.description)
        _text(item, "link", entry.url)
        _text(item, "guid", entry.guid, isPermaLink="false")
        if entry.date is not None:
            _text(item, "pubDate", _rfc822(entry.date))
        for category in entry.categories:
            _text(item, "category", category)
        _text(item, f"{{{CONTENT_NS}}}encoded", entry.content_encoded)

    return XML_DECLARATION + ET.tostring(rss, encoding="unicode")
