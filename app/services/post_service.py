import datetime
from typing import List, Optional

from app.models.feed import FeedDefinition
from app.models.post import OrderedPost, Post
from app.models.site import Page, SiteBuild
from app.schemas.blog import (
    FeedInfo,
    PageResponse,
    PostDetail,
    PostLink,
    PostSummary,
    SeriesItem,
    SeriesListing,
)
from app.services.ordering import recent_posts
from app.services.series import group_series


def convert_date_to_string(value):
    if isinstance(value, (datetime.date, datetime.datetime)):
        return value.isoformat()
    return value


def to_link(post: Optional[Post]) -> Optional[PostLink]:
    if post is None:
        return None
    return PostLink(path=post.path, title=post.title)


def to_summary(post: Post) -> PostSummary:
    return PostSummary(
        path=post.path,
        title=post.title,
        description=post.summary,
        date=convert_date_to_string(post.date),
        tags=list(post.tags),
        coverImage=post.cover_image,
        timeToRead=post.time_to_read,
    )


def to_series_listing(
    posts: List[Post], name: Optional[str], current_path: Optional[str] = None
) -> Optional[SeriesListing]:
    """Series block for a post page; None when the post is not part of a series."""
    if not name:
        return None
    return SeriesListing(
        name=name,
        posts=[
            SeriesItem(path=p.path, title=p.title, current=p.path == current_path)
            for p in group_series(posts, name)
        ],
    )


def to_detail(site: SiteBuild, item: OrderedPost, recent_limit: int = 4) -> PostDetail:
    post = item.post
    summary = to_summary(post)
    return PostDetail(
        **summary.model_dump(),
        url=f"{site.site_url}{post.path}",
        updatedDate=convert_date_to_string(post.updated_date),
        githubUrl=post.github_url,
        html=post.html,
        previous=to_link(item.previous),
        next=to_link(item.next),
        series=to_series_listing(site.posts, post.series, post.path),
        recent=[to_summary(p) for p in recent_posts(site.posts, post.path, recent_limit)],
    )


def to_page(page: Page) -> PageResponse:
    return PageResponse(
        number=page.number,
        path=page.path,
        posts=[to_summary(p) for p in page.posts],
        previousPagePath=page.previous_page_path,
        nextPagePath=page.next_page_path,
        totalPages=page.total_pages,
    )


def to_feed_info(site: SiteBuild, feed: FeedDefinition) -> FeedInfo:
    return FeedInfo(
        name=feed.name,
        title=feed.title,
        output=feed.output,
        tagFilter=list(feed.tag_filter),
        entries=len(site.feeds.get(feed.name, [])),
    )
