import datetime
import logging
import re
from typing import List

from app.errors import SlugCollisionError
from app.models.post import Post
from app.models.site import SiteBuild
from app.services.feeds import serialize_feed
from app.services.ordering import build_ordering
from app.services.paginator import paginate
from app.services.sitemap import build_sitemap
from app.services.slugs import assign_paths
from app.settings import Settings

logger = logging.getLogger(__name__)


class BlogService:
    def __init__(self, repo, parser, settings: Settings):
        self.repo = repo
        self.parser = parser
        self.settings = settings

    def load_posts(self) -> List[Post]:
        posts = []
        for path in self.repo.list_post_files():
            doc_id, text = self.repo.read(path)
            posts.append(self.parser.parse(doc_id, text))
        return posts

    def build(self) -> SiteBuild:
        """Run one full build; any error aborts it before anything is returned."""
        return build_site(self.load_posts(), self.settings)


def build_site(raw_posts: List[Post], settings: Settings) -> SiteBuild:
    posts = assign_paths(raw_posts)
    _check_index_collisions(posts, settings.BLOG_PREFIX)
    ordered = build_ordering(posts)
    pages = paginate(posts, settings.PAGE_SIZE, settings.BLOG_PREFIX)
    feeds = {
        feed.name: serialize_feed(posts, feed, settings.SITE_URL, settings.FEED_LIMIT)
        for feed in settings.FEEDS
    }

    site = SiteBuild(
        built_at=datetime.datetime.now(datetime.timezone.utc),
        site_url=settings.SITE_URL,
        site_title=settings.SITE_TITLE,
        site_description=settings.SITE_DESCRIPTION,
        ordered=ordered,
        pages=pages,
        feed_definitions=settings.FEEDS,
        feeds=feeds,
        sitemap=build_sitemap(settings.SITE_URL, posts, pages),
    )

    published = sum(1 for post in posts if post.published)
    logger.info(
        f"Built site: {len(posts)} posts ({published} published), "
        f"{len(pages)} pages, {len(feeds)} feeds"
    )
    return site


def _check_index_collisions(posts: List[Post], base_path: str) -> None:
    """Index pages own the base path and every base_path/<n> below it."""
    index_path = re.compile(re.escape(base_path) + r"(/\d+)?")
    for post in posts:
        if index_path.fullmatch(post.path):
            raise SlugCollisionError(post.path, [post.id, f"index page {post.path}"])
