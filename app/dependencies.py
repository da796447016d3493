import logging
from typing import Optional

from fastapi import Depends

from app.models.site import SiteBuild
from app.repos.posts_repo import FilesystemPostsRepo
from app.services.blog_service import BlogService
from app.services.content_parser import ContentParser
from app.settings import settings

logger = logging.getLogger(__name__)

# Latest successful build, swapped whole on rebuild
_current_site: Optional[SiteBuild] = None


def get_posts_repo():
    return FilesystemPostsRepo(settings.content_path)


def get_content_parser():
    return ContentParser(excerpt_length=settings.EXCERPT_LENGTH)


def get_blog_service(
    repo=Depends(get_posts_repo),
    parser=Depends(get_content_parser),
):
    return BlogService(repo=repo, parser=parser, settings=settings)


def rebuild_site(service: BlogService) -> SiteBuild:
    """Build the site and make it current. On failure the previous build stays."""
    global _current_site
    site = service.build()
    _current_site = site
    return site


def reset_site() -> None:
    global _current_site
    _current_site = None


def get_site(service: BlogService = Depends(get_blog_service)) -> SiteBuild:
    if _current_site is None:
        logger.info("No site build yet, building now")
        return rebuild_site(service)
    return _current_site
