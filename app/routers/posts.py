import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException

from app import dependencies as deps
from app.models.site import SiteBuild
from app.schemas.blog import PageResponse, PostDetail, PostSummary
from app.services import post_service
from app.services.series import group_series
from app.settings import settings

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get(settings.BLOG_PREFIX, response_model=PageResponse)
def first_page(site: SiteBuild = Depends(deps.get_site)):
    """First page of the blog index."""
    return _page_or_404(site, 1)


@router.get(settings.BLOG_PREFIX + "/{number}", response_model=PageResponse)
def numbered_page(number: int, site: SiteBuild = Depends(deps.get_site)):
    # Page 1 is only served at the bare prefix
    if number < 2:
        raise HTTPException(status_code=404, detail="Page not found")
    return _page_or_404(site, number)


@router.get("/posts/{post_path:path}", response_model=PostDetail)
def get_post(post_path: str, site: SiteBuild = Depends(deps.get_site)):
    """Get a single post by its URL path."""
    try:
        item = site.get_post("/" + post_path.strip("/"))
        if not item:
            raise HTTPException(status_code=404, detail="Post not found")
        return post_service.to_detail(site, item, settings.RECENT_POSTS_LIMIT)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error retrieving post {post_path}: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve post")


@router.get("/series/{name}", response_model=List[PostSummary])
def get_series(name: str, site: SiteBuild = Depends(deps.get_site)):
    posts = group_series(site.posts, name)
    if not posts:
        raise HTTPException(status_code=404, detail="Series not found")
    return [post_service.to_summary(p) for p in posts]


def _page_or_404(site: SiteBuild, number: int) -> PageResponse:
    page = site.get_page(number)
    if page is None:
        raise HTTPException(status_code=404, detail="Page not found")
    return post_service.to_page(page)
