import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import Response

from app import dependencies as deps
from app.models.site import SiteBuild
from app.schemas.blog import FeedInfo
from app.services import post_service
from app.services.feeds import render_rss
from app.services.sitemap import render_sitemap

logger = logging.getLogger(__name__)

router = APIRouter()

RSS_MEDIA_TYPE = "application/rss+xml"


@router.get("/feeds", response_model=List[FeedInfo])
def list_feeds(site: SiteBuild = Depends(deps.get_site)):
    return [post_service.to_feed_info(site, feed) for feed in site.feed_definitions]


@router.get("/rss/{feed_file}")
def get_feed(feed_file: str, site: SiteBuild = Depends(deps.get_site)):
    """Serve the RSS document configured for /rss/{feed_file}."""
    feed = site.get_feed_definition_by_output(f"/rss/{feed_file}")
    if feed is None:
        raise HTTPException(status_code=404, detail="Feed not found")

    xml = render_rss(
        feed,
        site.feeds.get(feed.name, []),
        site_url=site.site_url,
        site_title=site.site_title,
        site_description=site.site_description,
        built_at=site.built_at,
    )
    return Response(content=xml, media_type=RSS_MEDIA_TYPE)


@router.get("/sitemap.xml")
def get_sitemap(site: SiteBuild = Depends(deps.get_site)):
    return Response(content=render_sitemap(site.sitemap), media_type="application/xml")
