import logging
import sys
from pathlib import Path
from typing import List

from app.dependencies import get_blog_service, get_content_parser, get_posts_repo
from app.models.site import SiteBuild
from app.services.feeds import render_rss
from app.services.sitemap import render_sitemap
from app.settings import settings

logger = logging.getLogger(__name__)


def export_site(site: SiteBuild, output_dir: Path) -> List[Path]:
    """Write every feed to its configured output path plus sitemap.xml."""
    written = []
    for feed in site.feed_definitions:
        target = output_dir / feed.output.lstrip("/")
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(
            render_rss(
                feed,
                site.feeds.get(feed.name, []),
                site_url=site.site_url,
                site_title=site.site_title,
                site_description=site.site_description,
                built_at=site.built_at,
            ),
            encoding="utf-8",
        )
        written.append(target)

    sitemap = output_dir / "sitemap.xml"
    sitemap.parent.mkdir(parents=True, exist_ok=True)
    sitemap.write_text(render_sitemap(site.sitemap), encoding="utf-8")
    written.append(sitemap)
    return written


if __name__ == "__main__":
    logging.basicConfig(
        level=getattr(logging, settings.LOG_LEVEL.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    service = get_blog_service(repo=get_posts_repo(), parser=get_content_parser())
    try:
        site = service.build()
        paths = export_site(site, settings.output_path)
        logger.info(f"Export completed successfully: {len(paths)} files written.")
    except Exception as e:
        logger.error(f"Export failed: {e}", exc_info=True)
        sys.exit(1)
