import xml.etree.ElementTree as ET
from typing import Iterable, List

from app.models.post import Post
from app.models.site import Page, SitemapEntry
from app.services.ordering import published_only, sort_posts

SITEMAP_NS = "http://www.sitemaps.org/schemas/sitemap/0.9"


def build_sitemap(
    site_url: str, posts: Iterable[Post], pages: Iterable[Page]
) -> List[SitemapEntry]:
    entries = [
        SitemapEntry(
            url=f"{site_url}{page.path}",
            lastmod=page.posts[0].last_modified if page.posts else None,
        )
        for page in pages
    ]
    entries.extend(
        SitemapEntry(url=f"{site_url}{post.path}", lastmod=post.last_modified)
        for post in sort_posts(published_only(posts))
    )
    return entries


def render_sitemap(entries: Iterable[SitemapEntry]) -> str:
    urlset = ET.Element("urlset", {"xmlns": SITEMAP_NS})
    for entry in entries:
        url = ET.SubElement(urlset, "url")
        ET.SubElement(url, "loc").text = entry.url
        if entry.lastmod is not None:
            ET.SubElement(url, "lastmod").text = entry.lastmod.isoformat()
        ET.SubElement(url, "changefreq").text = entry.changefreq
        ET.SubElement(url, "priority").text = f"{entry.priority:.1f}"
    return '<?xml version="1.0" encoding="UTF-8"?>\n' + ET.tostring(
        urlset, encoding="unicode"
    )
