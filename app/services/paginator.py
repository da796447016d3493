import math
from typing import Iterable, List

from app.models.post import Post
from app.models.site import Page
from app.services.ordering import published_only, sort_posts


def page_path(index: int, base_path: str = "/blog") -> str:
    """Path of the 0-based page ``index``; the first page lives at the base path."""
    return base_path if index == 0 else f"{base_path}/{index + 1}"


def paginate(
    posts: Iterable[Post], page_size: int = 10, base_path: str = "/blog"
) -> List[Page]:
    if page_size < 1:
        raise ValueError(f"page_size must be at least 1, got {page_size}")

    listed = sort_posts(published_only(posts))
    num_pages = math.ceil(len(listed) / page_size)

    return [
        Page(
            number=i + 1,
            path=page_path(i, base_path),
            posts=listed[i * page_size : i * page_size + page_size],
            previous_page_path=page_path(i - 1, base_path) if i > 0 else None,
            next_page_path=page_path(i + 1, base_path) if i < num_pages - 1 else None,
            total_pages=num_pages,
        )
        for i in range(num_pages)
    ]
