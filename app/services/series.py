from typing import Iterable, List, Optional

from app.models.post import Post
from app.services.ordering import published_only, sort_posts


def group_series(posts: Iterable[Post], series_name: Optional[str]) -> List[Post]:
    """Published posts of one series, oldest first so it reads start to end."""
    if not series_name:
        return []
    members = [post for post in published_only(posts) if post.series == series_name]
    return sort_posts(members, reverse=False)
