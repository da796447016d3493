import datetime
from typing import Iterable, List

from app.models.post import OrderedPost, Post


def _tie_break_key(post: Post):
    return ((post.title or "").casefold(), post.path or "")


def _date_key(post: Post) -> datetime.date:
    # Undated posts sort as the oldest
    return post.date or datetime.date.min


def sort_posts(posts: Iterable[Post], reverse: bool = True) -> List[Post]:
    """Sort posts by date, newest first unless ``reverse`` is False.

    Posts sharing a date always come out ordered by title, then path,
    whatever their input order was.
    """
    ordered = sorted(posts, key=_tie_break_key)
    return sorted(ordered, key=_date_key, reverse=reverse)


def build_ordering(posts: Iterable[Post]) -> List[OrderedPost]:
    ordered = sort_posts(posts)
    last = len(ordered) - 1
    return [
        OrderedPost(
            post=post,
            previous=ordered[index + 1] if index < last else None,
            next=ordered[index - 1] if index > 0 else None,
        )
        for index, post in enumerate(ordered)
    ]


def published_only(posts: Iterable[Post]) -> List[Post]:
    return [post for post in posts if post.published]


def recent_posts(posts: Iterable[Post], exclude_path: str, limit: int = 4) -> List[Post]:
    """Newest published posts other than the one at ``exclude_path``."""
    candidates = [post for post in published_only(posts) if post.path != exclude_path]
    return sort_posts(candidates)[:limit]
