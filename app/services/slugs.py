import logging
import re
from collections import defaultdict
from typing import Dict, Iterable, List

from app.errors import InvalidFrontmatterError, SlugCollisionError
from app.models.post import Post

logger = logging.getLogger(__name__)

_WHITESPACE = re.compile(r"\s+")
_INVALID_URL_CHARS = re.compile(r"[^a-zA-Z0-9\-_]")


def slugify_title(title: str) -> str:
    """Turn a post title into a URL-safe base name.

    >>> slugify_title("Hello, World! Part 2")
    'hello-world-part-2'
    """
    value = _WHITESPACE.sub("-", title)
    value = _INVALID_URL_CHARS.sub("", value)
    return value.lower()


def derive_slug(post: Post) -> str:
    """Compute the canonical URL path of a post from its frontmatter."""
    if post.slug is not None:
        base = post.slug
    elif post.title:
        base = slugify_title(post.title)
    else:
        raise InvalidFrontmatterError(post.id, "post needs a title or a slug")

    if not base.strip("/"):
        reason = "slug is empty" if post.slug is not None else "title yields an empty slug"
        raise InvalidFrontmatterError(post.id, reason)

    path = f"/{base}"

    if post.include_date_in_url:
        if post.date is None:
            raise InvalidFrontmatterError(
                post.id, "include_date_in_url is set but the post has no date"
            )
        path = f"/{post.date.strftime('%Y/%m/%d')}{path}"

    return path


def assign_paths(posts: Iterable[Post]) -> List[Post]:
    """Return copies of ``posts`` with ``path`` filled in.

    Raises SlugCollisionError if two posts end up on the same path.
    """
    routed = [post.model_copy(update={"path": derive_slug(post)}) for post in posts]

    by_path: Dict[str, List[str]] = defaultdict(list)
    for post in routed:
        by_path[post.path].append(post.id)

    for path, doc_ids in by_path.items():
        if len(doc_ids) > 1:
            raise SlugCollisionError(path, doc_ids)

    logger.debug(f"Assigned paths to {len(routed)} posts")
    return routed
