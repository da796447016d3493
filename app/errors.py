from typing import Iterable


class BlogBuildError(Exception):
    """Base class for anything that aborts a site build."""


class ContentSourceError(BlogBuildError):
    pass


class InvalidFrontmatterError(BlogBuildError):
    def __init__(self, doc_id: str, reason: str):
        self.doc_id = doc_id
        self.reason = reason
        super().__init__(f"Invalid frontmatter in {doc_id}: {reason}")


class SlugCollisionError(BlogBuildError):
    """Two or more posts resolved to the same URL path."""

    def __init__(self, path: str, doc_ids: Iterable[str]):
        self.path = path
        self.doc_ids = sorted(doc_ids)
        super().__init__(
            f"Posts {', '.join(self.doc_ids)} all resolve to path {path}"
        )
