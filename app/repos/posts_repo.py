from pathlib import Path
from typing import List, Tuple

from app.errors import ContentSourceError


class FilesystemPostsRepo:
    def __init__(self, content_dir: Path):
        self.content_dir = Path(content_dir)

    def list_post_files(self) -> List[Path]:
        if not self.content_dir.is_dir():
            raise ContentSourceError(f"Content directory not found: {self.content_dir}")
        return sorted(
            path
            for path in self.content_dir.rglob("*.md")
            if path.is_file() and not self._is_hidden(path)
        )

    def read(self, path: Path) -> Tuple[str, str]:
        """Return ``(doc_id, text)`` where doc_id is the path relative to the content dir."""
        doc_id = path.relative_to(self.content_dir).as_posix()
        return doc_id, path.read_text(encoding="utf-8")

    def _is_hidden(self, path: Path) -> bool:
        relative = path.relative_to(self.content_dir)
        return any(part.startswith((".", "_")) for part in relative.parts)
