import logging
from pathlib import Path
from typing import List, Tuple

from mdblog.errors import PostNotFoundError, StorageError

logger = logging.getLogger(__name__)

POST_SUFFIX = ".md"


class FilePostsRepo:
    """Posts stored as `<slug>.md` files directly inside one directory."""

    def __init__(self, posts_dir: Path):
        self.posts_dir = Path(posts_dir)

    def read(self, slug: str) -> str:
        if not self._is_valid_slug(slug):
            raise PostNotFoundError(slug)
        path = self._path_for(slug)
        try:
            return self._read_file(path)
        except FileNotFoundError:
            raise PostNotFoundError(slug)

    def list_posts(self) -> List[Tuple[str, str]]:
        """Return (raw text, slug) for every post, ordered by filename."""
        if not self.posts_dir.exists():
            return []
        try:
            # iterdir raises on an unreadable or non-directory path
            paths = sorted(
                p
                for p in self.posts_dir.iterdir()
                if p.suffix == POST_SUFFIX and p.is_file()
            )
        except OSError as e:
            raise StorageError(f"listing {self.posts_dir}: {e}") from e

        posts = []
        for path in paths:
            try:
                posts.append((self._read_file(path), path.stem))
            except FileNotFoundError as e:
                raise StorageError(f"reading {path}: {e}") from e
        return posts

    def write(self, slug: str, text: str) -> None:
        if not self._is_valid_slug(slug):
            raise StorageError(f"refusing to write post with slug {slug!r}")
        path = self._path_for(slug)
        try:
            self.posts_dir.mkdir(parents=True, exist_ok=True)
            # newline="" keeps the text byte-for-byte as submitted
            with open(path, "w", encoding="utf-8", newline="") as f:
                f.write(text)
        except OSError as e:
            raise StorageError(f"writing {path}: {e}") from e

    def exists(self, slug: str) -> bool:
        return self._is_valid_slug(slug) and self._path_for(slug).is_file()

    def _path_for(self, slug: str) -> Path:
        return self.posts_dir / f"{slug}{POST_SUFFIX}"

    @staticmethod
    def _read_file(path: Path) -> str:
        try:
            with open(path, encoding="utf-8", newline="") as f:
                return f.read()
        except FileNotFoundError:
            raise
        except (OSError, UnicodeDecodeError) as e:
            raise StorageError(f"reading {path}: {e}") from e

    @staticmethod
    def _is_valid_slug(slug: str) -> bool:
        return bool(slug) and Path(slug).name == slug and not slug.startswith(".")
