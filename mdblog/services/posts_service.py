import datetime
import logging
from pathlib import Path
from typing import Iterable, List, Optional

from fastapi import UploadFile

from mdblog.errors import (
    BadRequestError,
    FrontmatterError,
    SlugConflictError,
    StorageError,
)
from mdblog.repos.base import PostStore
from mdblog.schemas.blog import Author, PostMetadata, PostView
from mdblog.services.content_parser import (
    compose_document,
    has_frontmatter,
    split_frontmatter,
)
from mdblog.services.image_service import collect_images, save_images
from mdblog.services.markdown_renderer import MarkdownRenderer
from mdblog.utils import slugify

logger = logging.getLogger(__name__)

_OLDEST = datetime.datetime.min.replace(tzinfo=datetime.timezone.utc)


class PostsService:
    def __init__(
        self,
        repo: PostStore,
        renderer: MarkdownRenderer,
        *,
        uploads_dir: Optional[Path] = None,
        slug_collision: str = "suffix",
        author: Optional[Author] = None,
    ):
        self.repo = repo
        self.renderer = renderer
        self.uploads_dir = uploads_dir
        self.slug_collision = slug_collision
        self.author = author or Author()

    def list_posts(self) -> List[PostMetadata]:
        """Metadata for every post, newest first. Undated posts sort last."""
        posts = []
        for raw, slug in self.repo.list_posts():
            try:
                metadata, _body = split_frontmatter(raw)
            except FrontmatterError as e:
                raise FrontmatterError(f"post {slug!r}: {e}") from e
            posts.append(
                metadata.model_copy(
                    update={"slug": slug, "title": _derive_title(metadata, slug)}
                )
            )

        posts.sort(key=lambda p: p.slug)
        posts.sort(key=lambda p: p.date or _OLDEST, reverse=True)
        return posts

    def get_post(self, slug: str) -> PostView:
        raw = self.repo.read(slug)
        metadata, body = split_frontmatter(raw)
        content = self.renderer.render(body)
        return PostView(
            **{
                **metadata.model_dump(),
                "slug": slug,
                "title": _derive_title(metadata, slug),
                "content": content,
            }
        )

    def create_post(
        self,
        title: str,
        markdown: str,
        description: str = "",
        images: Iterable[UploadFile] = (),
    ) -> str:
        """Store a submitted post and its images. Returns the slug it was saved under."""
        slug = slugify(title)
        if not slug:
            raise BadRequestError(
                f"Title {title!r} must contain at least one letter or digit"
            )
        pending_images = collect_images(images)
        if pending_images and self.uploads_dir is None:
            raise BadRequestError("Image uploads are not enabled")

        if has_frontmatter(markdown):
            try:
                split_frontmatter(markdown)
            except FrontmatterError as e:
                raise BadRequestError(f"Submitted metadata is malformed: {e}") from e
            document = markdown
        else:
            document = compose_document(self._new_metadata(title, description), markdown)

        slug = self._resolve_slug(slug)
        if pending_images:
            try:
                self.uploads_dir.mkdir(parents=True, exist_ok=True)
            except OSError as e:
                raise StorageError(f"creating {self.uploads_dir}: {e}") from e
        self.repo.write(slug, document)

        if pending_images:
            try:
                save_images(pending_images, self.uploads_dir)
            except StorageError:
                logger.error(f"Post {slug} was saved but its images were not")
                raise

        logger.info(f"Successfully created post: {slug}")
        return slug

    def _resolve_slug(self, slug: str) -> str:
        if self.slug_collision == "overwrite" or not self.repo.exists(slug):
            return slug
        if self.slug_collision == "reject":
            raise SlugConflictError(slug)

        n = 2
        while self.repo.exists(f"{slug}-{n}"):
            n += 1
        logger.info(f"Slug {slug} is taken, using {slug}-{n}")
        return f"{slug}-{n}"

    def _new_metadata(self, title: str, description: str) -> dict:
        now = datetime.datetime.now(datetime.timezone.utc).replace(microsecond=0)
        metadata = {"title": title, "description": description, "date": now}
        if self.author.name or self.author.email:
            metadata["author"] = self.author.model_dump()
        return metadata


def _derive_title(metadata: PostMetadata, slug: str) -> str:
    if metadata.title:
        return metadata.title
    return slug.replace("-", " ").replace("_", " ").title()
