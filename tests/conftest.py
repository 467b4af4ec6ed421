import io

import pytest
from starlette.datastructures import UploadFile

from mdblog.errors import PostNotFoundError
from mdblog.settings import Settings


class FakeRepo:
    """
    Minimal in-memory post store used in service tests.
    """

    def __init__(self, docs: dict[str, str] | None = None):
        self.docs = dict(docs or {})
        self.writes = []

    def read(self, slug: str) -> str:
        if slug not in self.docs:
            raise PostNotFoundError(slug)
        return self.docs[slug]

    def list_posts(self):
        return [(text, slug) for slug, text in self.docs.items()]

    def write(self, slug: str, text: str) -> None:
        self.writes.append(slug)
        self.docs[slug] = text

    def exists(self, slug: str) -> bool:
        return slug in self.docs


class FakeRenderer:
    """
    Markdown renderer stand-in that records what it was asked to render.
    """

    def __init__(self, html: str = "<p>rendered</p>"):
        self.html = html
        self.calls = []

    def render(self, body: str) -> str:
        self.calls.append(body)
        return self.html


class FakePostsService:
    """
    Minimal posts service stand-in for router tests.
    """

    def __init__(
        self, list_posts_return=None, get_post_return=None, create_post_return="slug"
    ):
        self._list_posts_return = list_posts_return or []
        self._get_post_return = get_post_return
        self._create_post_return = create_post_return
        self.created = []

    def list_posts(self):
        return self._list_posts_return

    def get_post(self, slug: str):
        return self._get_post_return

    def create_post(self, title, markdown, description="", images=()):
        self.created.append(
            {
                "title": title,
                "markdown": markdown,
                "description": description,
                "images": list(images),
            }
        )
        return self._create_post_return


def make_upload(filename: str, data: bytes = b"\x89PNG fake") -> UploadFile:
    return UploadFile(file=io.BytesIO(data), filename=filename)


@pytest.fixture
def blog_settings(tmp_path):
    return Settings(
        POSTS_DIR=str(tmp_path / "posts"),
        PUBLIC_DIR=str(tmp_path / "public"),
        BLOG_TITLE="Test Blog",
        BLOG_AUTHOR_NAME="Nicholas Kim",
        BLOG_AUTHOR_EMAIL="nick@example.com",
    )
