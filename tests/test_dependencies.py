from types import SimpleNamespace

from mdblog.dependencies import (
    get_posts_repo,
    get_posts_service,
    get_renderer,
    get_settings,
    get_templates,
)
from mdblog.repos.posts_repo import FilePostsRepo
from mdblog.schemas.blog import Author
from mdblog.services.posts_service import PostsService
from mdblog.settings import Settings


def fake_request(**state):
    return SimpleNamespace(app=SimpleNamespace(state=SimpleNamespace(**state)))


def test_app_state_dependencies_return_shared_objects():
    settings = Settings()
    templates = object()
    renderer = object()
    request = fake_request(settings=settings, templates=templates, renderer=renderer)

    assert get_settings(request) is settings
    assert get_templates(request) is templates
    assert get_renderer(request) is renderer


def test_get_posts_repo_uses_posts_dir():
    repo = get_posts_repo(settings=Settings(POSTS_DIR="somewhere"))

    assert isinstance(repo, FilePostsRepo)
    assert str(repo.posts_dir) == "somewhere"


def test_get_posts_service_constructs_service():
    class FakeRepo:
        pass

    class FakeRenderer:
        pass

    settings = Settings(
        PUBLIC_DIR="pub",
        UPLOADS_SUBDIR="img",
        SLUG_COLLISION="reject",
        BLOG_AUTHOR_NAME="Ada",
        BLOG_AUTHOR_EMAIL="ada@example.com",
    )
    repo = FakeRepo()
    renderer = FakeRenderer()
    svc = get_posts_service(repo=repo, renderer=renderer, settings=settings)

    assert isinstance(svc, PostsService)
    assert svc.repo is repo
    assert svc.renderer is renderer
    assert svc.uploads_dir == settings.uploads_path
    assert svc.slug_collision == "reject"
    assert svc.author == Author(name="Ada", email="ada@example.com")
