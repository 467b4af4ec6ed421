from fastapi import Depends, Request
from fastapi.templating import Jinja2Templates

from mdblog.repos.posts_repo import FilePostsRepo
from mdblog.schemas.blog import Author
from mdblog.services.markdown_renderer import MarkdownRenderer
from mdblog.services.posts_service import PostsService
from mdblog.settings import Settings


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_templates(request: Request) -> Jinja2Templates:
    return request.app.state.templates


def get_renderer(request: Request) -> MarkdownRenderer:
    return request.app.state.renderer


def get_posts_repo(settings: Settings = Depends(get_settings)):
    return FilePostsRepo(settings.posts_path)


def get_posts_service(
    repo=Depends(get_posts_repo),
    renderer=Depends(get_renderer),
    settings: Settings = Depends(get_settings),
):
    return PostsService(
        repo=repo,
        renderer=renderer,
        uploads_dir=settings.uploads_path,
        slug_collision=settings.SLUG_COLLISION,
        author=Author(name=settings.BLOG_AUTHOR_NAME, email=settings.BLOG_AUTHOR_EMAIL),
    )
