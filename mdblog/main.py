import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from mdblog.errors import RenderError
from mdblog.routers import posts
from mdblog.services.markdown_renderer import MarkdownRenderer
from mdblog.settings import Settings, settings
from mdblog.templates import build_templates, render_template

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper()),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    app_settings: Settings = app.state.settings
    app_settings.posts_path.mkdir(parents=True, exist_ok=True)
    app_settings.uploads_path.mkdir(parents=True, exist_ok=True)
    logger.info(
        f"Serving posts from {app_settings.posts_path.resolve()}, "
        f"static files from {app_settings.public_path.resolve()}"
    )
    yield


async def error_page(request: Request, exc: StarletteHTTPException):
    try:
        return render_template(
            request.app.state.templates,
            request,
            "error.html",
            {"title": exc.detail, "status_code": exc.status_code},
            status_code=exc.status_code,
        )
    except RenderError as e:
        logger.error(f"Failed to render error page: {e!r}")
        return await http_exception_handler(request, exc)


async def validation_error_page(request: Request, exc: RequestValidationError):
    logger.warning(f"Malformed request to {request.url.path}: {exc.errors()}")
    return await error_page(
        request, StarletteHTTPException(status_code=400, detail="Bad request")
    )


def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    app_settings = app_settings or settings
    renderer = MarkdownRenderer(app_settings.CODE_HIGHLIGHT_STYLE)

    app = FastAPI(
        title="mdblog",
        description="Markdown blog server",
        lifespan=lifespan,
    )
    app.state.settings = app_settings
    app.state.renderer = renderer
    app.state.templates = build_templates(
        app_settings.TEMPLATES_DIR,
        BLOG_TITLE=app_settings.BLOG_TITLE,
        HIGHLIGHT_CSS=renderer.css,
        UPLOADS_URL=app_settings.uploads_url,
    )

    app.add_exception_handler(StarletteHTTPException, error_page)
    app.add_exception_handler(RequestValidationError, validation_error_page)

    app.include_router(posts.router)
    app.mount(
        "/public",
        StaticFiles(directory=app_settings.public_path, check_dir=False),
        name="public",
    )

    @app.get("/healthz")
    async def healthz():
        return {"status": "ok"}

    return app


app = create_app()
