import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, File, Form, HTTPException, Request, UploadFile
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

from mdblog import dependencies as deps
from mdblog.errors import BlogError
from mdblog.services.posts_service import PostsService
from mdblog.templates import render_template

logger = logging.getLogger(__name__)

router = APIRouter()

ERROR_MESSAGES = {
    400: "Bad request",
    404: "Post not found",
    409: "A post with this title already exists",
}


def _http_error(e: BlogError, fallback: str) -> HTTPException:
    """Map a storage/rendering failure to a response without leaking its details."""
    detail = ERROR_MESSAGES.get(e.status_code, fallback)
    return HTTPException(status_code=e.status_code, detail=detail)


@router.get("/", response_class=HTMLResponse)
def index(
    request: Request,
    service: PostsService = Depends(deps.get_posts_service),
    templates: Jinja2Templates = Depends(deps.get_templates),
):
    """List all posts."""
    try:
        posts = service.list_posts()
        return render_template(templates, request, "index.html", {"posts": posts})
    except HTTPException:
        raise
    except BlogError as e:
        logger.error(f"Failed to list posts: {e!r}")
        raise _http_error(e, "Failed to retrieve posts")
    except Exception as e:
        logger.error(f"Unexpected error listing posts: {e!r}")
        raise HTTPException(status_code=500, detail="Failed to retrieve posts")


@router.get("/posts/{slug}", response_class=HTMLResponse)
def get_post(
    slug: str,
    request: Request,
    service: PostsService = Depends(deps.get_posts_service),
    templates: Jinja2Templates = Depends(deps.get_templates),
):
    """Render a single post by slug."""
    try:
        post = service.get_post(slug)
        return render_template(templates, request, "post.html", {"post": post})
    except HTTPException:
        raise
    except BlogError as e:
        if e.status_code == 404:
            logger.warning(f"Post not found: {slug}")
        else:
            logger.error(f"Failed to render post {slug}: {e!r}")
        raise _http_error(e, "Failed to retrieve post")
    except Exception as e:
        logger.error(f"Unexpected error retrieving post {slug}: {e!r}")
        raise HTTPException(status_code=500, detail="Failed to retrieve post")


@router.get("/write", response_class=HTMLResponse)
def write_form(
    request: Request,
    templates: Jinja2Templates = Depends(deps.get_templates),
):
    try:
        return render_template(templates, request, "write.html")
    except BlogError as e:
        logger.error(f"Failed to render write form: {e!r}")
        raise HTTPException(status_code=500, detail="Internal Server Error")


@router.post("/submit")
def submit_post(
    title: str = Form(...),
    markdown: str = Form(...),
    description: str = Form(""),
    imageUpload: Optional[List[UploadFile]] = File(None),
    service: PostsService = Depends(deps.get_posts_service),
):
    """Create a post from the write form and redirect to it."""
    try:
        slug = service.create_post(
            title, markdown, description=description, images=imageUpload or []
        )
    except HTTPException:
        raise
    except BlogError as e:
        if e.status_code < 500:
            logger.warning(f"Rejected post submission {title!r}: {e}")
        else:
            logger.error(f"Failed to save post {title!r}: {e!r}")
        raise _http_error(e, "Failed to save post")
    except Exception as e:
        logger.error(f"Unexpected error saving post {title!r}: {e!r}")
        raise HTTPException(status_code=500, detail="Failed to save post")

    return RedirectResponse(f"/posts/{slug}", status_code=302)
