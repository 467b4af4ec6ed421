import datetime
from pathlib import Path
from typing import Any, Optional

import jinja2
from fastapi import Request
from fastapi.templating import Jinja2Templates
from starlette.responses import Response

from mdblog.errors import RenderError

TEMPLATES_DIR = Path(__file__).parent / "templates"


def _format_date(value: Optional[datetime.datetime]) -> str:
    if not value:
        return ""
    return f"{value:%B} {value.day}, {value.year}"


def build_templates(
    extra_dir: Optional[str] = None, **template_globals: Any
) -> Jinja2Templates:
    """
    Load the page templates once. A directory given in extra_dir is searched
    before the bundled templates so individual pages can be overridden.
    """
    search_path = [str(TEMPLATES_DIR)]
    if extra_dir:
        search_path.insert(0, extra_dir)

    env = jinja2.Environment(
        loader=jinja2.FileSystemLoader(search_path),
        autoescape=jinja2.select_autoescape(["html"]),
        trim_blocks=True,
        lstrip_blocks=True,
    )
    env.filters["format_date"] = _format_date
    env.globals.update(template_globals)
    return Jinja2Templates(env=env)


def render_template(
    templates: Jinja2Templates,
    request: Request,
    name: str,
    context: Optional[dict] = None,
    status_code: int = 200,
) -> Response:
    try:
        return templates.TemplateResponse(
            request, name, context or {}, status_code=status_code
        )
    except jinja2.TemplateError as e:
        raise RenderError(f"rendering template {name}: {e}") from e
