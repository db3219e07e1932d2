"""Jinja2 template setup and render helpers."""

import re
from datetime import date
from pathlib import Path

from fastapi import Request
from fastapi.templating import Jinja2Templates
from markupsafe import Markup
from starlette.responses import Response

from shop_catalog.domain.views import NavigationContext
from shop_catalog.services.aggregator import LookupResult

TEMPLATES_DIR = Path(__file__).resolve().parents[1] / "templates"

NO_RESULTS_EMPTY = "No Results"
NO_RESULTS_FAILED = "no results"

_SCRIPT_BLOCK = re.compile(r"<script\b[^>]*>.*?</script\s*>", re.IGNORECASE | re.DOTALL)
_EVENT_HANDLER = re.compile(
    r"""\s+on[a-z]+\s*=\s*(?:"[^"]*"|'[^']*'|[^\s>]+)""", re.IGNORECASE
)
_JS_URL = re.compile(
    r"""(href|src)\s*=\s*(["']?)\s*javascript:[^"'\s>]*\2""", re.IGNORECASE
)


def format_date(value: date | None) -> str:
    """Render a date as YYYY-MM-DD."""
    if value is None:
        return ""
    return f"{value.year}-{value.month:02d}-{value.day:02d}"


def safe_html(value: str | None) -> Markup:
    """Strip executable content from stored HTML and mark the rest safe."""
    cleaned = _SCRIPT_BLOCK.sub("", value or "")
    cleaned = _EVENT_HANDLER.sub("", cleaned)
    cleaned = _JS_URL.sub(r'\1=\2#\2', cleaned)
    return Markup(cleaned)


def nav_link(url: str, label: str, nav: NavigationContext | None) -> Markup:
    """Render a navigation entry, marked active for the current route."""
    active = nav is not None and nav.active_route == url
    css = ' class="nav-item active"' if active else ' class="nav-item"'
    return Markup('<li{}><a class="nav-link" href="{}">{}</a></li>').format(
        Markup(css), url, label
    )


templates = Jinja2Templates(directory=str(TEMPLATES_DIR))
templates.env.filters["format_date"] = format_date
templates.env.filters["safe_html"] = safe_html
templates.env.globals["nav_link"] = nav_link


def render(
    request: Request,
    name: str,
    context: dict[str, object] | None = None,
    status_code: int = 200,
) -> Response:
    """Render a template with this request's navigation and session."""
    return templates.TemplateResponse(
        request=request,
        name=name,
        context={
            "nav": getattr(request.state, "navigation", None),
            "session": getattr(request.state, "session", None),
            **(context or {}),
        },
        status_code=status_code,
    )


def listing_context(result: LookupResult, key: str) -> dict[str, object]:
    """Template context for a simple listing page."""
    if not result.ok:
        return {"message": NO_RESULTS_FAILED}
    if not result.value:
        return {"message": NO_RESULTS_EMPTY}
    return {key: result.value}
