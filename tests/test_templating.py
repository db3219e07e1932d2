"""Tests for template helpers."""

from datetime import date

from shop_catalog.api.templating import (
    format_date,
    listing_context,
    nav_link,
    safe_html,
)
from shop_catalog.domain.views import NavigationContext
from shop_catalog.services.aggregator import LookupResult


def test_format_date() -> None:
    assert format_date(date(2024, 3, 7)) == "2024-03-07"
    assert format_date(None) == ""


def test_safe_html_strips_executable_content() -> None:
    cleaned = safe_html(
        '<p onclick="steal()">Hi</p><script>alert(1)</script>'
        '<a href="javascript:alert(1)">x</a>'
    )

    assert cleaned == '<p>Hi</p><a href="#">x</a>'


def test_nav_link_marks_active_route() -> None:
    nav = NavigationContext(active_route="/items")

    assert 'class="nav-item active"' in nav_link("/items", "Items", nav)
    assert 'class="nav-item"' in nav_link("/shop", "Shop", nav)
    assert "&lt;b&gt;" in nav_link("/userHistory", "<b>", nav)


def test_listing_context_messages() -> None:
    assert listing_context(LookupResult(error=RuntimeError()), "items") == {
        "message": "no results"
    }
    assert listing_context(LookupResult(value=[]), "items") == {"message": "No Results"}
    assert listing_context(LookupResult(value=[1]), "items") == {"items": [1]}
