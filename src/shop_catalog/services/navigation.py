"""Active navigation route derivation."""

import math
from collections.abc import Mapping

from shop_catalog.domain.views import NavigationContext


def derive_active_route(path: str) -> str:
    """Return the normalized top-level route for a request path.

    A numeric second segment is treated as an identifier and dropped, so
    ``/shop/42`` maps to ``/shop``. Any other path is kept as-is.
    """
    route = path[1:] if path.startswith("/") else path
    segments = route.split("/")
    if len(segments) > 1 and _is_numeric(segments[1]):
        return "/" + segments[0]
    return "/" + route


def navigation_for(path: str, query_params: Mapping[str, str]) -> NavigationContext:
    """Build the navigation context for a single request."""
    return NavigationContext(
        active_route=derive_active_route(path),
        viewing_category=query_params.get("category") or None,
    )


def _is_numeric(segment: str) -> bool:
    stripped = segment.strip()
    if not stripped:
        return True
    try:
        value = float(stripped)
    except ValueError:
        return False
    return not math.isnan(value)
