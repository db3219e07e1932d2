"""ASGI entrypoint for the shop catalog."""

from shop_catalog.api.app import create_app
from shop_catalog.containers import build_container

app = create_app(build_container())
