"""ASGI entrypoint for the food analysis API."""

from foodlens.api.app import create_app
from foodlens.containers import build_container

app = create_app(build_container())
