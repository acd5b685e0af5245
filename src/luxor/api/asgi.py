"""ASGI entrypoint for the Luxor API."""

from luxor.api.app import create_app
from luxor.containers import build_container

app = create_app(build_container())
