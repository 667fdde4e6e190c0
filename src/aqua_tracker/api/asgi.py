"""ASGI entrypoint for the aqua tracker API."""

from aqua_tracker.api.app import create_app
from aqua_tracker.containers import build_container

app = create_app(build_container())
