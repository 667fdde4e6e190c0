"""Command-line entrypoint that serves the app with uvicorn."""

import uvicorn

from aqua_tracker.api.app import create_app
from aqua_tracker.config import Settings
from aqua_tracker.containers import build_container


def main() -> None:
    """Build the app from the environment and serve it."""
    settings = Settings()
    app = create_app(build_container(settings))
    print(f"Aqua Tracker listening on http://{settings.host}:{settings.port}")  # noqa: T201
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
