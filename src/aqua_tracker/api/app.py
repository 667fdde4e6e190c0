"""FastAPI application factory."""

import logging
from pathlib import Path
from uuid import UUID

from fastapi import FastAPI, Form, Request, status
from fastapi.responses import (
    HTMLResponse,
    PlainTextResponse,
    RedirectResponse,
    Response,
)
from fastapi.templating import Jinja2Templates

from aqua_tracker.app_logging import configure_logging
from aqua_tracker.config import Settings
from aqua_tracker.containers import AppContainer
from aqua_tracker.domain.errors import (
    AquaTrackerError,
    DuplicateUsernameError,
    InvalidCredentialsError,
    InvalidInputError,
    StoreFailureError,
)
from aqua_tracker.domain.intake import BottleSize, DailyIntake

COOKIE_NAME = "token"
TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"

_ERROR_STATUS: tuple[tuple[type[AquaTrackerError], int], ...] = (
    (InvalidInputError, status.HTTP_400_BAD_REQUEST),
    (InvalidCredentialsError, status.HTTP_401_UNAUTHORIZED),
    (DuplicateUsernameError, status.HTTP_500_INTERNAL_SERVER_ERROR),
    (StoreFailureError, status.HTTP_500_INTERNAL_SERVER_ERROR),
)


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)
    templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

    app = FastAPI()
    app.state.container = container

    @app.exception_handler(AquaTrackerError)
    async def handle_app_error(
        request: Request, exc: AquaTrackerError
    ) -> PlainTextResponse:
        status_code = _status_for(exc)
        if status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
            logger.error(
                "Request failed: %s %s: %s",
                request.method,
                request.url.path,
                type(exc).__name__,
            )
        else:
            logger.warning(
                "Request rejected: %s %s: %s",
                request.method,
                request.url.path,
                exc.message,
            )
        return PlainTextResponse(exc.message, status_code=status_code)

    def current_user_id(request: Request) -> UUID | None:
        state_container: AppContainer = request.app.state.container
        token = request.cookies.get(COOKIE_NAME)
        return state_container.auth_service.authenticate(token)

    @app.get("/health")
    async def health() -> PlainTextResponse:
        """Liveness probe."""
        return PlainTextResponse("OK")

    @app.get("/", response_class=HTMLResponse)
    def home(request: Request) -> Response:
        """Show today's counter, or send anonymous users to the login page."""
        user_id = current_user_id(request)
        if user_id is None:
            return _redirect("/login")
        record = request.app.state.container.intake_service.get_today(user_id)
        return templates.TemplateResponse(
            request, "counter.html", _counter_context(record)
        )

    @app.get("/login", response_class=HTMLResponse)
    def login_form(request: Request) -> Response:
        return templates.TemplateResponse(request, "login.html", {})

    @app.post("/login")
    def login(
        request: Request,
        username: str = Form(""),
        password: str = Form(""),
    ) -> Response:
        state_container: AppContainer = request.app.state.container
        token = state_container.auth_service.login(username, password)
        response = _redirect("/")
        _set_session_cookie(response, token, state_container.settings)
        return response

    @app.get("/signup", response_class=HTMLResponse)
    def signup_form(request: Request) -> Response:
        return templates.TemplateResponse(request, "signup.html", {})

    @app.post("/signup")
    def signup(
        request: Request,
        username: str = Form(""),
        password: str = Form(""),
    ) -> Response:
        state_container: AppContainer = request.app.state.container
        token = state_container.auth_service.signup(username, password)
        response = _redirect("/")
        _set_session_cookie(response, token, state_container.settings)
        return response

    @app.get("/logout")
    def logout() -> Response:
        response = _redirect("/login")
        response.delete_cookie(COOKIE_NAME, path="/")
        return response

    @app.post("/increment", response_class=HTMLResponse)
    def log_bottle(request: Request, increment: str = Form("")) -> Response:
        """Log one bottle for today and return the updated counts table."""
        user_id = current_user_id(request)
        if user_id is None:
            return PlainTextResponse(
                "Unauthorized", status_code=status.HTTP_401_UNAUTHORIZED
            )
        record = request.app.state.container.intake_service.increment_today(
            user_id, increment
        )
        return templates.TemplateResponse(
            request, "counter_table.html", _counter_context(record)
        )

    @app.get("/history", response_class=HTMLResponse)
    def history(request: Request) -> Response:
        """Show total litres per day, newest first."""
        user_id = current_user_id(request)
        if user_id is None:
            return _redirect("/login")
        entries = request.app.state.container.intake_service.get_history(user_id)
        return templates.TemplateResponse(
            request, "history.html", {"history": entries}
        )

    return app


def _status_for(exc: AquaTrackerError) -> int:
    for error_type, status_code in _ERROR_STATUS:
        if isinstance(exc, error_type):
            return status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def _redirect(url: str) -> RedirectResponse:
    return RedirectResponse(url=url, status_code=status.HTTP_302_FOUND)


def _set_session_cookie(response: Response, token: str, settings: Settings) -> None:
    """Attach the session cookie; it lives exactly as long as the token."""
    response.set_cookie(
        COOKIE_NAME,
        token,
        max_age=settings.session_ttl_days * 24 * 60 * 60,
        path="/",
        httponly=True,
        secure=settings.cookie_secure,
        samesite="lax",
    )


def _counter_context(record: DailyIntake) -> dict[str, object]:
    return {
        "day": record.day,
        "rows": [(size.label, record.count(size)) for size in BottleSize],
        "sizes": [size.label for size in BottleSize],
        "total": record.total_liters,
    }
