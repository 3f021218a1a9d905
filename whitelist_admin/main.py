import logging
import uuid

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from whitelist_admin.core import config
from whitelist_admin.core.database import init_db
from whitelist_admin.core.errors import AppError
from whitelist_admin.core.logging_setup import request_id_var, setup_logging
from whitelist_admin.responses import error_response
from whitelist_admin.routers import admin, health

logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"


def _first_validation_problem(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "invalid request"
    first = errors[0]
    field = ".".join(
        str(part) for part in first.get("loc", ()) if part != "body"
    )
    message = first.get("msg", "invalid value")
    return f"{field}: {message}" if field else message


def create_app() -> FastAPI:
    app = FastAPI(title="Whitelist Admin API")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def bind_request_id(request: Request, call_next):
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
        request.state.request_id = request_id
        reset_token = request_id_var.set(request_id)
        try:
            response = await call_next(request)
        finally:
            request_id_var.reset(reset_token)
        response.headers[REQUEST_ID_HEADER] = request_id
        return response

    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError):
        if exc.status_code >= 500:
            logger.error(
                "Request failed",
                extra={"error_code": exc.code, "path": request.url.path},
            )
        headers = (
            {"WWW-Authenticate": "Bearer"} if exc.status_code == 401 else None
        )
        return error_response(exc.message, exc.status_code, headers=headers)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError
    ):
        return error_response(
            f"Validation error: {_first_validation_problem(exc)}", 400
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(
        request: Request, exc: StarletteHTTPException
    ):
        return error_response(str(exc.detail), exc.status_code)

    # Runs in ServerErrorMiddleware, outside bind_request_id.
    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        request_id = (
            getattr(request.state, "request_id", None)
            or request.headers.get(REQUEST_ID_HEADER)
            or uuid.uuid4().hex
        )
        reset_token = request_id_var.set(request_id)
        try:
            logger.exception(
                "Unhandled error", extra={"path": request.url.path}
            )
        finally:
            request_id_var.reset(reset_token)
        return error_response(
            "Internal server error",
            500,
            headers={REQUEST_ID_HEADER: request_id},
        )

    app.include_router(health.router)
    app.include_router(admin.router, prefix=config.API_PREFIX)

    @app.on_event("startup")
    def on_startup() -> None:
        setup_logging()
        missing = config.missing_settings()
        if missing:
            logger.warning(
                "Missing required configuration",
                extra={"missing": ", ".join(missing)},
            )
        init_db()

    return app


app = create_app()
