"""FastAPI application entrypoint. No business logic; only wiring, middleware, and error mapping."""

from dotenv import load_dotenv

load_dotenv()

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.api.v1 import health
from app.api.v1 import router as v1_router
from app.core.config import settings
from app.core.errors import AppError, InternalError, ValidationFailedError
from app.core.logging import configure_logging

configure_logging(settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

APP_VERSION = "1.0.0"
# Any Vercel preview/production deployment of the frontend.
VERCEL_ORIGIN_REGEX = r"^https://.*\.vercel\.app$"

app = FastAPI(
    title="HotelBediaX API",
    version=APP_VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"] if settings.APP_ENV == "dev" else settings.cors_origin_list,
    allow_origin_regex=None if settings.APP_ENV == "dev" else VERCEL_ORIGIN_REGEX,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization"],
)


def _error_response(exc: AppError) -> JSONResponse:
    headers = {"WWW-Authenticate": "Bearer"} if exc.status_code == 401 else None
    return JSONResponse(status_code=exc.status_code, content=exc.to_body(), headers=headers)


def _validation_details(errors: list[dict[str, Any]]) -> list[dict[str, Any]]:
    """Flatten pydantic errors to {field, location, message}; drop non-serializable ctx."""
    details = []
    for err in errors:
        loc = [str(part) for part in err.get("loc", ())]
        location = loc[0] if loc else ""
        details.append(
            {
                "field": ".".join(loc[1:]) if len(loc) > 1 else location,
                "location": location,
                "message": err.get("msg", "Invalid value"),
            }
        )
    return details


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return _error_response(exc)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    error = ValidationFailedError(details=_validation_details(exc.errors()))
    return _error_response(error)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if exc.status_code == 404 and exc.detail == "Not Found":
        message = f"Route {request.method} {request.url.path} not found"
    else:
        message = str(exc.detail)
    label = {404: "Not Found", 405: "Method Not Allowed"}.get(exc.status_code, "HTTP Error")
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": label, "message": message},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    message = str(exc) if settings.APP_ENV == "dev" else None
    return _error_response(InternalError(message))


app.include_router(health.router, prefix="/health", tags=["health"])
app.include_router(v1_router, prefix=settings.API_PREFIX)


@app.get("/")
def root() -> dict[str, str]:
    """Root route; minimal payload for discovery."""
    return {
        "message": "Welcome to HotelBediaX API",
        "version": APP_VERSION,
        "documentation": "/docs",
    }
