from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware
from contextlib import asynccontextmanager

from meetnotes.dependencies import get_settings
from meetnotes.routers import send_email, summarize
from meetnotes.schemas.common import StandardResponse
from meetnotes.utils.errors import ServiceError
from meetnotes.utils.logging import setup_logging
from meetnotes.utils.posthog_client import shutdown_posthog

import logging

# Load configuration
settings = get_settings()

# Configure logging
setup_logging(json_output=settings.log_format == "json")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan event handler for startup and shutdown."""
    # Startup
    logging.info(f"Meeting notes service starting on {settings.host}:{settings.port}")
    logging.info(f"Environment: {settings.app_env}, model: {settings.groq_model}")
    logging.info("Routers registered: /api/summarize, /api/send-email")
    yield
    # Shutdown
    shutdown_posthog()


app = FastAPI(title="Meeting Notes Service", lifespan=lifespan)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Middleware to log all incoming requests."""

    async def dispatch(self, request: Request, call_next):
        try:
            response = await call_next(request)
            if response.status_code >= 400:
                logging.warning(
                    f"{request.method} {request.url.path} -> {response.status_code}"
                )
            return response
        except Exception as e:
            logging.error(
                f"Request failed: {request.method} {request.url.path} - {type(e).__name__}: {e}"
            )
            raise


app.add_middleware(RequestLoggingMiddleware)


# Health endpoint
@app.get("/health", tags=["health"], response_model=StandardResponse)
async def health():
    return StandardResponse(status="ok")


# Exception handlers
@app.exception_handler(ServiceError)
async def service_error_handler(request: Request, exc: ServiceError):
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(status_code=400, content={"error": "Invalid request body"})


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(status_code=exc.status_code, content={"error": exc.detail})


@app.exception_handler(Exception)
async def generic_exception_handler(request: Request, exc: Exception):
    logging.error(
        f"Unhandled exception for {request.method} {request.url.path}: {type(exc).__name__}",
        exc_info=exc,
    )
    return JSONResponse(status_code=500, content={"error": "Unknown error"})


app.include_router(summarize.router)
app.include_router(send_email.router)
