"""
Centralized error handling
Every failure leaves the API as a JSON object of the form {"error": <message>}.
"""

import logging
import uuid
from contextvars import ContextVar

from fastapi import Request
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware

# Context variable for request tracing
request_id_var: ContextVar[str] = ContextVar('request_id', default='')

logger = logging.getLogger(__name__)


class RequestContextMiddleware(BaseHTTPMiddleware):
    """Middleware to tag each request with a trace ID"""

    async def dispatch(self, request: Request, call_next):
        trace_id = str(uuid.uuid4())[:8]
        request_id_var.set(trace_id)
        request.state.trace_id = trace_id

        try:
            response = await call_next(request)
        except Exception as e:
            logger.exception(f"[{trace_id}] Unhandled exception for {request.method} {request.url.path}: {e}")
            raise

        # Add trace ID to response headers for client-side debugging
        response.headers["X-Trace-ID"] = trace_id
        return response


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Render HTTP exceptions as {"error": detail}"""
    if exc.status_code >= 500:
        logger.error(f"[{request_id_var.get()}] HTTP {exc.status_code} on {request.method} {request.url.path}: {exc.detail}")
    return error_response(exc.status_code, str(exc.detail))


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed request bodies are bad requests"""
    errors = exc.errors()
    message = "Invalid request body"
    if errors:
        error = errors[0]
        field = ".".join(str(loc) for loc in error.get("loc", ()) if loc != "body")
        detail = error.get("msg", "Unknown validation error")
        message = f"{field}: {detail}" if field else detail

    logger.info(f"[{request_id_var.get()}] Rejected request body on {request.method} {request.url.path}: {message}")
    return error_response(400, message)


async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle all other exceptions"""
    logger.error(f"[{request_id_var.get()}] Unhandled exception: {exc}")
    return error_response(500, str(exc))


def setup_error_handling(app):
    """Install the middleware and exception handlers on a FastAPI app"""
    app.add_middleware(RequestContextMiddleware)

    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)

    logger.info("Error handling initialized")
