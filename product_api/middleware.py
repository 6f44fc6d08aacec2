"""Request pipeline: logging, error translation, JSON body, API key.

Starlette runs the most recently added middleware first, so
``create_app`` adds these in reverse order of execution.
"""

import json
import logging
import secrets
from datetime import datetime, timezone

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

from .errors import ApiError, UnclassifiedError, ValidationError, error_response

logger = logging.getLogger(__name__)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log method and original URL of every request before anything else."""

    async def dispatch(self, request: Request, call_next):
        timestamp = datetime.now(timezone.utc).isoformat(timespec="milliseconds")
        url = request.url.path
        if request.url.query:
            url = f"{url}?{request.url.query}"
        logger.info(f"[{timestamp}] {request.method} {url}")
        return await call_next(request)


class ErrorTranslationMiddleware(BaseHTTPMiddleware):
    """Turn errors raised further down the chain into JSON error responses."""

    async def dispatch(self, request: Request, call_next):
        try:
            return await call_next(request)
        except ApiError as e:
            return error_response(e)
        except Exception as e:
            logger.error(f"Unhandled error on {request.method} {request.url.path}: {e}", exc_info=True)
            return error_response(UnclassifiedError())


def _is_json(content_type: str) -> bool:
    media_type = content_type.split(";", 1)[0].strip().lower()
    return media_type == "application/json" or media_type.endswith("+json")


class JSONBodyMiddleware(BaseHTTPMiddleware):
    """Parse a JSON request body once and keep it on ``request.state.json_body``."""

    async def dispatch(self, request: Request, call_next):
        request.state.json_body = {}
        if _is_json(request.headers.get("content-type", "")):
            raw = await request.body()
            if raw.strip():
                try:
                    body = json.loads(raw)
                except ValueError as e:
                    raise ValidationError(f"Malformed JSON body: {e}") from e
                if not isinstance(body, dict):
                    raise ValidationError("Request body must be a JSON object")
                request.state.json_body = body
        return await call_next(request)


class ApiKeyMiddleware(BaseHTTPMiddleware):
    """Reject requests whose API key header does not match the shared secret."""

    def __init__(self, app, api_key: str, header_name: str = "x-api-key"):
        super().__init__(app)
        self.api_key = api_key
        self.header_name = header_name

    async def dispatch(self, request: Request, call_next):
        provided = request.headers.get(self.header_name)
        if provided is None or not secrets.compare_digest(provided.encode(), self.api_key.encode()):
            raise ValidationError("Forbidden. Invalid API Key.")
        return await call_next(request)


def json_body(request: Request) -> dict:
    """Dependency returning the body parsed by ``JSONBodyMiddleware``."""
    return getattr(request.state, "json_body", {})
