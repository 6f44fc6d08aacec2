# product_api/errors.py
import logging
from typing import Dict

from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """Base for every error that is turned into a JSON error response."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    @property
    def kind(self) -> str:
        return type(self).__name__

    def to_dict(self) -> Dict[str, str]:
        return {"error": self.kind, "message": self.message}


class NotFoundError(ApiError):
    status_code = 404


class ValidationError(ApiError):
    status_code = 400


class UnclassifiedError(ApiError):
    status_code = 500

    def __init__(self, message: str = "Internal server error"):
        super().__init__(message)


def error_response(exc: ApiError) -> JSONResponse:
    """Log the error and serialize it as ``{error, message}``."""
    logger.error(f"[ERROR] {exc.kind}: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())
