"""
Error taxonomy and the mapping of errors to HTTP responses.

Every error body uses the same {"message": ...} envelope as the success-path
scalars, so clients tell failure from success by status code only.
"""
import logging
from abc import ABC, abstractmethod
from typing import Optional, Tuple

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from fwew_api import messages
from fwew_api.engine import EngineError, EngineQueryError
from fwew_api.schemas import Message

logger = logging.getLogger(__name__)

NO_RESULTS = "no results"
ENGINE_FAILURE = "dictionary engine failure"


class ApiError(Exception, ABC):
    """Base class for errors raised by the request pipeline."""
    status_code = 400

    @abstractmethod
    def message(self, language_code: Optional[str] = None) -> str:
        """Client-facing text, localized where a translation exists."""


class InvalidNumberError(ApiError):
    """A numeric path segment could not be parsed or is out of range."""

    def __init__(self, token: str, key: str = "invalidDecimalError"):
        super().__init__(token)
        self.token = token
        self.key = key

    def message(self, language_code: Optional[str] = None) -> str:
        return f"{messages.text(self.key, language_code)}: {self.token}"


class NoResultsError(ApiError):
    """A well-formed query matched nothing."""

    def message(self, language_code: Optional[str] = None) -> str:
        return NO_RESULTS


def to_envelope(error: Exception, language_code: Optional[str] = None) -> Tuple[int, Message]:
    """
    Convert a pipeline or engine error into a status code and message body.

    Args:
        error: The raised exception
        language_code: Locale hint taken from the request, if any

    Returns:
        Tuple[int, Message]: HTTP status and message envelope
    """
    if isinstance(error, ApiError):
        return error.status_code, Message(message=error.message(language_code))
    if isinstance(error, StarletteHTTPException):
        return error.status_code, Message(message=str(error.detail))
    if isinstance(error, EngineQueryError):
        return 400, Message(message=NO_RESULTS)
    return 500, Message(message=ENGINE_FAILURE)


def _respond(request: Request, exc: Exception) -> JSONResponse:
    status, body = to_envelope(exc, request.path_params.get("lang"))
    headers = exc.headers if isinstance(exc, StarletteHTTPException) else None
    return JSONResponse(status_code=status, content=body.model_dump(), headers=headers)


def register_exception_handlers(app: FastAPI) -> None:
    """Install the handlers that turn pipeline errors into message envelopes."""

    @app.exception_handler(ApiError)
    async def api_error_handler(request: Request, exc: ApiError):
        logger.info("Rejected %s: %s", request.url.path, exc.message())
        return _respond(request, exc)

    @app.exception_handler(EngineQueryError)
    async def engine_query_error_handler(request: Request, exc: EngineQueryError):
        logger.info("Engine found nothing for %s: %s", request.url.path, exc)
        return _respond(request, exc)

    @app.exception_handler(EngineError)
    async def engine_error_handler(request: Request, exc: EngineError):
        logger.error("Engine failure on %s", request.url.path, exc_info=exc)
        return _respond(request, exc)

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        logger.info("HTTP %s on %s %s", exc.status_code, request.method, request.url.path)
        return _respond(request, exc)

    @app.exception_handler(Exception)
    async def unexpected_error_handler(request: Request, exc: Exception):
        logger.error("Unexpected error on %s", request.url.path, exc_info=exc)
        return _respond(request, exc)
