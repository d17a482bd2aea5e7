# petstore/exceptions.py
"""
Errors raised at the HTTP boundary and by the client.

Domain failures (missing name, unknown id) are not exceptions; the store
returns them as ``Failure`` results. The classes here cover what happens
around the store: unreadable request bodies, unknown endpoints, unexpected
crashes, and an unreachable remote API.
"""

import logging

from fastapi import Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from petstore.models.pets import ApiError

logger = logging.getLogger(__name__)


class PetStoreException(Exception):
    """Base exception; knows its ApiError code and HTTP status."""

    def __init__(self, message: str, code: int, status_code: int):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code

    def to_error(self) -> ApiError:
        return ApiError(code=self.code, message=self.message)

    def to_dict(self) -> dict:
        return self.to_error().model_dump()

    def to_response(self) -> JSONResponse:
        return JSONResponse(status_code=self.status_code, content=self.to_dict())


class InvalidJSONError(PetStoreException):
    """Request body could not be decoded as JSON."""

    def __init__(self):
        super().__init__("Invalid JSON", code=400, status_code=400)


class EndpointNotFoundError(PetStoreException):
    """No route for this method and path."""

    def __init__(self):
        super().__init__(
            "Endpoint not found. Available: GET/POST /pets, GET /pets/{id}",
            code=404,
            status_code=404,
        )


class InternalServerError(PetStoreException):
    def __init__(self):
        super().__init__("Internal server error", code=500, status_code=500)


class PetStoreTransportError(Exception):
    """The client could not complete an HTTP exchange with the remote API."""

    def __init__(self, method: str, url: str, reason: str):
        super().__init__(f"{method} {url} failed: {reason}")
        self.method = method
        self.url = url
        self.reason = reason


# ---- Handlers ----

async def petstore_exception_handler(request: Request, exc: PetStoreException) -> JSONResponse:
    return exc.to_response()


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """
    Routing misses arrive here as 404 (unknown path) or 405 (known path,
    other method). Both are reported as the same 404 ApiError.
    """
    if exc.status_code in (404, 405):
        logger.info("No route found for: %s %s", request.method, request.url.path)
        return EndpointNotFoundError().to_response()

    return JSONResponse(
        status_code=exc.status_code,
        content=ApiError(code=exc.status_code, message=str(exc.detail)).model_dump(),
    )
