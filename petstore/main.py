# petstore/main.py

import logging
from typing import Optional

from fastapi import FastAPI, Request
from starlette.exceptions import HTTPException as StarletteHTTPException

from petstore.api.pets import router as pets_router
from petstore.config import Settings, get_settings
from petstore.exceptions import (
    InternalServerError,
    PetStoreException,
    http_exception_handler,
    petstore_exception_handler,
)
from petstore.store.memory import PetStore

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(level=settings.log_level, format=LOG_FORMAT)


async def dispatch_boundary(request: Request, call_next):
    """
    Outermost catch: any exception a handler lets escape becomes a 500
    with the generic error body.
    """
    logger.debug("Request: %s %s", request.method, request.url.path)
    try:
        return await call_next(request)
    except Exception:
        logger.exception("Error handling request: %s %s", request.method, request.url.path)
        return InternalServerError().to_response()


def create_app(
    store: Optional[PetStore] = None,
    settings: Optional[Settings] = None,
) -> FastAPI:
    """
    Build the application around its own store.

    Each call gets a fresh seeded store unless one is passed in, so tests
    and worker processes never share records.
    """
    settings = settings or get_settings()

    docs = settings.DOCS_ENABLED
    app = FastAPI(
        title="Pet Store API",
        version="0.1.0",
        redirect_slashes=False,
        docs_url="/docs" if docs else None,
        redoc_url=None,
        openapi_url="/openapi.json" if docs else None,
    )

    app.state.store = store if store is not None else PetStore()

    app.add_exception_handler(PetStoreException, petstore_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.middleware("http")(dispatch_boundary)

    app.include_router(pets_router, prefix=settings.api_prefix)

    return app


configure_logging(get_settings())

app = create_app()
