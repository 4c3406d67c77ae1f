"""
FastAPI application of the WeNet dummy component.
"""

import logging
from collections.abc import Callable
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from . import __version__
from .api import dummies_router, echo_router, health_router
from .config import DummyConfig
from .constants import CORRELATION_ID_HEADER
from .core.engine import WeNetDummyEngine
from .observability import clear_correlation_id, set_correlation_id

logger = logging.getLogger(__name__)


class CorrelationIdMiddleware(BaseHTTPMiddleware):
    """
    Set the correlation ID of each request.

    The ID is taken from the X-Correlation-ID header (or a new one is
    created), it is added to every log record written while the request is
    served, and it is returned on the response header.
    """

    async def dispatch(
        self,
        request: Request,
        call_next: Callable[[Request], Response],
    ) -> Response:
        correlation_id = set_correlation_id(request.headers.get(CORRELATION_ID_HEADER))
        try:
            response = await call_next(request)
        finally:
            clear_correlation_id()
        response.headers[CORRELATION_ID_HEADER] = correlation_id
        return response


def create_app(
    config: Optional[DummyConfig] = None, engine: Optional[WeNetDummyEngine] = None
) -> FastAPI:
    """
    Create the FastAPI application.

    The engine is initialized when the application starts and shut down when
    it stops; its container is published on ``app.state.container``.

    Args:
        config: Configuration of the component (read from the environment if None)
        engine: Optional engine to use instead of creating one from the configuration
    """
    engine = engine or WeNetDummyEngine(config)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Starting the WeNet dummy component")
        await engine.initialize()
        app.state.container = engine.container
        try:
            yield
        finally:
            await engine.shutdown()
            app.state.container = None
            logger.info("WeNet dummy component stopped")

    app = FastAPI(title="WeNet dummy", version=__version__, lifespan=lifespan)
    app.state.engine = engine
    app.add_middleware(CorrelationIdMiddleware)
    app.include_router(dummies_router)
    app.include_router(echo_router)
    app.include_router(health_router)
    return app
