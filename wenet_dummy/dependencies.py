"""
FastAPI dependencies of the WeNet dummy component.

Usage:
    from fastapi import Depends
    from wenet_dummy.dependencies import get_dummies_repository

    @router.get("/dummies/{dummy_id}")
    async def retrieve(dummy_id: str, repository=Depends(get_dummies_repository)):
        return await repository.search_dummy(dummy_id)
"""

import logging
from typing import TYPE_CHECKING

from fastapi import HTTPException, Request

from .di import inject
from .repositories import DummiesRepository

if TYPE_CHECKING:
    from .core.engine import WeNetDummyEngine

logger = logging.getLogger(__name__)


async def get_engine(request: Request) -> "WeNetDummyEngine":
    """Get the WeNetDummyEngine instance from app state."""
    engine = getattr(request.app.state, "engine", None)
    if not engine:
        raise HTTPException(503, "Engine not initialized")
    return engine


get_dummies_repository = inject(DummiesRepository)
"""Resolve the repository of the dummies from the container of the application."""
