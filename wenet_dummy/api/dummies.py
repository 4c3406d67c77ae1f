"""
Resource to manage the dummies.
"""

import json
import logging

from fastapi import APIRouter, Depends, Query, Request, status
from fastapi.responses import JSONResponse

from ..constants import (
    BAD_DUMMY_CODE,
    DEFAULT_PAGE_LIMIT,
    DUMMIES_PATH,
    DUPLICATED_ID_CODE,
    DUPLICATED_ID_MESSAGE,
    MAX_PAGE_LIMIT,
    NOT_FOUND_DUMMY_CODE,
)
from ..dependencies import get_dummies_repository
from ..exceptions import NotFoundError, WeNetDummyError
from ..models import Dummy
from ..repositories import DummiesRepository
from .errors import error_response

logger = logging.getLogger(__name__)

router = APIRouter(prefix=DUMMIES_PATH, tags=["dummies"])


@router.post("")
async def create_dummy(
    request: Request,
    repository: DummiesRepository = Depends(get_dummies_repository),
) -> JSONResponse:
    """
    Store a new dummy.

    Replies 201 with the stored dummy, or 400 if the body is not a dummy or
    its identifier is already used.
    """
    body = await request.body()
    try:
        dummy = Dummy.model_validate(json.loads(body))
    except ValueError as e:
        logger.debug(f"Bad dummy to create: {e}")
        return error_response(
            status.HTTP_400_BAD_REQUEST, BAD_DUMMY_CODE, f"The content is not a valid dummy: {e}"
        )

    try:
        stored = await repository.store_dummy(dummy)
    except WeNetDummyError as e:
        logger.debug(f"Cannot store the dummy: {e}")
        return error_response(status.HTTP_400_BAD_REQUEST, DUPLICATED_ID_CODE, DUPLICATED_ID_MESSAGE)

    return JSONResponse(status_code=status.HTTP_201_CREATED, content=stored.to_document())


@router.get("/{dummyId}")
async def retrieve_dummy(
    dummyId: str,
    repository: DummiesRepository = Depends(get_dummies_repository),
) -> JSONResponse:
    """Return the dummy with the identifier, or 404 if it does not exist."""
    try:
        dummy = await repository.search_dummy(dummyId)
    except NotFoundError:
        return error_response(
            status.HTTP_404_NOT_FOUND,
            NOT_FOUND_DUMMY_CODE,
            f"Does not exist a dummy associated to '{dummyId}'.",
        )
    return JSONResponse(content=dummy.to_document())


@router.get("")
async def retrieve_dummies_page(
    offset: int = Query(0, ge=0),
    limit: int = Query(DEFAULT_PAGE_LIMIT, ge=1, le=MAX_PAGE_LIMIT),
    repository: DummiesRepository = Depends(get_dummies_repository),
) -> JSONResponse:
    return JSONResponse(content=await repository.retrieve_dummies_page(offset, limit))
