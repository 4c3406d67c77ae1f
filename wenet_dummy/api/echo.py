"""
Resource that replies with the content that it receives.
"""

import json
import logging

from fastapi import APIRouter, Request, Response, status
from fastapi.responses import JSONResponse

from ..constants import BAD_MODEL_CODE, ECHO_PATH
from ..models import Dummy
from .errors import error_response

logger = logging.getLogger(__name__)

router = APIRouter(prefix=ECHO_PATH, tags=["echo"])


async def _echo(request: Request, status_code: int) -> Response:
    # The raw body is sent back so the order of the fields, the nulls and
    # the empty collections are kept.
    body = await request.body()
    try:
        json.loads(body)
    except ValueError as e:
        return error_response(
            status.HTTP_400_BAD_REQUEST, BAD_MODEL_CODE, f"The content is not a JSON: {e}"
        )
    return Response(content=body, status_code=status_code, media_type="application/json")


@router.post("")
async def post_echo(request: Request) -> Response:
    return await _echo(request, status.HTTP_201_CREATED)


@router.put("")
async def put_echo(request: Request) -> Response:
    return await _echo(request, status.HTTP_200_OK)


@router.patch("")
async def patch_echo(request: Request) -> Response:
    return await _echo(request, status.HTTP_200_OK)


@router.post("/dummy")
async def post_echo_dummy(request: Request) -> Response:
    """Reply with the received dummy, or 400 if the content is not a dummy."""
    try:
        dummy = Dummy.model_validate(json.loads(await request.body()))
    except ValueError as e:
        return error_response(
            status.HTTP_400_BAD_REQUEST, BAD_MODEL_CODE, f"The content is not a valid dummy: {e}"
        )
    return JSONResponse(status_code=status.HTTP_201_CREATED, content=dummy.to_document())
