"""
Helpers to build the error responses.
"""

from fastapi.responses import JSONResponse

from ..models import ErrorMessage


def error_response(status_code: int, code: str, message: str) -> JSONResponse:
    """Return a response with an ErrorMessage body."""
    return JSONResponse(
        status_code=status_code,
        content=ErrorMessage(code=code, message=message).model_dump(),
    )
