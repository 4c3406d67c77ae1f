"""
Body of the error responses.
"""

from pydantic import BaseModel


class ErrorMessage(BaseModel):
    """Message returned when a request fails."""

    code: str
    message: str
