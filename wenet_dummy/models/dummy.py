"""
The dummy model.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict


class Dummy(BaseModel):
    """
    A trivial entity used to check the storage of the component.

    The fields that are not defined are rejected when parsing.
    """

    model_config = ConfigDict(extra="forbid")

    id: str | None = None
    value: str | None = None
    extra: dict[str, Any] | None = None

    def to_document(self) -> dict[str, Any]:
        """
        Return the JSON object of the dummy without the undefined fields.

        The null values inside ``extra`` are kept.
        """
        return {key: value for key, value in self.model_dump().items() if value is not None}
