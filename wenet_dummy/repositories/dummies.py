"""
Repository of the dummies.
"""

import logging
from typing import Any

from motor.motor_asyncio import AsyncIOMotorDatabase

from ..constants import DUMMIES_COLLECTION, DUMMIES_RESULT_KEY
from ..exceptions import ValidationError
from ..models import Dummy
from ..utils import rename_key
from .base import PageOptions, Repository

logger = logging.getLogger(__name__)


def _document_to_dummy_json(document: dict[str, Any]) -> dict[str, Any]:
    return rename_key(document, "_id", "id")


class DummiesRepository(Repository):
    """
    Stores the dummies on the ``dummies`` collection.

    The identifier of a dummy is stored as the ``_id`` of its document.
    """

    @classmethod
    async def register(cls, db: AsyncIOMotorDatabase, schema_version: str) -> "DummiesRepository":
        """
        Create the repository and migrate the stored dummies to the schema version.

        Args:
            db: Database where the dummies are stored
            schema_version: Current schema version of the documents

        Returns:
            The repository ready to be used
        """
        repository = cls(db, schema_version)
        await repository.migrate_documents_to_current_versions()
        return repository

    async def store_dummy(self, dummy: Dummy | None) -> Dummy:
        """
        Store a dummy.

        Args:
            dummy: Dummy to store. When it has no identifier one is assigned

        Returns:
            The stored dummy

        Raises:
            ValidationError: If there is no dummy to store
            DuplicateKeyError: If the identifier of the dummy is already used
            StoreError: If the dummy can not be stored
        """
        if dummy is None:
            raise ValidationError("dummy", "The dummy can not converted to JSON.")

        document = rename_key(dummy.to_document(), "id", "_id")
        stored = await self.store_one_document(
            DUMMIES_COLLECTION, document, transform=_document_to_dummy_json
        )
        return Dummy.model_validate(stored)

    async def search_dummy(self, id: str) -> Dummy:
        """
        Return the dummy with the specified identifier.

        Raises:
            NotFoundError: If there is no dummy with the identifier
        """
        found = await self.find_one_document(
            DUMMIES_COLLECTION, {"_id": id}, transform=_document_to_dummy_json
        )
        return Dummy.model_validate(found)

    async def retrieve_dummies_page(self, offset: int, limit: int) -> dict[str, Any]:
        """Return a page with the stored dummies sorted by identifier."""
        return await self.search_page_object(
            DUMMIES_COLLECTION,
            {},
            PageOptions(offset=offset, limit=limit, sort={"_id": 1}),
            DUMMIES_RESULT_KEY,
            transform=_document_to_dummy_json,
        )

    async def migrate_documents_to_current_versions(self) -> None:
        """Stamp the current schema version on the older dummies."""
        logger.info(f"Migrating the dummies to the schema version '{self.schema_version}'")
        await self.update_schema_version_on_collection(DUMMIES_COLLECTION)
