"""
Generic MongoDB repository.

Every document stored or updated through a Repository carries the schema
version of the process on the ``schema_version`` field, and that field is
never returned to the callers. The repository also provides the helpers to
migrate the older documents of a collection to the current version.
"""

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any

from bson import ObjectId
from bson.errors import BSONError
from motor.motor_asyncio import AsyncIOMotorCollection, AsyncIOMotorDatabase
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError
from pymongo.errors import DuplicateKeyError as MongoDuplicateKeyError
from pymongo.errors import PyMongoError

from ..constants import CREATION_TS, SCHEMA_VERSION
from ..exceptions import (
    CountMismatchError,
    DuplicateKeyError,
    NotFoundError,
    StoreError,
    ValidationError,
)
from ..observability import get_logger as get_contextual_logger
from ..observability import timed_operation
from ..utils import clean_mongo_doc
from .aggregation import AggregationBuilder

logger = logging.getLogger(__name__)
contextual_logger = get_contextual_logger(__name__)

Document = dict[str, Any]
Transform = Callable[[Document], Any]

# pymongo encodes the documents and queries before sending them, and the
# encoding errors are not PyMongoError.
MONGO_ERRORS = (PyMongoError, BSONError, OverflowError)


@dataclass
class PageOptions:
    """Options to retrieve a page of documents."""

    offset: int = 0
    limit: int = 10
    sort: dict[str, int] | None = None
    projection: dict[str, Any] | None = None


def _projection_without_schema_version(projection: dict[str, Any] | None) -> dict[str, Any]:
    # MongoDB rejects projections that mix inclusions and exclusions
    # (except for _id), so an inclusion projection just drops the field.
    projection = dict(projection or {})
    projection.pop(SCHEMA_VERSION, None)
    includes = any(value for key, value in projection.items() if key != "_id")
    if not includes:
        projection[SCHEMA_VERSION] = 0
    return projection


class Repository:
    """
    Base class of the repositories that store documents on MongoDB.

    Example:
        class DummiesRepository(Repository):
            async def store_dummy(self, dummy):
                return await self.store_one_document("dummies", dummy)
    """

    def __init__(self, db: AsyncIOMotorDatabase, schema_version: str):
        """
        Initialize the repository.

        Args:
            db: Database where the collections are
            schema_version: Version stamped on the stored documents
        """
        self.db = db
        self.schema_version = schema_version

    def collection(self, name: str) -> AsyncIOMotorCollection:
        """Return the collection with the specified name."""
        return self.db[name]

    @staticmethod
    def _apply_transform(document: Document, transform: Transform | None) -> Any:
        if transform is None:
            return document
        return transform(document)

    @timed_operation("repository.store_one_document")
    async def store_one_document(
        self, collection: str, document: Document, transform: Transform | None = None
    ) -> Any:
        """
        Insert a document.

        When the document does not define ``_id`` a new string identifier is
        assigned to it.

        Args:
            collection: Name of the collection
            document: Document to store (it is not modified)
            transform: Optional function applied to the stored document

        Returns:
            The stored document (without the schema version) after the transform

        Raises:
            DuplicateKeyError: If the identifier is already used
            StoreError: If the document can not be stored
        """
        model = dict(document)
        if model.get("_id") is None:
            model = {"_id": str(ObjectId()), **{k: v for k, v in model.items() if k != "_id"}}
        model[SCHEMA_VERSION] = self.schema_version

        try:
            await self.collection(collection).insert_one(dict(model))
        except MongoDuplicateKeyError as e:
            contextual_logger.warning(
                "Duplicated document identifier",
                extra={"collection": collection, "document_id": model["_id"]},
            )
            raise DuplicateKeyError(
                f"Already exists a document with the identifier '{model['_id']}'",
                cause=e,
                collection=collection,
            ) from e
        except MONGO_ERRORS as e:
            contextual_logger.error(
                "Cannot store a document",
                extra={"collection": collection, "error": str(e)},
                exc_info=True,
            )
            raise StoreError(
                f"Cannot store the document: {e}", cause=e, collection=collection
            ) from e

        model.pop(SCHEMA_VERSION, None)
        logger.debug(f"Stored document {model['_id']} on '{collection}'")
        return self._apply_transform(model, transform)

    @timed_operation("repository.find_one_document")
    async def find_one_document(
        self,
        collection: str,
        query: Document,
        projection: dict[str, Any] | None = None,
        transform: Transform | None = None,
    ) -> Any:
        """
        Return the first document that matches the query.

        Raises:
            NotFoundError: If no document matches the query
            StoreError: If the collection can not be queried
        """
        try:
            found = await self.collection(collection).find_one(
                query, projection=_projection_without_schema_version(projection)
            )
        except MONGO_ERRORS as e:
            raise StoreError(
                f"Cannot find a document: {e}", cause=e, collection=collection
            ) from e

        if found is None:
            raise NotFoundError(
                f"Does not exist a document that match '{query}'.", collection=collection
            )

        return self._apply_transform(clean_mongo_doc(found), transform)

    async def update_one_document(self, collection: str, query: Document, patch: Document | None) -> None:
        """
        Update the document that matches the query.

        The non-null fields of the patch are set, the null ones are removed
        and the creation time is never modified.

        Raises:
            CountMismatchError: If there is no patch or no document has been modified
            StoreError: If the document can not be updated
        """
        await self.upsert_one_document(collection, query, patch, upsert=False)

    @timed_operation("repository.upsert_one_document")
    async def upsert_one_document(
        self, collection: str, query: Document, patch: Document | None, upsert: bool
    ) -> str | None:
        """
        Update the document that matches the query, or insert it when ``upsert`` is set.

        Returns:
            The identifier of the inserted document, or None if an existing one was updated

        Raises:
            CountMismatchError: If there is no patch, or nothing has been updated or added
            StoreError: If the document can not be updated
        """
        if patch is None:
            raise CountMismatchError(
                "Not found document to update", expected="1", actual=0, collection=collection
            )

        set_fields: Document = {SCHEMA_VERSION: self.schema_version}
        unset_fields: Document = {}
        for field_name, value in patch.items():
            if field_name == CREATION_TS:
                continue
            if value is None:
                unset_fields[field_name] = ""
            else:
                set_fields[field_name] = value

        update: Document = {"$set": set_fields}
        if unset_fields:
            update["$unset"] = unset_fields

        try:
            result = await self.collection(collection).update_one(query, update, upsert=upsert)
        except MONGO_ERRORS as e:
            raise StoreError(
                f"Cannot update the document: {e}", cause=e, collection=collection
            ) from e

        if result.modified_count == 1:
            return None

        if not upsert:
            raise CountMismatchError(
                "Not found document to update",
                expected="1",
                actual=result.modified_count,
                collection=collection,
            )

        upserted_id = result.upserted_id
        if upserted_id is None and result.matched_count != 1:
            raise CountMismatchError(
                "Not added document",
                expected="1",
                actual=result.matched_count,
                collection=collection,
            )
        return str(upserted_id) if upserted_id is not None else None

    @timed_operation("repository.delete_one_document")
    async def delete_one_document(self, collection: str, query: Document) -> None:
        """
        Remove the document that matches the query.

        Raises:
            CountMismatchError: If not exactly one document has been removed
        """
        try:
            result = await self.collection(collection).delete_one(query)
        except MONGO_ERRORS as e:
            raise StoreError(
                f"Cannot delete the document: {e}", cause=e, collection=collection
            ) from e

        if result.deleted_count != 1:
            raise CountMismatchError(
                "Not found document to delete",
                expected="1",
                actual=result.deleted_count,
                collection=collection,
            )

    @timed_operation("repository.delete_documents")
    async def delete_documents(self, collection: str, query: Document) -> None:
        """
        Remove all the documents that match the query.

        Raises:
            CountMismatchError: If no document has been removed
        """
        try:
            result = await self.collection(collection).delete_many(query)
        except MONGO_ERRORS as e:
            raise StoreError(
                f"Cannot delete the documents: {e}", cause=e, collection=collection
            ) from e

        if result.deleted_count < 1:
            raise CountMismatchError(
                "Not found document to delete",
                expected=">=1",
                actual=result.deleted_count,
                collection=collection,
            )

    @timed_operation("repository.search_page_object")
    async def search_page_object(
        self,
        collection: str,
        query: Document,
        options: PageOptions,
        result_key: str,
        transform: Transform | None = None,
    ) -> Document:
        """
        Return a page with the documents that match the query.

        The page always has ``offset`` and ``total``; the found documents are
        added under ``result_key`` only when the offset is inside the matching
        documents.
        """
        target = self.collection(collection)
        try:
            total = await target.count_documents(query)
            page: Document = {"offset": options.offset, "total": total}
            if total == 0 or options.offset >= total:
                return page

            cursor = target.find(
                query,
                projection=_projection_without_schema_version(options.projection),
                skip=options.offset,
                limit=options.limit,
                sort=list(options.sort.items()) if options.sort else None,
            )
            found = await cursor.to_list(length=None)
        except MONGO_ERRORS as e:
            raise StoreError(
                f"Cannot search the documents: {e}", cause=e, collection=collection
            ) from e

        page[result_key] = [
            self._apply_transform(clean_mongo_doc(document), transform) for document in found
        ]
        return page

    @timed_operation("repository.aggregate_page_object")
    async def aggregate_page_object(
        self,
        collection: str,
        query: Document,
        order: dict[str, int] | None,
        offset: int,
        limit: int,
        element_path: str,
    ) -> Document:
        """
        Return a page with the elements of an embedded array.

        The elements are the values on ``element_path`` (a dotted path of
        arrays) of the unwound documents that match the query. They are
        returned under the last segment of the path.
        """
        segments = AggregationBuilder.split_element_path(element_path)
        total = await self.count_aggregation(collection, segments, query)
        page: Document = {"offset": offset, "total": total}
        if total == 0 or total < offset:
            return page

        pipeline = AggregationBuilder().unwind_path(*segments).match(query).sort(order, offset, limit).build()
        try:
            found = await self.collection(collection).aggregate(pipeline).to_list(length=None)
        except MONGO_ERRORS as e:
            raise StoreError(
                f"Cannot aggregate the documents: {e}", cause=e, collection=collection
            ) from e

        elements = []
        for document in found:
            element = document
            for segment in segments:
                element = element[segment]
            elements.append(clean_mongo_doc(element) if isinstance(element, dict) else element)

        if elements:
            page[segments[-1]] = elements
        return page

    async def count_aggregation(
        self, collection: str, element_path: Iterable[str], query: Document
    ) -> int:
        """Count the elements of an embedded array that match the query."""
        pipeline = AggregationBuilder().unwind_path(*element_path).match(query).build()
        pipeline.append({"$count": "total"})
        try:
            counted = await self.collection(collection).aggregate(pipeline).to_list(length=None)
        except MONGO_ERRORS as e:
            raise StoreError(
                f"Cannot count the elements: {e}", cause=e, collection=collection
            ) from e

        if not counted:
            return 0
        return int(counted[0].get("total", 0))

    @staticmethod
    def query_param_to_sort(
        values: Iterable[str | None] | None,
        code_prefix: str,
        check_key: Callable[[str], str | None] | None = None,
    ) -> dict[str, int] | None:
        """
        Convert the values of a sort query parameter into a MongoDB sort.

        Each value is a field name optionally prefixed by ``+`` (ascending,
        the default) or ``-`` (descending), for example ``["+a", "-b", "c"]``.

        Args:
            values: Values to convert
            code_prefix: Prefix of the code of the raised errors
            check_key: Optional function that maps a field name to the key
                to sort by, or returns None if the field is not valid

        Returns:
            The sort, or None if there are no values

        Raises:
            ValidationError: With code ``<code_prefix>[<index>]`` for the
                first value that is not valid
        """
        if values is None:
            return None

        sort: dict[str, int] = {}
        for index, value in enumerate(values):
            code = f"{code_prefix}[{index}]"
            if value is None:
                raise ValidationError(code, "An order item can not be 'null'.")

            value = value.strip()
            order = 1
            if value.startswith("+"):
                value = value[1:]
            elif value.startswith("-"):
                order = -1
                value = value[1:]

            if not value:
                raise ValidationError(code, f"You must to define a field in '{value}'.")

            key = value
            if check_key is not None:
                key = check_key(value)
                if key is None:
                    raise ValidationError(code, f"The field '{value}' is not valid.")

            if key in sort:
                raise ValidationError(
                    code,
                    f"The '{value}' that represents the fields '{key}' is already defined.",
                )
            sort[key] = order

        return sort or None

    # Schema version migration

    @staticmethod
    def create_query_to_return_documents_with_a_version_less_than(version: str) -> Document:
        """Query that matches the documents without a schema version older than ``version``."""
        return {
            "$or": [
                {SCHEMA_VERSION: {"$exists": False}},
                {SCHEMA_VERSION: {"$not": {"$type": "string"}}},
                {SCHEMA_VERSION: {"$lt": version}},
            ]
        }

    @staticmethod
    def create_update_for_schema_version(version: str) -> Document:
        """Update that sets the schema version."""
        return {"$set": {SCHEMA_VERSION: version}}

    @timed_operation("repository.update_collection")
    async def update_collection(self, collection: str, query: Document, update: Document) -> None:
        """Apply an update to all the documents that match the query."""
        try:
            result = await self.collection(collection).update_many(query, update)
        except MONGO_ERRORS as e:
            contextual_logger.error(
                "Cannot update the documents",
                extra={"collection": collection, "schema_version": self.schema_version},
                exc_info=True,
            )
            raise StoreError(
                f"Cannot update the documents: {e}", cause=e, collection=collection
            ) from e

        logger.debug(
            f"Updated {result.modified_count} documents on '{collection}' "
            f"to have the schema version '{self.schema_version}'."
        )

    async def migrate_schema_version_on_collection_to(self, version: str, collection: str) -> None:
        """Stamp ``version`` on the documents of the collection with an older version."""
        query = self.create_query_to_return_documents_with_a_version_less_than(version)
        update = self.create_update_for_schema_version(version)
        await self.update_collection(collection, query, update)

    async def update_schema_version_on_collection(self, collection: str) -> None:
        """Stamp the version of the repository on the older documents of the collection."""
        await self.migrate_schema_version_on_collection_to(self.schema_version, collection)

    @timed_operation("repository.migrate_collection")
    async def migrate_collection(
        self, collection: str, model_type: type[BaseModel], version: str
    ) -> None:
        """
        Rewrite, one by one, the documents older than ``version``.

        Each document is parsed as ``model_type`` ignoring the unknown fields,
        and stored again. The fields that the model does not define are
        removed from the document.

        Raises:
            ValidationError: If a document can not be parsed as the model
            StoreError: If a document can not be updated
        """
        query = self.create_query_to_return_documents_with_a_version_less_than(version)
        try:
            max_documents = await self.collection(collection).count_documents(query)
        except MONGO_ERRORS as e:
            raise StoreError(
                f"Cannot count the documents to migrate: {e}", cause=e, collection=collection
            ) from e

        if max_documents > 0:
            logger.info(f"Start to migrate {max_documents} documents on '{collection}'")

        for remaining in range(max_documents, 0, -1):
            found = await self.find_one_document(collection, query)
            document_id = found.pop("_id")
            known = {key: value for key, value in found.items() if key in model_type.model_fields}
            try:
                parsed = model_type.model_validate(known).model_dump()
            except PydanticValidationError as e:
                contextual_logger.error(
                    "Cannot migrate a document",
                    extra={"collection": collection, "document_id": document_id},
                )
                raise ValidationError(
                    "migration", f"Cannot migrate the document '{document_id}': {e}"
                ) from e

            model = {
                key: value for key, value in parsed.items() if value is not None and key != "_id"
            }
            for key in found:
                if key not in model:
                    model[key] = None

            await self.update_one_document(collection, {"_id": document_id}, model)
            logger.debug(f"Migrated a document. There are {remaining - 1} documents to migrate.")
