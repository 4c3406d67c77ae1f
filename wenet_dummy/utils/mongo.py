"""
Document helpers shared by the repositories.

The store may hold values that are not JSON (ObjectId, datetime); they are
converted before a document leaves the repository.
"""

from datetime import datetime
from typing import Any

from bson import ObjectId


def _clean_value(value: Any) -> Any:
    if isinstance(value, ObjectId):
        return str(value)
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, dict):
        return clean_mongo_doc(value)
    if isinstance(value, list):
        return [_clean_value(item) for item in value]
    return value


def clean_mongo_doc(doc: dict[str, Any] | None) -> dict[str, Any] | None:
    """
    Convert a stored document to a JSON-serializable one.

    ObjectId values become strings and datetimes ISO strings, recursively on
    embedded documents and arrays. The order of the fields is preserved.

    Args:
        doc: Stored document or None

    Returns:
        Cleaned document, or None if input was None
    """
    if doc is None:
        return None
    return {key: _clean_value(value) for key, value in doc.items()}


def rename_key(doc: dict[str, Any], source: str, target: str) -> dict[str, Any]:
    """
    Return a copy of the document with the field ``source`` renamed to ``target``.

    The renamed field keeps its position. When ``source`` is not defined the
    copy is returned unchanged.

    Example:
        rename_key({"id": "1", "value": "v"}, "id", "_id")
        # {"_id": "1", "value": "v"}
    """
    if source not in doc:
        return dict(doc)
    return {(target if key == source else key): value for key, value in doc.items()}
