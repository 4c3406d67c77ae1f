"""
Builder of the aggregation pipelines used to page the elements of an
embedded array.
"""

from typing import Any


class AggregationBuilder:
    """
    Fluent builder of a MongoDB aggregation pipeline.

    Example:
        pipeline = (
            AggregationBuilder()
            .unwind("transactions.messages")
            .match({"taskId": "1"})
            .sort({"_creationTs": -1}, offset=10, limit=5)
            .build()
        )
    """

    def __init__(self) -> None:
        self._pipeline: list[dict[str, Any]] = []

    def build(self) -> list[dict[str, Any]]:
        """Return the stages added so far."""
        return self._pipeline

    @staticmethod
    def split_element_path(element_path: str | None) -> list[str]:
        """
        Split a dotted path into its segments, ignoring any white space.

        An empty or None path has no segments.
        """
        if element_path is None:
            return []
        trimmed = "".join(element_path.split())
        if not trimmed:
            return []
        return trimmed.split(".")

    def unwind(self, element_path: str | None) -> "AggregationBuilder":
        """Unwind every array on a dotted path."""
        return self.unwind_path(*self.split_element_path(element_path))

    def unwind_path(self, *segments: str) -> "AggregationBuilder":
        """
        Add one ``$unwind`` stage per segment.

        The position of each element on its array is stored on
        ``<segment>Index``.
        """
        path = ""
        for segment in segments:
            path = f"{path}.{segment}" if path else f"${segment}"
            self._pipeline.append(
                {"$unwind": {"path": path, "includeArrayIndex": f"{segment}Index"}}
            )
        return self

    def match(self, query: dict[str, Any] | None) -> "AggregationBuilder":
        """Add a ``$match`` stage unless the query is empty."""
        if query:
            self._pipeline.append({"$match": query})
        return self

    def sort(self, order: dict[str, int] | None, offset: int, limit: int) -> "AggregationBuilder":
        """
        Add the stages to return a sorted page.

        The page is cut with ``$limit`` (offset + limit) followed by ``$skip``
        when the offset is positive.
        """
        if order:
            self._pipeline.append({"$sort": order})
        self._pipeline.append({"$limit": offset + limit})
        if offset > 0:
            self._pipeline.append({"$skip": offset})
        return self
