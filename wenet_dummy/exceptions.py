"""
Custom exceptions for WENET_DUMMY.

All the failures of the component derive from WeNetDummyError, which keeps
compatibility with RuntimeError.
"""

from typing import Any, Dict, Optional


class WeNetDummyError(RuntimeError):
    """
    Base exception for WeNet dummy errors.

    Attributes:
        message: Error message
        context: Optional dictionary with additional context (collection,
                 query, etc.)
    """

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None) -> None:
        """
        Initialize the exception.

        Args:
            message: Error message
            context: Optional dictionary with additional context information
        """
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        """Return formatted error message with context if available."""
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} (context: {context_str})"
        return self.message


class ValidationError(WeNetDummyError):
    """
    Raised when a model or a request parameter is not valid.

    Attributes:
        code: Stable code that identifies the invalid element
        message: Error message
    """

    def __init__(
        self,
        code: str,
        message: str,
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message, context=context)
        self.code = code


class StoreError(WeNetDummyError):
    """
    Raised when the document store fails.

    The original driver exception is kept on ``cause`` (and chained with
    ``raise ... from``).
    """

    def __init__(
        self,
        message: str,
        cause: Optional[BaseException] = None,
        collection: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        context = context or {}
        if collection:
            context["collection"] = collection
        if cause is not None:
            context["error_type"] = type(cause).__name__
        super().__init__(message, context=context)
        self.cause = cause
        self.collection = collection


class DuplicateKeyError(StoreError):
    """Raised when a document violates the unique key of its collection."""


class NotFoundError(StoreError):
    """Raised when no document (or resource) matches the requested one."""


class CountMismatchError(StoreError):
    """
    Raised when an update or a delete affects an unexpected number of documents.

    Attributes:
        expected: Description of the expected count (for example "1" or ">=1")
        actual: Number of affected documents
    """

    def __init__(
        self,
        message: str,
        expected: Optional[str] = None,
        actual: Optional[int] = None,
        collection: Optional[str] = None,
    ) -> None:
        context: Dict[str, Any] = {}
        if expected is not None:
            context["expected"] = expected
        if actual is not None:
            context["actual"] = actual
        super().__init__(message, collection=collection, context=context)
        self.expected = expected
        self.actual = actual


class ConfigurationError(WeNetDummyError):
    """
    Raised when configuration is invalid or missing.

    Attributes:
        message: Error message
        config_key: Configuration key that caused the error (if available)
        config_value: Configuration value that caused the error (if available)
        context: Additional context information
    """

    def __init__(
        self,
        message: str,
        config_key: Optional[str] = None,
        config_value: Optional[Any] = None,
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        context = context or {}
        if config_key:
            context["config_key"] = config_key
        if config_value is not None:
            context["config_value"] = config_value
        super().__init__(message, context=context)
        self.config_key = config_key
        self.config_value = config_value


class InitializationError(WeNetDummyError):
    """
    Raised when the component can not start.

    This exception is raised when MongoDB connection fails or the
    repositories can not be registered.

    Attributes:
        message: Error message
        mongo_uri: MongoDB connection URI (if available)
        db_name: Database name (if available)
        context: Additional context information
    """

    def __init__(
        self,
        message: str,
        mongo_uri: Optional[str] = None,
        db_name: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        context = context or {}
        if mongo_uri:
            context["mongo_uri"] = mongo_uri
        if db_name:
            context["db_name"] = db_name
        super().__init__(message, context=context)
        self.mongo_uri = mongo_uri
        self.db_name = db_name


class ComponentServiceError(WeNetDummyError):
    """
    Raised when another WeNet component replies with an error.

    Attributes:
        status_code: HTTP status of the response (None if no response)
        error_message: Parsed error body ({code, message}) if any
    """

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        error_message: Optional[Dict[str, Any]] = None,
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        context = context or {}
        if status_code is not None:
            context["status_code"] = status_code
        super().__init__(message, context=context)
        self.status_code = status_code
        self.error_message = error_message
