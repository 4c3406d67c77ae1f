"""
WENET_DUMMY - WeNet dummy component

A minimal WeNet platform component that stores dummies on MongoDB, echoes
JSON contents and wires the clients of the other WeNet components.
"""

__version__ = "1.0.0"

from .config import DummyConfig
from .core import MongoConnection, WeNetDummyEngine
from .exceptions import (
    ComponentServiceError,
    ConfigurationError,
    CountMismatchError,
    DuplicateKeyError,
    InitializationError,
    NotFoundError,
    StoreError,
    ValidationError,
    WeNetDummyError,
)
from .models import Dummy, ErrorMessage
from .repositories import DummiesRepository, PageOptions, Repository

__all__ = [
    # Core
    "DummyConfig",
    "MongoConnection",
    "WeNetDummyEngine",
    # Persistence
    "Repository",
    "PageOptions",
    "DummiesRepository",
    # Models
    "Dummy",
    "ErrorMessage",
    # Errors
    "WeNetDummyError",
    "ValidationError",
    "StoreError",
    "DuplicateKeyError",
    "NotFoundError",
    "CountMismatchError",
    "ConfigurationError",
    "InitializationError",
    "ComponentServiceError",
]
