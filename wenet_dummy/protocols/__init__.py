"""
Default interaction protocols of the WeNet platform.
"""

from .defaults import (
    DEFAULT_PROTOCOLS,
    get_task_type_schema,
    load_protocol,
    protocol_ids,
    validate_task_type,
)

__all__ = [
    "DEFAULT_PROTOCOLS",
    "get_task_type_schema",
    "load_protocol",
    "protocol_ids",
    "validate_task_type",
]
