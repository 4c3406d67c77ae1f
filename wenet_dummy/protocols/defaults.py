"""
Catalogue of the default interaction protocols.

Each protocol is a task type bundled as a JSON resource of this package. The
resources are read and validated when they are requested.
"""

import functools
import json
import logging
from importlib import resources
from typing import Any

from jsonschema import SchemaError, ValidationError, validate

from .. import exceptions

logger = logging.getLogger(__name__)

RESOURCES_PACKAGE = "wenet_dummy.protocols"
RESOURCES_DIR = "resources"
TASK_TYPE_SCHEMA = "task_type.schema.json"

DEFAULT_PROTOCOLS: dict[str, str] = {
    "ECHO_V1": "echo_v1.json",
    "EAT_TOGETHER_V2": "eat_together_v2.json",
    "ASK_4_HELP_V1_2": "ask_4_help_v1_2.json",
    "ASK_4_HELP_V2": "ask_4_help_v2.json",
    "ASK_4_HELP_V3": "ask_4_help_v3.json",
    "ASK_4_HELP_V3_3": "ask_4_help_v3_3.json",
    "FLOOD_V1": "flood_v1.json",
    "PILOT_M46_NUM": "pilot_m46_num.json",
    "PILOT_M46_UC": "pilot_m46_uc.json",
}
"""Resource of each default protocol, keyed by the protocol identifier."""


def protocol_ids() -> list[str]:
    """Return the identifiers of the default protocols."""
    return list(DEFAULT_PROTOCOLS)


def _read_resource(name: str) -> str:
    return resources.files(RESOURCES_PACKAGE).joinpath(RESOURCES_DIR, name).read_text(
        encoding="utf-8"
    )


@functools.lru_cache(maxsize=1)
def get_task_type_schema() -> dict[str, Any]:
    """Return the JSON schema of a task type."""
    return json.loads(_read_resource(TASK_TYPE_SCHEMA))


def validate_task_type(task_type: Any) -> tuple[bool, str | None, list[str] | None]:
    """
    Validate a task type against its JSON schema.

    Returns:
        Tuple of (is_valid, error_message, error_paths)
    """
    try:
        validate(instance=task_type, schema=get_task_type_schema())
        return True, None, None
    except ValidationError as e:
        path_parts = list(e.absolute_path)
        error_path = ".".join(str(p) for p in path_parts) if path_parts else "root"
        return False, e.message, [error_path]
    except SchemaError as e:
        return False, f"Invalid schema definition: {e.message}", ["schema"]


def load_protocol(protocol_id: str) -> dict[str, Any]:
    """
    Load the task type of a default protocol.

    Args:
        protocol_id: Identifier of the protocol (for example "ECHO_V1")

    Returns:
        The task type that defines the protocol

    Raises:
        NotFoundError: If there is no default protocol with the identifier
        ValidationError: If the bundled resource is not a valid task type
    """
    resource = DEFAULT_PROTOCOLS.get(protocol_id)
    if resource is None:
        raise exceptions.NotFoundError(
            f"Undefined default protocol '{protocol_id}'",
            context={"protocol_id": protocol_id},
        )

    code = f"protocols.{protocol_id}"
    try:
        task_type = json.loads(_read_resource(resource))
    except (FileNotFoundError, json.JSONDecodeError) as e:
        logger.error(f"Cannot read the protocol {protocol_id} from {resource}: {e}")
        raise exceptions.ValidationError(
            code, f"The resource '{resource}' is not a JSON task type: {e}"
        ) from e

    is_valid, error_message, error_paths = validate_task_type(task_type)
    if not is_valid:
        raise exceptions.ValidationError(
            code,
            f"The protocol '{protocol_id}' is not valid: {error_message}",
            context={"paths": error_paths},
        )

    return task_type
