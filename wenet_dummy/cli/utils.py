"""
Utility functions for CLI commands.
"""

import json
from typing import Any


def format_protocol_output(task_type: dict[str, Any], format_type: str) -> str:
    """
    Format the task type of a protocol for output.

    Args:
        task_type: Task type dictionary
        format_type: Output format ('json' or 'pretty')

    Returns:
        Formatted string representation
    """
    if format_type == "pretty":
        lines = [
            f"Id: {task_type.get('id', 'N/A')}",
            f"Name: {task_type.get('name', 'N/A')}",
        ]
        if task_type.get("description"):
            lines.append(f"Description: {task_type['description']}")
        if task_type.get("keywords"):
            lines.append(f"Keywords: {', '.join(task_type['keywords'])}")
        transactions = task_type.get("transactions") or {}
        lines.append(f"Transactions: {', '.join(transactions) or 'none'}")
        callbacks = task_type.get("callbacks") or {}
        lines.append(f"Callbacks: {', '.join(callbacks) or 'none'}")
        lines.append(f"Norms: {len(task_type.get('norms') or [])}")
        return "\n".join(lines)
    return json.dumps(task_type, indent=2, ensure_ascii=False)
