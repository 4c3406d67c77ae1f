"""
Commands of the wenet-dummy CLI.
"""

from .migrate import migrate
from .protocols import protocols
from .serve import serve

__all__ = ["migrate", "protocols", "serve"]
