"""
HTTP API of the WeNet dummy component.
"""

from .dummies import router as dummies_router
from .echo import router as echo_router
from .health import router as health_router

__all__ = ["dummies_router", "echo_router", "health_router"]
