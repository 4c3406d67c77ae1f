"""
Core of the WeNet dummy component: connection lifecycle and engine.
"""

from .connection import MongoConnection
from .engine import WeNetDummyEngine

__all__ = ["MongoConnection", "WeNetDummyEngine"]
