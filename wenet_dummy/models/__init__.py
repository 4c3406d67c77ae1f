"""
Models exchanged by the WeNet dummy component.
"""

from .dummy import Dummy
from .error import ErrorMessage

__all__ = ["Dummy", "ErrorMessage"]
