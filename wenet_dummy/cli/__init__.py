"""
Command line interface of the WeNet dummy component.
"""

from .main import cli

__all__ = ["cli"]
