"""
MongoDB repositories of the WeNet dummy component.
"""

from .aggregation import AggregationBuilder
from .base import PageOptions, Repository
from .dummies import DummiesRepository

__all__ = ["AggregationBuilder", "PageOptions", "Repository", "DummiesRepository"]
