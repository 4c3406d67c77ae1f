"""
Utility functions and helpers for WENET_DUMMY.
"""

from .mongo import clean_mongo_doc, rename_key

__all__ = ["clean_mongo_doc", "rename_key"]
