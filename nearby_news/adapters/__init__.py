# adapters/__init__.py

"""
Concrete spatial index and blob store implementations.
"""

from .geocell_index import GeoCellIndex
from .local_image_store import LocalImageStore

__all__ = [
    "GeoCellIndex",
    "LocalImageStore",
]
