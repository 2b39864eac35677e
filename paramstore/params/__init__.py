"""
Param store and merge helpers.
ParamStore is the in-memory tree; adapters connect it to the record holding the raw JSON.
"""
from paramstore.params.store import ParamStore
from paramstore.params.resolve import replace, replace_recursive, merge_params
from paramstore.params.adapters import PersistenceAdapter, AttributeAdapter, MemoryAdapter

__all__ = [
    "ParamStore",
    "replace",
    "replace_recursive",
    "merge_params",
    "PersistenceAdapter",
    "AttributeAdapter",
    "MemoryAdapter",
]
