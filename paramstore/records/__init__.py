"""
Host records carrying a params JSON column, and their JSON-lines storage.
"""
from paramstore.records.record import Record, SAFE_ATTRIBUTES, new_id
from paramstore.records.dataset import RecordStore

__all__ = ["Record", "SAFE_ATTRIBUTES", "new_id", "RecordStore"]
