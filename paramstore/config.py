"""
Runtime settings, read once from the environment at import.
"""
import os

DEV = os.environ.get("ENV", "development").lower() in ("development", "dev", "test")

# JSON-lines file backing RecordStore for the service and tools/records.py
RECORDS_PATH = os.environ.get("PARAMSTORE_RECORDS", "data/records.jsonl")

LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()

# Pretty-print params in service/tool output (storage is always compact)
PRETTY = os.environ.get("PARAMSTORE_PRETTY", "0").lower() in ("1", "true", "yes")
