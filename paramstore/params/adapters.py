"""
Persistence adapters: the raw-string contract between a ParamStore and the
record that stores its JSON blob.
"""
from typing import Any, List, MutableMapping, Optional, Protocol

from paramstore.core.types import PARAMS_ATTRIBUTE


class PersistenceAdapter(Protocol):
    """Supplies the raw JSON on load and accepts the raw JSON to store."""

    def read_raw(self) -> Optional[str]:
        ...

    def write_raw(self, value: Optional[str]) -> None:
        ...


class AttributeAdapter:
    """Reads and writes one entry of a host record's attribute mapping."""

    def __init__(self, attributes: MutableMapping[str, Any], name: str = PARAMS_ATTRIBUTE):
        self.attributes = attributes
        self.name = name

    def read_raw(self) -> Optional[str]:
        return self.attributes.get(self.name)

    def write_raw(self, value: Optional[str]) -> None:
        self.attributes[self.name] = value


class MemoryAdapter:
    """Holds the raw string in memory. Every write is kept in `writes`."""

    def __init__(self, raw: Optional[str] = None):
        self.raw = raw
        self.reads = 0
        self.writes: List[Optional[str]] = []

    def read_raw(self) -> Optional[str]:
        self.reads += 1
        return self.raw

    def write_raw(self, value: Optional[str]) -> None:
        self.raw = value
        self.writes.append(value)
