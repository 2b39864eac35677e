"""
Host record contract: a row of attributes whose "params" column holds the
raw JSON of a ParamStore. Bulk assignment never writes that column directly;
params arrive through the store so the raw string stays a derived value.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, Mapping
import logging
import uuid

from paramstore.core.types import PARAMS_ATTRIBUTE
from paramstore.params.adapters import AttributeAdapter
from paramstore.params.store import ParamStore

logger = logging.getLogger(__name__)

# Attributes a caller may bulk-assign. "params" is handled separately.
SAFE_ATTRIBUTES = frozenset({
    "name",
    "title",
    "description",
    "kind",
    "status",
})


def new_id() -> str:
    return uuid.uuid4().hex


@dataclass
class Record:
    id: str = field(default_factory=new_id)
    attributes: Dict[str, Any] = field(default_factory=dict)
    safe_attributes: FrozenSet[str] = SAFE_ATTRIBUTES
    params: ParamStore = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        self.params = ParamStore(AttributeAdapter(self.attributes, PARAMS_ATTRIBUTE))

    def assign(self, data: Mapping[str, Any]) -> "Record":
        """
        Bulk-assign attributes from untrusted input.
        Unsafe names are dropped. A params dict/list is merged through the
        store; a params string (raw column value) is refused.
        """
        dropped = []
        for name, value in data.items():
            if name == PARAMS_ATTRIBUTE:
                if isinstance(value, (Mapping, list, tuple)):
                    self.params.set_params(value)
                else:
                    dropped.append(name)
            elif name in self.safe_attributes:
                self.attributes[name] = value
            else:
                dropped.append(name)
        if dropped:
            logger.info("[Record %s] Ignored unsafe attributes: %s", self.id, dropped)
        return self

    def get(self, name: str, default: Any = None) -> Any:
        if name == PARAMS_ATTRIBUTE:
            return self.params.get_params()
        return self.attributes.get(name, default)

    def before_save(self) -> Dict[str, Any]:
        """Serialize params into the attribute row and return the storable row."""
        self.params.on_before_persist()
        return {"id": self.id, "attributes": dict(self.attributes)}

    @classmethod
    def after_find(cls, row: Mapping[str, Any]) -> "Record":
        """Build a record from a stored row and load its params."""
        attributes = dict(row.get("attributes") or {})
        record = cls(id=row["id"], attributes=attributes)
        record.params.on_after_load(attributes.get(PARAMS_ATTRIBUTE))
        return record

    def to_dict(self) -> Dict[str, Any]:
        """Public view: attributes with params decoded."""
        out = {k: v for k, v in self.attributes.items() if k != PARAMS_ATTRIBUTE}
        out["id"] = self.id
        out[PARAMS_ATTRIBUTE] = self.params.get_params()
        return out
