"""
ParamStore: nested, dot-addressable params persisted as one JSON blob.

The tree is built lazily from the adapter's raw string on first access and
is the single source of truth afterwards. Every mutation re-serializes the
tree and hands the string back to the adapter (write-through).
"""
import copy
import logging
from collections.abc import Mapping
from typing import Any, Iterable, Optional, Union

from paramstore.config import DEV
from paramstore.core.io import ParamsIO
from paramstore.core.params import get_param, next_index_key, split_path, walk_path
from paramstore.core.types import ParamTree, ParamValue
from paramstore.params.adapters import MemoryAdapter, PersistenceAdapter
from paramstore.params.resolve import merge_params

logger = logging.getLogger("paramstore")


def _as_tree(params: Union[Mapping, list, tuple]) -> ParamTree:
    """Mapping -> dict copy; list/tuple -> dict keyed by "0", "1", ..."""
    if isinstance(params, Mapping):
        return {str(k): copy.deepcopy(v) for k, v in params.items()}
    return {str(i): copy.deepcopy(v) for i, v in enumerate(params)}


class ParamStore:
    def __init__(self, adapter: Optional[PersistenceAdapter] = None):
        self.adapter = adapter if adapter is not None else MemoryAdapter()
        self._params: Optional[ParamTree] = None

    def __repr__(self):
        state = "unmaterialized" if self._params is None else f"{len(self._params)} keys"
        return f"ParamStore({state})"

    # -------------------------------------------------------------------------
    # Materialization
    # -------------------------------------------------------------------------

    @property
    def materialized(self) -> bool:
        return self._params is not None

    def ensure_materialized(self) -> None:
        """Build the tree from the adapter's raw string, once."""
        if self._params is None:
            self._params = self._decode(self.adapter.read_raw())

    @staticmethod
    def _decode(raw: Optional[str]) -> ParamTree:
        """Raw JSON -> tree. Never raises; anything unusable becomes {}."""
        if not raw:
            return {}
        try:
            decoded = ParamsIO.from_string(raw)
            if not decoded:
                return {}
            if isinstance(decoded, (dict, list)):
                return _as_tree(decoded)
        except (TypeError, ValueError, RecursionError) as exc:
            # RecursionError: nesting deeper than the interpreter can decode or copy
            log = logger.warning if DEV else logger.debug
            log("[ParamStore] Unreadable params JSON, starting empty: %s", exc)
            return {}
        logger.debug("[ParamStore] Scalar params JSON ignored: %r", decoded)
        return {}

    def _write_through(self) -> None:
        self.adapter.write_raw(self.get_params_as_json_string())

    # -------------------------------------------------------------------------
    # Lifecycle hooks
    # -------------------------------------------------------------------------

    def on_after_load(self, raw: Optional[str]) -> "ParamStore":
        """Rebuild the tree from a freshly loaded raw string."""
        self._params = self._decode(raw)
        return self

    def on_before_persist(self) -> Optional[str]:
        """Serialize and hand the final raw string to the adapter."""
        raw = self.get_params_as_json_string()
        self.adapter.write_raw(raw)
        return raw

    # -------------------------------------------------------------------------
    # Reads
    # -------------------------------------------------------------------------

    def get_param(self, key: str, default: Any = None) -> Any:
        """
        Get a param by key. Dot access is supported: "car.info.age".
        A literal top-level key named "car.info" shadows the nested path.
        Returns default when any segment is missing or not traversable.
        """
        self.ensure_materialized()
        missing = object()
        value = get_param(self._params, key, missing)
        if value is missing:
            return default
        return copy.deepcopy(value)

    def has_param(self, key: str) -> bool:
        """Literal top-level key check. Dots are not interpreted."""
        self.ensure_materialized()
        return key in self._params

    def get_params(self) -> ParamTree:
        self.ensure_materialized()
        return copy.deepcopy(self._params)

    def get_params_as_json_string(self, pretty_print: bool = False) -> Optional[str]:
        """
        JSON text of the tree, or None when there are no params.
        Callers rely on None (not "{}") to mean "nothing stored".
        """
        self.ensure_materialized()
        params = self._params
        if isinstance(params, (dict, list)):
            return ParamsIO.to_string(params, pretty_print) if params else None
        if isinstance(params, str):
            return params or None
        return None if params is None else str(params)

    # -------------------------------------------------------------------------
    # Writes
    # -------------------------------------------------------------------------

    def set_param(self, key: Union[str, Mapping], value: ParamValue = None,
                  merge: bool = False, recursive: bool = False) -> "ParamStore":
        """
        Store a param by key. Dot access is supported: "car.info.age".
        key may also be a mapping of {path: value}; each pair is stored as its
        own call with the same merge flags, and value is ignored.
        Anything that is not a dict along the path is replaced by a dict.
        With merge=True and a dict value, the value is merged into the dict
        already at key (recursively when recursive=True).
        """
        self.ensure_materialized()
        if isinstance(key, Mapping):
            for path, item in key.items():
                self.set_param(path, item, merge, recursive)
            return self

        *parents, last = split_path(key)
        target = walk_path(self._params, parents)
        current = target.get(last)
        if merge and isinstance(value, Mapping) and isinstance(current, dict):
            target[last] = merge_params(current, copy.deepcopy(dict(value)), recursive)
        else:
            target[last] = copy.deepcopy(value)

        self._write_through()
        return self

    def set_params(self, params: Union[Mapping, list, tuple], merge: bool = True,
                   recursive: bool = False) -> "ParamStore":
        """
        Set the whole params tree, merging into the current one by default.
        Values that are not a mapping or a list leave the tree unchanged.
        """
        self.ensure_materialized()
        if isinstance(params, (Mapping, list, tuple)):
            incoming = _as_tree(params)
            self._params = merge_params(self._params, incoming, recursive) if merge else incoming
        self._write_through()
        return self

    def add_param(self, key: str, value: ParamValue) -> "ParamStore":
        """Append value to the list at key (dot access supported), creating it if needed."""
        self.ensure_materialized()
        *parents, last = split_path(key)
        target = walk_path(self._params, parents)
        current = target.get(last)
        value = copy.deepcopy(value)
        if isinstance(current, list):
            current.append(value)
        elif isinstance(current, dict) and current:
            current[next_index_key(current)] = value
        else:
            target[last] = [value]

        self._write_through()
        return self

    def unset_param(self, key: str) -> "ParamStore":
        """Remove a literal top-level key. Dots are not interpreted."""
        self.ensure_materialized()
        if key in self._params:
            del self._params[key]
            self._write_through()
        return self

    def unset_params(self, keys: Union[None, str, Iterable[str]] = None) -> "ParamStore":
        """
        Remove literal top-level keys.
        keys: None (or empty, or "0") to clear everything, a list of keys, or
        a comma-separated string like "a, b".
        """
        self.ensure_materialized()
        if not keys or keys == "0":
            self._params = {}
        else:
            if isinstance(keys, str):
                keys = [k.strip() for k in keys.split(",")]
            elif isinstance(keys, Mapping):
                keys = keys.values()
            for key in keys:
                self._params.pop(key, None)
        self._write_through()
        return self
