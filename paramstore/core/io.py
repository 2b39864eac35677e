import json
import numpy as np
from typing import Any, Optional


class ParamsIO:
    @staticmethod
    def _default(value: Any):
        """json.dumps fallback for values that are not plain JSON types."""
        # numpy values show up when params come from sampled or clipped arrays
        if isinstance(value, np.generic):
            return value.item()
        if isinstance(value, np.ndarray):
            return value.tolist()
        if isinstance(value, (set, frozenset, tuple)):
            return list(value)
        return str(value)

    @staticmethod
    def to_string(value: Any, pretty_print: bool = False) -> str:
        """Encodes a param tree as JSON text. Unicode is kept unescaped."""
        if pretty_print:
            return json.dumps(value, ensure_ascii=False, indent=4, default=ParamsIO._default)
        return json.dumps(value, ensure_ascii=False, separators=(",", ":"), default=ParamsIO._default)

    @staticmethod
    def from_string(raw: Optional[str]) -> Any:
        """
        Decodes JSON text. Raises ValueError on malformed input
        (json.JSONDecodeError is a ValueError) and TypeError on non-text input.
        """
        if isinstance(raw, (bytes, bytearray)):
            raw = raw.decode("utf-8")
        return json.loads(raw)
