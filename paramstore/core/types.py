from typing import Any, Dict, List, Union

# JSON-compatible value held in a param tree. Recursive aliases are spelled
# with Any at the leaves; the store checks shapes with isinstance at runtime.
ParamScalar = Union[None, bool, int, float, str]
ParamValue = Union[ParamScalar, List[Any], Dict[str, Any]]
ParamTree = Dict[str, ParamValue]

# Reserved attribute name of the raw JSON column on a host record
PARAMS_ATTRIBUTE = "params"
