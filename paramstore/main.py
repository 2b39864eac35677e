from fastapi import FastAPI, HTTPException, Response
from fastapi.middleware.cors import CORSMiddleware
import uvicorn
import logging

from paramstore.config import LOG_LEVEL, PRETTY, RECORDS_PATH
from paramstore.records import Record, RecordStore

# Configure Logging
logging.basicConfig(level=getattr(logging, LOG_LEVEL, logging.INFO))
logger = logging.getLogger("paramstore")

app = FastAPI(
    title="ParamStore Service",
    version="1.0.0",
    description="Records with nested, dot-addressable JSON params"
)

# CORS (Allow Frontend)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"], # Allow any local port
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

store = RecordStore(RECORDS_PATH)


def _find_or_404(record_id: str) -> Record:
    record = store.find(record_id)
    if record is None:
        raise HTTPException(status_code=404, detail=f"Record not found: {record_id}")
    return record


def _params_response(record: Record) -> Response:
    """Params as the stored JSON text ({} when empty), pretty when configured."""
    body = record.params.get_params_as_json_string(pretty_print=PRETTY) or "{}"
    return Response(content=body, media_type="application/json")


@app.get("/health")
async def health_check():
    return {"status": "ok", "service": "paramstore", "records": store.filepath}


@app.post("/records")
async def create_record(data: dict):
    """
    Creates a record from a body of attributes.
    Only safe attributes are kept; "params" must be an object or array.
    """
    record = Record().assign(data)
    store.save(record)
    logger.info("Created record %s", record.id)
    return record.to_dict()


@app.get("/records/{record_id}")
async def get_record(record_id: str):
    return _find_or_404(record_id).to_dict()


@app.get("/records/{record_id}/params")
async def get_params(record_id: str, key: str = None, default: str = None):
    """
    Whole params tree, or the value at a dot-path key.
    default is returned (as a string) when key is missing.
    """
    record = _find_or_404(record_id)
    if key is None:
        return _params_response(record)
    return {"key": key, "value": record.params.get_param(key, default)}


@app.post("/records/{record_id}/params")
async def set_params(record_id: str, data: dict):
    """
    Body {key, value, merge, recursive} sets one path (key may also be an
    object of {path: value}); body {params, merge, recursive} sets the tree.
    """
    record = _find_or_404(record_id)
    merge = bool(data.get("merge", False))
    recursive = bool(data.get("recursive", False))

    if "key" in data:
        key = data["key"]
        if not isinstance(key, (str, dict)) or key == "":
            raise HTTPException(status_code=400, detail="key must be a non-empty string or an object")
        record.params.set_param(key, data.get("value"), merge=merge, recursive=recursive)
    elif "params" in data:
        # Whole-tree writes merge unless told otherwise
        record.params.set_params(data["params"], merge=bool(data.get("merge", True)), recursive=recursive)
    else:
        raise HTTPException(status_code=400, detail="Body needs 'key' or 'params'")

    store.save(record)
    return _params_response(record)


@app.post("/records/{record_id}/params/add")
async def add_param(record_id: str, data: dict):
    record = _find_or_404(record_id)
    key = data.get("key")
    if not isinstance(key, str) or not key:
        raise HTTPException(status_code=400, detail="key must be a non-empty string")
    record.params.add_param(key, data.get("value"))
    store.save(record)
    return _params_response(record)


@app.delete("/records/{record_id}/params")
async def unset_params(record_id: str, keys: str = None):
    """Removes comma-separated top-level keys, or every param when keys is omitted."""
    record = _find_or_404(record_id)
    record.params.unset_params(keys)
    store.save(record)
    return _params_response(record)


@app.delete("/records/{record_id}")
async def delete_record(record_id: str):
    _find_or_404(record_id)
    store.delete(record_id)
    return {"status": "ok", "id": record_id}


if __name__ == "__main__":
    uvicorn.run("paramstore.main:app", host="0.0.0.0", port=8000, reload=True)
