"""
Tests for paramstore/main: record and params endpoints over a temporary records file.
Run from project root: python -m pytest tests/test_service.py -v
"""
import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

import pytest
from fastapi.testclient import TestClient

import paramstore.main as service
from paramstore.records import RecordStore


@pytest.fixture
def client(tmp_path, monkeypatch):
    monkeypatch.setattr(service, "store", RecordStore(str(tmp_path / "records.jsonl")))
    return TestClient(service.app)


@pytest.fixture
def record_id(client):
    resp = client.post("/records", json={"name": "kit", "params": {"car": {"info": {"age": 3}}}})
    assert resp.status_code == 200
    return resp.json()["id"]


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"


def test_create_drops_unsafe_attributes(client):
    resp = client.post("/records", json={"name": "kit", "owner": "x", "params": "{\"raw\": 1}"})
    body = resp.json()
    assert body["name"] == "kit"
    assert "owner" not in body
    assert body["params"] == {}


def test_get_record(client, record_id):
    body = client.get(f"/records/{record_id}").json()
    assert body == {"id": record_id, "name": "kit", "params": {"car": {"info": {"age": 3}}}}


def test_get_whole_params(client, record_id):
    resp = client.get(f"/records/{record_id}/params")
    assert resp.json() == {"car": {"info": {"age": 3}}}


def test_get_param_by_dot_path(client, record_id):
    assert client.get(f"/records/{record_id}/params", params={"key": "car.info.age"}).json()["value"] == 3
    missing = client.get(f"/records/{record_id}/params", params={"key": "car.color", "default": "red"})
    assert missing.json() == {"key": "car.color", "value": "red"}


def test_set_param_with_merge(client, record_id):
    resp = client.post(
        f"/records/{record_id}/params",
        json={"key": "car.info", "value": {"color": "blue"}, "merge": True},
    )
    assert resp.status_code == 200
    assert resp.json() == {"car": {"info": {"age": 3, "color": "blue"}}}
    # persisted
    assert client.get(f"/records/{record_id}/params").json() == {"car": {"info": {"age": 3, "color": "blue"}}}


def test_set_whole_params_replace(client, record_id):
    resp = client.post(f"/records/{record_id}/params", json={"params": {"x": 1}, "merge": False})
    assert resp.json() == {"x": 1}


def test_set_params_bad_body(client, record_id):
    assert client.post(f"/records/{record_id}/params", json={"value": 1}).status_code == 400
    assert client.post(f"/records/{record_id}/params", json={"key": "", "value": 1}).status_code == 400


def test_add_param(client, record_id):
    client.post(f"/records/{record_id}/params/add", json={"key": "tags", "value": "x"})
    resp = client.post(f"/records/{record_id}/params/add", json={"key": "tags", "value": "y"})
    assert resp.json()["tags"] == ["x", "y"]


def test_unset_params(client, record_id):
    client.post(f"/records/{record_id}/params", json={"params": {"a": 1, "b": 2}})
    resp = client.delete(f"/records/{record_id}/params", params={"keys": " a , car "})
    assert resp.json() == {"b": 2}
    cleared = client.delete(f"/records/{record_id}/params")
    assert cleared.json() == {}


def test_unknown_record_is_404(client):
    assert client.get("/records/nope").status_code == 404
    assert client.get("/records/nope/params").status_code == 404
    assert client.post("/records/nope/params/add", json={"key": "a", "value": 1}).status_code == 404


def test_delete_record(client, record_id):
    assert client.delete(f"/records/{record_id}").status_code == 200
    assert client.get(f"/records/{record_id}").status_code == 404
