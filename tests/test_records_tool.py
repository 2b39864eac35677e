"""
Tests for tools/records.py subcommands against a temporary records file.
"""
import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

import json
import pytest
from tools.records import main
from paramstore.records import Record, RecordStore


@pytest.fixture
def records_file(tmp_path):
    path = str(tmp_path / "records.jsonl")
    RecordStore(path).save(Record(id="r1", attributes={"name": "kit"}).assign({"params": {"a": {"b": 1}}}))
    return path


def test_show(records_file, capsys):
    assert main(["show", "r1", "--file", records_file]) == 0
    assert capsys.readouterr().out.strip() == '{"a":{"b":1}}'


def test_get_with_default(records_file, capsys):
    assert main(["get", "r1", "a.b", "--file", records_file]) == 0
    assert capsys.readouterr().out.strip() == "1"
    assert main(["get", "r1", "a.c", "--default", '"none"', "--file", records_file]) == 0
    assert capsys.readouterr().out.strip() == '"none"'


def test_set_add_unset_persist(records_file, capsys):
    assert main(["set", "r1", "a.c", '{"d": 2}', "--file", records_file]) == 0
    assert main(["set", "r1", "a", '{"e": 3}', "--merge", "--file", records_file]) == 0
    assert main(["add", "r1", "tags", "red", "--file", records_file]) == 0
    capsys.readouterr()

    params = RecordStore(records_file).find("r1").params.get_params()
    assert params == {"a": {"b": 1, "c": {"d": 2}, "e": 3}, "tags": ["red"]}

    assert main(["unset", "r1", "tags", "--file", records_file]) == 0
    assert json.loads(capsys.readouterr().out) == {"a": {"b": 1, "c": {"d": 2}, "e": 3}}


def test_list(records_file, capsys):
    assert main(["list", "--file", records_file]) == 0
    assert capsys.readouterr().out.strip() == "r1  kit  [a]"


def test_missing_record(records_file, capsys):
    assert main(["show", "nope", "--file", records_file]) == 1
    assert "Record not found" in capsys.readouterr().err


def test_no_command_prints_help(capsys):
    assert main([]) == 1
