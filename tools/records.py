#!/usr/bin/env python3
"""
Inspect and edit record params in a records file (JSON lines).

Usage:
    python tools/records.py <subcommand> [options]

Subcommands:
    list                                     List live records and their param keys
    show <id>                                Print a record's params as JSON
    get <id> <key>                           Print the value at a dot-path key
    set <id> <key> <json_value>              Store a value at a dot-path key
    add <id> <key> <json_value>              Append a value to the list at key
    unset <id> [keys]                        Remove comma-separated top-level keys (all if omitted)

Options:
    --file <path>         Records file (default: $PARAMSTORE_RECORDS or data/records.jsonl)
    --pretty              Indented JSON output
"""
import sys
import os
import json
import argparse

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from paramstore.config import PRETTY, RECORDS_PATH
from paramstore.records import RecordStore


def _parse_value(text: str):
    """JSON literal if it parses, else the raw text as a string."""
    try:
        return json.loads(text)
    except json.JSONDecodeError:
        return text


def _open(args):
    store = RecordStore(args.file)
    record = store.find(args.id) if getattr(args, "id", None) else None
    return store, record


def _missing(args):
    print(f"Record not found: {args.id}", file=sys.stderr)
    return 1


def cmd_list(args):
    store = RecordStore(args.file)
    for record in store.load():
        keys = ", ".join(record.params.get_params().keys()) or "-"
        print(f"{record.id}  {record.get('name', '')}  [{keys}]")
    return 0


def cmd_show(args):
    _, record = _open(args)
    if record is None:
        return _missing(args)
    print(record.params.get_params_as_json_string(pretty_print=args.pretty) or "{}")
    return 0


def cmd_get(args):
    _, record = _open(args)
    if record is None:
        return _missing(args)
    value = record.params.get_param(args.key, _parse_value(args.default) if args.default is not None else None)
    print(json.dumps(value, ensure_ascii=False, indent=4 if args.pretty else None))
    return 0


def cmd_set(args):
    store, record = _open(args)
    if record is None:
        return _missing(args)
    record.params.set_param(args.key, _parse_value(args.value), merge=args.merge, recursive=args.recursive)
    store.save(record)
    print(record.params.get_params_as_json_string(pretty_print=args.pretty) or "{}")
    return 0


def cmd_add(args):
    store, record = _open(args)
    if record is None:
        return _missing(args)
    record.params.add_param(args.key, _parse_value(args.value))
    store.save(record)
    print(record.params.get_params_as_json_string(pretty_print=args.pretty) or "{}")
    return 0


def cmd_unset(args):
    store, record = _open(args)
    if record is None:
        return _missing(args)
    record.params.unset_params(args.keys)
    store.save(record)
    print(record.params.get_params_as_json_string(pretty_print=args.pretty) or "{}")
    return 0


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Inspect and edit record params"
    )

    subparsers = parser.add_subparsers(dest="command", help="Subcommand")

    # Common arguments
    def add_common_args(p):
        p.add_argument("--file", type=str, default=RECORDS_PATH, help="Records file (JSON lines)")
        p.add_argument("--pretty", action="store_true", default=PRETTY, help="Indented JSON output")

    p_list = subparsers.add_parser("list", help="List live records")
    add_common_args(p_list)

    p_show = subparsers.add_parser("show", help="Print a record's params")
    p_show.add_argument("id")
    add_common_args(p_show)

    p_get = subparsers.add_parser("get", help="Print the value at a dot-path key")
    p_get.add_argument("id")
    p_get.add_argument("key")
    p_get.add_argument("--default", type=str, default=None, help="JSON value printed when key is missing")
    add_common_args(p_get)

    p_set = subparsers.add_parser("set", help="Store a value at a dot-path key")
    p_set.add_argument("id")
    p_set.add_argument("key")
    p_set.add_argument("value", help="JSON value (bare text is stored as a string)")
    p_set.add_argument("--merge", action="store_true", help="Merge an object value into the existing object")
    p_set.add_argument("--recursive", action="store_true", help="Merge nested objects too")
    add_common_args(p_set)

    p_add = subparsers.add_parser("add", help="Append a value to the list at key")
    p_add.add_argument("id")
    p_add.add_argument("key")
    p_add.add_argument("value", help="JSON value (bare text is stored as a string)")
    add_common_args(p_add)

    p_unset = subparsers.add_parser("unset", help="Remove top-level keys")
    p_unset.add_argument("id")
    p_unset.add_argument("keys", nargs="?", default=None, help="Comma-separated keys (all when omitted)")
    add_common_args(p_unset)

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    if args.command == "list":
        return cmd_list(args)
    elif args.command == "show":
        return cmd_show(args)
    elif args.command == "get":
        return cmd_get(args)
    elif args.command == "set":
        return cmd_set(args)
    elif args.command == "add":
        return cmd_add(args)
    elif args.command == "unset":
        return cmd_unset(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
