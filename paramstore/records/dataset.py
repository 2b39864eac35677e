import json
import os
from typing import List, Dict, Any, Optional
from datetime import datetime

from paramstore.records.record import Record

SCHEMA_VERSION = 1


class RecordStore:
    def __init__(self, filepath: str = "data/records.jsonl"):
        self.filepath = filepath
        directory = os.path.dirname(filepath)
        if directory:
            os.makedirs(directory, exist_ok=True)

    def _append(self, entry: Dict[str, Any]):
        entry["timestamp"] = datetime.now().isoformat()
        entry["schema_version"] = SCHEMA_VERSION
        with open(self.filepath, 'a', encoding='utf-8') as f:
            f.write(json.dumps(entry, ensure_ascii=False) + "\n")

    def save(self, record: Record) -> Record:
        """
        Appends the record's current revision.
        Params are serialized into the row by Record.before_save.
        """
        self._append(record.before_save())
        return record

    def delete(self, record_id: str):
        """Appends a tombstone; find() and load() skip deleted ids."""
        self._append({"id": record_id, "deleted": True})

    def _rows(self) -> Dict[str, Dict[str, Any]]:
        """Latest row per id, in first-seen order."""
        rows = {}
        if not os.path.exists(self.filepath):
            return rows

        with open(self.filepath, 'r', encoding='utf-8') as f:
            for line in f:
                try:
                    entry = json.loads(line)
                except json.JSONDecodeError:
                    continue
                if not isinstance(entry, dict) or 'id' not in entry:
                    continue
                rows[entry['id']] = entry
        return {k: v for k, v in rows.items() if not v.get('deleted')}

    def find(self, record_id: str) -> Optional[Record]:
        row = self._rows().get(record_id)
        return Record.after_find(row) if row is not None else None

    def load(self) -> List[Record]:
        """
        Loads the latest revision of every live record.
        """
        return [Record.after_find(row) for row in self._rows().values()]
