"""
notes.py

JSON-backed store of minute notes.

File layout
-----------
    {
      "2024-05-01-14-07": {"content": "…", "is_locked": false},
      …
    }

Reads recover to an empty store; writes are best effort and never raise.
"""

from __future__ import annotations

import json
import os
from dataclasses import asdict, dataclass
from typing import Dict, Optional


@dataclass
class TimeNote:
    content: str
    is_locked: bool = False


class NoteStore:
    """Key → TimeNote mapping persisted to a single JSON file."""

    def __init__(self, path: str) -> None:
        self.path = os.path.abspath(path)
        self.notes: Dict[str, TimeNote] = self.load()

    # ---------------------------------------------------------------- load
    def load(self) -> Dict[str, TimeNote]:
        if not os.path.isfile(self.path):
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
            return {
                str(key): TimeNote(
                    content=str(rec.get("content", "")),
                    is_locked=bool(rec.get("is_locked", False)),
                )
                for key, rec in data.items()
            }
        except Exception as e:
            print(f"[notes] could not read {self.path}: {e}; starting empty")
            return {}

    # ---------------------------------------------------------------- query
    def lookup(self, key: str) -> Optional[str]:
        note = self.notes.get(key)
        return note.content if note else None

    def note(self, key: str) -> Optional[TimeNote]:
        return self.notes.get(key)

    def __contains__(self, key: str) -> bool:
        return key in self.notes

    def __len__(self) -> int:
        return len(self.notes)

    # ---------------------------------------------------------------- save
    def save(self, key: str, content: str) -> None:
        """Overwrite *key* and flush the whole store to disk (best effort)."""
        self.notes[key] = TimeNote(content=content, is_locked=False)
        tmp = self.path + ".tmp"
        try:
            with open(tmp, "w", encoding="utf-8") as f:
                json.dump({k: asdict(n) for k, n in self.notes.items()}, f, indent=2)
            os.replace(tmp, self.path)
        except Exception:
            try:
                os.remove(tmp)
            except OSError:
                pass
