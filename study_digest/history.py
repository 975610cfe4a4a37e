"""Persist the most recent summaries so they can be shown again without recomputation."""

from __future__ import annotations

import json
import logging
import os
import tempfile
import threading
import uuid
from collections import OrderedDict
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, TypeAdapter, ValidationError

logger = logging.getLogger(__name__)

DEFAULT_MAX_ENTRIES = 10


class SummaryHistoryEntry(BaseModel):
    """One stored summary, keyed by the source file name."""

    model_config = ConfigDict(frozen=True)

    id: str
    file_name: str
    date: str
    basic_summary: Optional[Dict[str, Any]]
    ai_summary: Optional[Dict[str, Any]] = None


_ENTRIES = TypeAdapter(List[SummaryHistoryEntry])


class SummaryHistoryStore:
    """A JSON file holding at most ``max_entries`` summaries, most recent last.

    The file is a cache: anything unreadable is logged and treated as an empty
    history. Every mutating call rewrites the whole collection.
    """

    def __init__(self, path: Path, max_entries: int = DEFAULT_MAX_ENTRIES) -> None:
        if max_entries <= 0:
            raise ValueError("max_entries must be positive")
        self.path = Path(path)
        self.max_entries = max_entries
        self._lock = threading.Lock()

    def save(
        self,
        file_name: str,
        basic_summary: Optional[Dict[str, Any]],
        ai_summary: Optional[Dict[str, Any]] = None,
    ) -> SummaryHistoryEntry:
        entry = SummaryHistoryEntry(
            id=uuid.uuid4().hex,
            file_name=file_name,
            date=datetime.now(timezone.utc).isoformat(),
            basic_summary=basic_summary,
            ai_summary=ai_summary,
        )
        with self._lock:
            by_name = self._read_index()
            by_name.pop(file_name, None)
            by_name[file_name] = entry
            while len(by_name) > self.max_entries:
                evicted, _ = by_name.popitem(last=False)
                logger.info("Evicted oldest summary for %s", evicted)
            self._write(list(by_name.values()))
        return entry

    def entries(self) -> List[SummaryHistoryEntry]:
        with self._lock:
            return self._read()

    def load(self, entry_id: str) -> Optional[SummaryHistoryEntry]:
        for entry in self.entries():
            if entry.id == entry_id:
                return entry
        return None

    def delete(self, entry_id: str) -> bool:
        with self._lock:
            entries = self._read()
            remaining = [entry for entry in entries if entry.id != entry_id]
            if len(remaining) == len(entries):
                return False
            self._write(remaining)
        return True

    def clear(self) -> None:
        with self._lock:
            self._write([])

    def _read_index(self) -> "OrderedDict[str, SummaryHistoryEntry]":
        return OrderedDict((entry.file_name, entry) for entry in self._read())

    def _read(self) -> List[SummaryHistoryEntry]:
        if not self.path.exists():
            return []
        try:
            raw = self.path.read_text(encoding="utf-8")
            return _ENTRIES.validate_python(json.loads(raw))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError, ValidationError) as exc:
            logger.warning("Ignoring unreadable summary history at %s: %s", self.path, exc)
            return []

    def _write(self, entries: List[SummaryHistoryEntry]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        payload = json.dumps(
            [entry.model_dump() for entry in entries],
            ensure_ascii=False,
            indent=2,
        )
        fd, tmp_name = tempfile.mkstemp(prefix=f".{self.path.name}.", dir=str(self.path.parent))
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                handle.write(payload)
            os.replace(tmp_name, self.path)
        except OSError:
            if os.path.exists(tmp_name):
                os.remove(tmp_name)
            raise
