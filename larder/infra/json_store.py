"""JSON document store with process-local locking and atomic writes.

The whole database is one JSON document::

    {"pantries": [...], "barcodes": [...], "items": [...], "recipes": [...]}

Every mutation runs inside ``transaction()``: the document is loaded under a
per-file lock, handed to the caller, and written back (temp file + move) only
if the block finishes without raising. A failure half-way through a batch
therefore leaves the file exactly as it was.
"""
from __future__ import annotations
import copy
import json
import logging
import os
import shutil
import tempfile
from contextlib import contextmanager
from pathlib import Path
from threading import Lock, RLock
from typing import Any, Dict, Iterator, List, Optional, Union

from larder.infra import paths
from larder.utilities.constants import EMPTY_STORE

logger = logging.getLogger(__name__)

_locks: Dict[str, RLock] = {}
_locks_guard = Lock()


def _lock_for(path: Path) -> RLock:
    key = str(path)
    with _locks_guard:
        if key not in _locks:
            _locks[key] = RLock()
        return _locks[key]


def next_id(rows: List[Dict[str, Any]]) -> int:
    return max((int(r.get("id") or 0) for r in rows), default=0) + 1


class JsonStore:
    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        self._lock = _lock_for(self.path.resolve())

    def __repr__(self) -> str:
        return f"JsonStore({str(self.path)!r})"

    def _read(self) -> Dict[str, Any]:
        if not self.path.exists():
            logger.warning("Store file not found: %s. Starting from an empty store.", self.path)
            return copy.deepcopy(EMPTY_STORE)
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                doc = json.load(f) or {}
        except json.JSONDecodeError as e:
            logger.error("Invalid JSON in store file %s: %s", self.path, e)
            raise
        for section, empty in EMPTY_STORE.items():
            doc.setdefault(section, copy.deepcopy(empty))
        return doc

    def _atomic_write(self, doc: Dict[str, Any]) -> None:
        os.makedirs(self.path.parent, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(dir=str(self.path.parent), prefix=".store_", suffix=".json")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as tmp:
                json.dump(doc, tmp, indent=2, ensure_ascii=False)
            shutil.move(tmp_path, str(self.path))
        finally:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)

    def read(self) -> Dict[str, Any]:
        """Snapshot of the whole document (callers may mutate it freely)."""
        with self._lock:
            return self._read()

    @contextmanager
    def transaction(self) -> Iterator[Dict[str, Any]]:
        """Yield the document for mutation; commit on success, discard on error."""
        with self._lock:
            doc = self._read()
            yield doc
            try:
                self._atomic_write(doc)
            except OSError as e:
                logger.error("Failed to write store file %s: %s", self.path, e)
                raise


def get_store(path: Optional[Union[str, Path]] = None) -> JsonStore:
    """Store bound to ``path`` or the configured STORE_FILE (read at call time)."""
    return JsonStore(path or paths.STORE_FILE)


__all__ = ["JsonStore", "get_store", "next_id"]
