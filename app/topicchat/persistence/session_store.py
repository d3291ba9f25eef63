"""
Purpose: Durable mirror of the session (topics, transcripts, tone).
Why: Conversations survive a browser refresh or a server restart.

What is inside:
InMemorySessionStore: keeps the last saved records, for tests and throwaway runs.
JsonFileSessionStore: one JSON document on disk, replaced atomically on save.

Both return a default session instead of failing when nothing usable was
saved. Only the controller writes.

Testing:
In-memory: simple state tests.
JSON file: tmp_path fixture; corrupt/missing file tests.
"""

from __future__ import annotations
import copy
import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any, Optional

from ..state import SessionState

logger = logging.getLogger(__name__)


def _restore(records: Any, source: str) -> SessionState:
    if not isinstance(records, dict):
        logger.warning(f"SessionStore: {source} is not a JSON object, starting fresh")
        return SessionState.default()
    try:
        return SessionState.from_records(records)
    except (ValueError, TypeError, AttributeError) as e:
        logger.warning(f"SessionStore: unreadable state in {source}, starting fresh: {e}")
        return SessionState.default()


class InMemorySessionStore:
    def __init__(self, records: Optional[dict[str, Any]] = None) -> None:
        self._records = copy.deepcopy(records)

    @property
    def records(self) -> Optional[dict[str, Any]]:
        return copy.deepcopy(self._records)

    def load(self) -> SessionState:
        if self._records is None:
            return SessionState.default()
        return _restore(copy.deepcopy(self._records), "memory")

    def save(self, state: SessionState) -> None:
        self._records = copy.deepcopy(state.to_records())

    def reset(self) -> None:
        self._records = None


class JsonFileSessionStore:
    def __init__(self, path: Path | str) -> None:
        self.path = Path(path).expanduser()

    def load(self) -> SessionState:
        if not self.path.exists():
            return SessionState.default()
        try:
            records = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            logger.warning(f"SessionStore: failed to read {self.path}: {e}")
            return SessionState.default()
        return _restore(records, str(self.path))

    def save(self, state: SessionState) -> None:
        """Write the whole document to a temp file, then swap it in."""
        payload = json.dumps(state.to_records(), indent=2, ensure_ascii=False)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(
            prefix=f".{self.path.name}.", suffix=".tmp", dir=self.path.parent
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(payload)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_path, self.path)
        except BaseException:
            try:
                os.remove(tmp_path)
            except OSError:
                pass
            raise
        logger.debug(f"SessionStore: saved {self.path}")
