"""Persisted client identity: one serialized user under a well-known key."""

from __future__ import annotations

import json
import logging
from pathlib import Path

logger = logging.getLogger(__name__)

CURRENT_USER_KEY = "currentUser"
DEFAULT_STORE_PATH = Path.home() / ".daily_quiz" / "local_state.json"


class LocalStore:
    def __init__(self, path: Path | str = DEFAULT_STORE_PATH) -> None:
        self.path = Path(path)

    def _read(self) -> dict:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError):
            logger.warning("Ignoring unreadable local state at %s", self.path)
            return {}
        return data if isinstance(data, dict) else {}

    def _write(self, data: dict) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(data, ensure_ascii=False), encoding="utf-8")

    def load_user(self) -> dict | None:
        user = self._read().get(CURRENT_USER_KEY)
        return user if isinstance(user, dict) else None

    def save_user(self, user: dict) -> None:
        data = self._read()
        data[CURRENT_USER_KEY] = user
        self._write(data)

    def clear_user(self) -> None:
        data = self._read()
        if data.pop(CURRENT_USER_KEY, None) is not None:
            self._write(data)
