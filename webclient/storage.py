"""Persistent key/value storage for the client session (token and profile)."""

import json
import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)


class MemoryStorage:
    def __init__(self, initial=None):
        self._data = dict(initial or {})

    def get(self, key, default=None):
        return self._data.get(key, default)

    def set(self, key, value):
        self._data[key] = value

    def remove(self, key):
        self._data.pop(key, None)

    def clear(self):
        self._data.clear()


class LocalStorage(MemoryStorage):
    """JSON file backed storage that survives restarts, like browser local storage."""

    def __init__(self, path):
        self.path = Path(path)
        super().__init__(self._load())

    def _load(self):
        if not self.path.exists():
            return {}
        try:
            with open(self.path, "r") as fh:
                data = json.load(fh)
        except (OSError, ValueError):
            logger.warning(f"Ignoring unreadable client storage at {self.path}", exc_info=True)
            return {}
        return data if isinstance(data, dict) else {}

    def _save(self):
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        with open(tmp_path, "w") as fh:
            json.dump(self._data, fh)
        os.replace(tmp_path, self.path)

    def set(self, key, value):
        super().set(key, value)
        self._save()

    def remove(self, key):
        super().remove(key)
        self._save()

    def clear(self):
        super().clear()
        self._save()
