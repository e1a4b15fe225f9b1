# frontend/storage.py
"""
Key-value persistence for the client session (token + username).

The controller only needs get/set/remove, so tests use MemoryStorage and the
Streamlit app uses a JSON file that survives page reloads.

JsonFileStorage is process-wide: every browser session of one Streamlit server
reads and writes the same file. Set SESSION_FILE to give each user or
deployment its own file.
"""
import json
import os
import logging
from abc import ABC, abstractmethod

logger = logging.getLogger("finance-frontend")

SESSION_FILE = os.environ.get("SESSION_FILE", os.path.join("data", "session.json"))


class SessionStorage(ABC):
    @abstractmethod
    def get(self, key, default=None):
        pass

    @abstractmethod
    def set(self, key, value):
        pass

    @abstractmethod
    def remove(self, key):
        pass


class MemoryStorage(SessionStorage):
    def __init__(self, initial=None):
        self._data = dict(initial or {})

    def get(self, key, default=None):
        return self._data.get(key, default)

    def set(self, key, value):
        self._data[key] = value

    def remove(self, key):
        self._data.pop(key, None)


class JsonFileStorage(SessionStorage):
    def __init__(self, path=SESSION_FILE):
        self.path = path

    def _load(self):
        if not os.path.exists(self.path):
            return {}
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                data = json.load(f)
            return data if isinstance(data, dict) else {}
        except (json.JSONDecodeError, OSError):
            # corrupted file: start over with an empty session
            logger.warning(f"Could not read session file {self.path}, ignoring it")
            return {}

    def _save(self, data):
        os.makedirs(os.path.dirname(os.path.abspath(self.path)), exist_ok=True)
        with open(self.path, 'w', encoding='utf-8') as f:
            json.dump(data, f, indent=4)

    def get(self, key, default=None):
        return self._load().get(key, default)

    def set(self, key, value):
        data = self._load()
        data[key] = value
        self._save(data)

    def remove(self, key):
        data = self._load()
        if key in data:
            del data[key]
            self._save(data)
