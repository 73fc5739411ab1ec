"""
In‑memory key/value store.

The store backs ``TestDoublesService.guardar_dato`` and
``obtener_dato``.  One instance is created per application and handed
to the service, so state lives as long as the app does and never
leaks between independently created apps (or tests).  Route handlers
run in a threadpool, hence the lock.
"""

import threading
from typing import Dict, List, Optional


class KeyValueStore:
    """Thread‑safe mapping of string keys to string values.

    Writes overwrite any previous value for the same key.  There is no
    eviction and nothing is persisted.
    """

    def __init__(self) -> None:
        self._data: Dict[str, str] = {}
        self._lock = threading.Lock()

    def set(self, key: str, value: str) -> None:
        with self._lock:
            self._data[key] = value

    def get(self, key: str) -> Optional[str]:
        with self._lock:
            return self._data.get(key)

    def keys(self) -> List[str]:
        with self._lock:
            return list(self._data.keys())

    def clear(self) -> None:
        with self._lock:
            self._data.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._data)
