from __future__ import annotations
import threading
from typing import Dict
from .base import Brain
from ..observability import BRAIN_OPS

class MemoryBrain(Brain):
    """In-process key-value store; contents live as long as the instance.

    Every operation takes the same lock, so readers are serialized too.
    Metrics are recorded after the lock is released.
    """
    backend = "memory"

    def __init__(self):
        self._lock = threading.Lock()
        self._items: Dict[str, bytes] = {}

    def set(self, key: str, value: bytes) -> None:
        if not isinstance(value, (bytes, bytearray, memoryview)):
            raise TypeError(f"brain values must be bytes-like, got {type(value).__name__}")
        value = bytes(value)
        with self._lock:
            self._items[key] = value
        BRAIN_OPS.labels(backend=self.backend, op="set").inc()

    def get(self, key: str) -> bytes:
        with self._lock:
            value = self._items.get(key, b"")
        BRAIN_OPS.labels(backend=self.backend, op="get").inc()
        return value

    def remove(self, key: str) -> None:
        with self._lock:
            self._items.pop(key, None)
        BRAIN_OPS.labels(backend=self.backend, op="remove").inc()

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)
