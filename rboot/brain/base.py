"""Brain (key-value store) ABC."""
from __future__ import annotations
from abc import ABC, abstractmethod

class Brain(ABC):
    """Storage capability set shared by every backend.

    ``get`` never signals absence: a missing key reads back as ``b""``,
    same as a key stored with an empty value. ``remove`` of a missing key
    is a no-op. Backends report write failures by raising.
    """
    @abstractmethod
    def set(self, key: str, value: bytes) -> None: ...
    @abstractmethod
    def get(self, key: str) -> bytes: ...
    @abstractmethod
    def remove(self, key: str) -> None: ...
