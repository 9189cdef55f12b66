"""Plugin registry mapping brain names to backend factories."""
from __future__ import annotations
import logging
import threading
from typing import Callable, Dict, Iterator, List
from .brain import BUILTIN, Brain
from .errors import (
    AmbiguousBrainError,
    BrainRegistrationError,
    NoBrainAvailableError,
    UnknownBrainError,
)

log = logging.getLogger(__name__)

BrainFactory = Callable[[], Brain]

class BrainRegistry:
    """
    Name -> factory table for brain backends.

    Build one at startup, register every backend, then hand the same
    object to whatever needs to pick a brain. Entries are never removed.
    A lock guards the table, but late registration still changes what an
    empty-name ``resolve`` returns, so finish registering before resolving.
    """
    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._items: Dict[str, BrainFactory] = {}

    def register(self, name: str, factory: BrainFactory) -> None:
        if not name:
            raise BrainRegistrationError("register: brain must have a name")
        with self._lock:
            if name in self._items:
                raise BrainRegistrationError(f"register: brain named '{name}' already registered")
            self._items[name] = factory
        log.debug("Registered brain '%s'", name)

    def register_as(self, name: str):
        def deco(fn: BrainFactory) -> BrainFactory:
            self.register(name, fn)
            return fn
        return deco

    def resolve(self, name: str = "") -> BrainFactory:
        """
        Pick a factory by name.

        Order matters: an exact match wins, then an empty registry fails,
        then an empty name falls back to the only registered brain (or
        fails when there are several), and anything else is unknown.
        """
        with self._lock:
            if name in self._items:
                return self._items[name]
            if not self._items:
                raise NoBrainAvailableError()
            if not name:
                if len(self._items) == 1:
                    return next(iter(self._items.values()))
                raise AmbiguousBrainError(self._items)
            raise UnknownBrainError(name)

    def create(self, name: str = "") -> Brain:
        return self.resolve(name)()

    def names(self) -> List[str]:
        with self._lock:
            return list(self._items)

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._items

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)

    def __iter__(self) -> Iterator[str]:
        return iter(self.names())


def default_registry() -> BrainRegistry:
    """A fresh registry with the built-in backends registered."""
    reg = BrainRegistry()
    for name, factory in BUILTIN.items():
        reg.register(name, factory)
    return reg
