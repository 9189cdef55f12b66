from __future__ import annotations
from typing import Callable, Dict
from .base import Brain
from .memory import MemoryBrain

# Backends shipped with the package; default_registry() registers these.
BUILTIN: Dict[str, Callable[[], Brain]] = {
    "memory": MemoryBrain,
}

__all__ = ["Brain", "MemoryBrain", "BUILTIN"]
