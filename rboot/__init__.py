"""Pluggable key-value brains and the chat message record for rboot bots."""
from __future__ import annotations
from .brain import Brain, MemoryBrain
from .config import BrainSettings
from .errors import (
    AmbiguousBrainError,
    BrainError,
    BrainRegistrationError,
    BrainResolveError,
    NoBrainAvailableError,
    UnknownBrainError,
)
from .message import Location, Message, User
from .registry import BrainFactory, BrainRegistry, default_registry
from .runtime import open_brain, setup_logging, start

__all__ = [
    "Brain", "MemoryBrain", "BrainSettings",
    "BrainError", "BrainRegistrationError", "BrainResolveError",
    "NoBrainAvailableError", "AmbiguousBrainError", "UnknownBrainError",
    "Location", "Message", "User",
    "BrainFactory", "BrainRegistry", "default_registry",
    "open_brain", "setup_logging", "start",
]
