"""Exceptions raised by brain registration and resolution."""
from __future__ import annotations


class BrainError(Exception):
    """Base class for every brain error."""


class BrainRegistrationError(BrainError, ValueError):
    """Empty or duplicate backend name. Fatal: fix the startup wiring."""


class BrainResolveError(BrainError, LookupError):
    """No backend could be selected for the requested name."""


class NoBrainAvailableError(BrainResolveError):
    def __init__(self) -> None:
        super().__init__("no Brain available")


class AmbiguousBrainError(BrainResolveError):
    def __init__(self, names) -> None:
        self.names = list(names)
        super().__init__("multiple brains available; must choose one")


class UnknownBrainError(BrainResolveError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"unknown brain '{name}'")
