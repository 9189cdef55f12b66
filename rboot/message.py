"""Chat event record passed between adapters, brains and handlers."""
from __future__ import annotations
import json
from typing import Any, Dict, Optional
from pydantic import BaseModel, ConfigDict, Field

class User(BaseModel):
    """Identity of a chat participant (person or group). Adapters may attach extra fields."""
    model_config = ConfigDict(extra="allow")

    id: str = ""
    name: str = ""

class Location(BaseModel):
    lat: float
    long: float

# Dropped from the wire form when empty, false or None
_OMIT_EMPTY = ("channel", "broadcast", "mate", "location")

class Message(BaseModel):
    """
    One chat event.

    Wire field names are fixed: ``channel``, ``to``, ``from``, ``sender``,
    ``content``, ``broadcast``, ``mate``, ``location``. In Python the
    ``from`` field is ``from_``; either name is accepted on input.
    """
    model_config = ConfigDict(populate_by_name=True)

    channel: str = ""
    to: User = Field(default_factory=User)
    from_: User = Field(default_factory=User, alias="from")
    sender: User = Field(default_factory=User)
    content: str = ""
    broadcast: bool = False
    mate: Dict[str, Any] = Field(default_factory=dict)
    location: Optional[Location] = None

    def _dump(self, mode: str) -> Dict[str, Any]:
        data = self.model_dump(mode=mode, by_alias=True)
        for key in _OMIT_EMPTY:
            if not data.get(key):
                data.pop(key, None)
        return data

    def to_dict(self) -> Dict[str, Any]:
        return self._dump("python")

    def to_json(self) -> str:
        return json.dumps(self._dump("json"), separators=(",", ":"), ensure_ascii=False)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Message":
        return cls.model_validate(data)

    @classmethod
    def from_json(cls, raw: str | bytes) -> "Message":
        return cls.model_validate_json(raw)
