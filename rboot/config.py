import os
from pydantic import BaseModel, Field, field_validator
from typing import Literal

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

class BrainSettings(BaseModel):
    # Backend name handed to BrainRegistry.resolve; "" picks the only one registered
    brain: str = ""

    log_level: LogLevel = "INFO"

    # Prometheus exporter port; 0 disables it
    prom_port: int = Field(default=0, ge=0, le=65535)

    @field_validator("brain", mode="before")
    @classmethod
    def _strip_brain(cls, v):
        if v is None:
            return ""
        return v.strip() if isinstance(v, str) else v

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_level(cls, v):
        return v.upper() if isinstance(v, str) else v

    @classmethod
    def from_env(cls, prefix: str = "RBOOT_") -> "BrainSettings":
        """Reads <prefix>BRAIN, <prefix>LOG_LEVEL and <prefix>PROM_PORT."""
        return cls(
            brain=os.getenv(f"{prefix}BRAIN", ""),
            log_level=os.getenv(f"{prefix}LOG_LEVEL", "INFO"),
            prom_port=os.getenv(f"{prefix}PROM_PORT") or 0,
        )
