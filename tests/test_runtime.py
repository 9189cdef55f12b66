import logging
from unittest.mock import patch
import pytest
from rboot.brain import MemoryBrain
from rboot.config import BrainSettings
from rboot.errors import AmbiguousBrainError, UnknownBrainError
from rboot.registry import BrainRegistry, default_registry
from rboot.runtime import open_brain, setup_logging, start

def test_open_default_brain():
    b = open_brain(default_registry(), BrainSettings())
    assert isinstance(b, MemoryBrain)

def test_open_named_brain():
    b = open_brain(default_registry(), BrainSettings(brain="memory"))
    b.set("k", b"v")
    assert b.get("k") == b"v"

def test_open_unknown_brain_reraises(caplog):
    with caplog.at_level(logging.WARNING, logger="rboot.runtime"):
        with pytest.raises(UnknownBrainError):
            open_brain(default_registry(), BrainSettings(brain="redis"))
    assert "redis" in caplog.text

def test_open_ambiguous_brain():
    reg = default_registry()
    reg.register("spare", MemoryBrain)
    with pytest.raises(AmbiguousBrainError):
        open_brain(reg, BrainSettings())

def test_open_uses_registered_factory():
    reg = BrainRegistry()
    made = []
    @reg.register_as("tracking")
    def make():
        made.append(MemoryBrain())
        return made[-1]
    assert open_brain(reg, BrainSettings()) is made[0]

def test_setup_logging_accepts_lowercase():
    setup_logging("debug")

def test_start_wires_observability_from_settings():
    s = BrainSettings(brain="memory", log_level="WARNING", prom_port=9100)
    with patch("rboot.runtime.init_prom") as prom, \
         patch("rboot.runtime.init_tracing") as tracing, \
         patch("rboot.runtime.setup_logging") as logs:
        b = start(s)
    assert isinstance(b, MemoryBrain)
    logs.assert_called_once_with("WARNING")
    prom.assert_called_once_with(9100)
    tracing.assert_called_once_with("rboot")

def test_start_reads_env_when_no_settings(monkeypatch):
    monkeypatch.setenv("RBOOT_BRAIN", "redis")
    monkeypatch.setenv("RBOOT_PROM_PORT", "0")
    monkeypatch.delenv("RBOOT_LOG_LEVEL", raising=False)
    with patch("rboot.runtime.init_prom") as prom, \
         patch("rboot.runtime.init_tracing"), \
         patch("rboot.runtime.setup_logging"):
        with pytest.raises(UnknownBrainError):
            start()
    prom.assert_called_once_with(0)

def test_start_uses_given_registry():
    reg = BrainRegistry()
    reg.register("only", MemoryBrain)
    with patch("rboot.runtime.init_prom"), patch("rboot.runtime.init_tracing"), \
         patch("rboot.runtime.setup_logging"):
        assert isinstance(start(BrainSettings(), reg), MemoryBrain)
