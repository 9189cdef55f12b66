"""Startup helpers that turn settings plus a registry into a live brain."""
from __future__ import annotations
import logging
from .brain import Brain
from .config import BrainSettings
from .errors import BrainResolveError
from .observability import RESOLVES, init_prom, init_tracing, tracer
from .registry import BrainRegistry, default_registry

log = logging.getLogger(__name__)

def setup_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

def open_brain(registry: BrainRegistry, settings: BrainSettings) -> Brain:
    """
    Resolve ``settings.brain`` against the registry and build the backend.
    Resolution errors are logged and re-raised for the caller to handle.
    """
    with tracer.start_as_current_span("brain.open", attributes={"brain.requested": settings.brain}):
        try:
            factory = registry.resolve(settings.brain)
        except BrainResolveError as e:
            RESOLVES.labels(outcome=type(e).__name__).inc()
            log.warning("Could not resolve brain %r: %s. Installed: %s",
                        settings.brain, e, registry.names())
            raise
        RESOLVES.labels(outcome="ok").inc()
        brain = factory()
        log.info("Using brain %s (requested %r)", type(brain).__name__, settings.brain)
        return brain

def start(settings: BrainSettings | None = None, registry: BrainRegistry | None = None) -> Brain:
    """
    Bot startup: logging, metrics endpoint and tracing from ``settings``
    (read from the environment when omitted), then ``open_brain``.
    """
    if settings is None:
        settings = BrainSettings.from_env()
    setup_logging(settings.log_level)
    init_tracing("rboot")
    init_prom(settings.prom_port)
    log.debug("Starting with settings %s", settings.model_dump())
    return open_brain(registry if registry is not None else default_registry(), settings)
