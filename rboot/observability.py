"""Prometheus metrics and OpenTelemetry tracing init."""
from __future__ import annotations
import os
from prometheus_client import Counter, start_http_server
from opentelemetry import trace
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter

BRAIN_OPS = Counter("brain_operations_total", "Brain operations", ["backend", "op"])
RESOLVES = Counter("brain_resolve_total", "Brain resolutions", ["outcome"])

def init_prom(port: int = 0) -> None:
    if port:
        start_http_server(port)

def init_tracing(service: str = "rboot") -> None:
    res = Resource.create({"service.name": service})
    provider = TracerProvider(resource=res)
    exporter = OTLPSpanExporter(
        endpoint=os.getenv("OTEL_EXPORTER_OTLP_ENDPOINT", "http://otel-collector:4317"),
        insecure=True,
    )
    provider.add_span_processor(BatchSpanProcessor(exporter))
    trace.set_tracer_provider(provider)

tracer = trace.get_tracer(__name__)
