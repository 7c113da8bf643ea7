"""
OpenTelemetry tracing configuration.

Use cases open their spans through ``trace.get_tracer(__name__)``; until
``TracingConfig.setup`` installs an SDK provider those spans are no-ops.
"""

import os

from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.sdk.resources import SERVICE_NAME, Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import (
    BatchSpanProcessor,
    ConsoleSpanExporter,
    SimpleSpanProcessor,
    SpanExporter,
)
from opentelemetry.sdk.trace.sampling import ALWAYS_ON

from src.platform.config.core_setting import settings


class TracingConfig:
    """
    Usage:
        # Initialize once at app startup
        tracing = TracingConfig(service_name="ticket-service")
        tracing.setup()

        # Get tracer for manual spans
        tracer = tracing.get_tracer(name=__name__)
    """

    def __init__(
        self,
        *,
        service_name: str | None = None,
        otlp_endpoint: str | None = None,
        enable_console: bool | None = None,
        span_exporter: SpanExporter | None = None,
    ) -> None:
        self.service_name = service_name or settings.OTEL_SERVICE_NAME
        self.otlp_endpoint = otlp_endpoint or os.getenv('OTEL_EXPORTER_OTLP_ENDPOINT')
        self.enable_console = (
            settings.OTEL_CONSOLE_EXPORT if enable_console is None else enable_console
        )
        self.span_exporter = span_exporter

        self._provider: TracerProvider | None = None

    @property
    def provider(self) -> TracerProvider | None:
        return self._provider

    def setup(self, *, set_global: bool = True) -> TracerProvider:
        resource = Resource(attributes={SERVICE_NAME: self.service_name})
        self._provider = TracerProvider(resource=resource, sampler=ALWAYS_ON)

        if self.otlp_endpoint:
            otlp_exporter = OTLPSpanExporter(endpoint=self.otlp_endpoint)
            self._provider.add_span_processor(BatchSpanProcessor(otlp_exporter))

        if self.enable_console:
            self._provider.add_span_processor(BatchSpanProcessor(ConsoleSpanExporter()))

        # Caller-supplied exporter (e.g. in-memory in tests) is flushed synchronously
        if self.span_exporter is not None:
            self._provider.add_span_processor(SimpleSpanProcessor(self.span_exporter))

        if set_global:
            trace.set_tracer_provider(self._provider)
        return self._provider

    def get_tracer(self, *, name: str) -> trace.Tracer:
        if self._provider is not None:
            return self._provider.get_tracer(name)
        return trace.get_tracer(name)

    def shutdown(self) -> None:
        if self._provider:
            self._provider.shutdown()
