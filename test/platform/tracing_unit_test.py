from unittest.mock import AsyncMock

from opentelemetry.sdk.trace.export.in_memory_span_exporter import InMemorySpanExporter
import pytest

from src.platform.observability.tracing import TracingConfig
from src.service.ticket.app.command.delete_ticket_use_case import DeleteTicketUseCase


pytestmark = pytest.mark.unit


class TestTracingConfig:
    def test_setup_builds_provider_with_service_name(self):
        tracing = TracingConfig(service_name='ticket-test', enable_console=False)

        provider = tracing.setup(set_global=False)

        assert tracing.provider is provider
        assert provider.resource.attributes['service.name'] == 'ticket-test'
        tracing.shutdown()

    @pytest.mark.asyncio
    async def test_use_case_span_is_exported(self, make_record):
        # Given: A provider with an in-memory exporter
        exporter = InMemorySpanExporter()
        tracing = TracingConfig(
            service_name='ticket-test', enable_console=False, span_exporter=exporter
        )
        tracing.setup(set_global=False)
        ticket_facade = AsyncMock()
        ticket_facade.find_by_id.return_value = make_record(id='T1')
        use_case = DeleteTicketUseCase(ticket_facade=ticket_facade)
        use_case.tracer = tracing.get_tracer(name=__name__)

        # When
        await use_case.execute(ticket_id='T1')

        # Then
        [span] = exporter.get_finished_spans()
        assert span.name == 'use_case.delete_ticket'
        assert span.attributes['ticket.id'] == 'T1'
        tracing.shutdown()
