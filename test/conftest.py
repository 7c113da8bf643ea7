"""
Test Configuration and Fixtures

Everything runs against the in-memory adapters, so no fixture needs external
infrastructure. Collaborator doubles for pure unit tests are built with
unittest.mock inside the test modules themselves.
"""

from datetime import datetime, timezone
from decimal import Decimal

import pytest

from src.service.ticket.app.command.generate_ticket_artifact_use_case import (
    GenerateTicketArtifactUseCase,
)
from src.service.ticket.app.dto.lookup_record import EventRecord, UserRecord
from src.service.ticket.app.dto.ticket_record import TicketRecord
from src.service.ticket.app.mapper.ticket_record_mapper import TicketDefaults, TicketRecordMapper
from src.service.ticket.app.service.pagination_aggregator import (
    PaginationAggregator,
    PaginationDefaults,
)
from src.service.ticket.app.service.ticket_data_access_facade import TicketDataAccessFacade
from src.service.ticket.driven_adapter.mail.mock_mail_sender_impl import MockMailSenderImpl
from src.service.ticket.driven_adapter.repo.in_memory_event_query_repo_impl import (
    InMemoryEventQueryRepoImpl,
)
from src.service.ticket.driven_adapter.repo.in_memory_ticket_repo_impl import (
    InMemoryTicketRepoImpl,
)
from src.service.ticket.driven_adapter.repo.in_memory_user_query_repo_impl import (
    InMemoryUserQueryRepoImpl,
)


EVENT_ID = 'E1'
USER_ID = 'U1'


def build_record(**overrides) -> TicketRecord:
    fields = {
        'event_id': EVENT_ID,
        'price': Decimal('50.00'),
        'currency': 'USD',
        'status': 'available',
        'type': 'vip',
        'code': 'TKT-0000000001',
        'description': 'Front row',
        'quantity': 1,
    }
    fields.update(overrides)
    return TicketRecord(**fields)


@pytest.fixture
def ticket_defaults() -> TicketDefaults:
    return TicketDefaults()


@pytest.fixture
def mapper(ticket_defaults: TicketDefaults) -> TicketRecordMapper:
    return TicketRecordMapper(ticket_defaults)


@pytest.fixture
def pagination_aggregator() -> PaginationAggregator:
    return PaginationAggregator(PaginationDefaults())


@pytest.fixture
def ticket_repo() -> InMemoryTicketRepoImpl:
    return InMemoryTicketRepoImpl()


@pytest.fixture
def ticket_facade(
    ticket_repo: InMemoryTicketRepoImpl,
    mapper: TicketRecordMapper,
    pagination_aggregator: PaginationAggregator,
) -> TicketDataAccessFacade:
    return TicketDataAccessFacade(
        ticket_repo=ticket_repo, mapper=mapper, pagination_aggregator=pagination_aggregator
    )


@pytest.fixture
def event_query_repo() -> InMemoryEventQueryRepoImpl:
    repo = InMemoryEventQueryRepoImpl()
    repo.add(
        EventRecord(
            id=EVENT_ID,
            name='Summer Fest',
            start_date=datetime(2026, 7, 4, 20, 30, tzinfo=timezone.utc),
            location='Main Arena',
        )
    )
    return repo


@pytest.fixture
def user_query_repo() -> InMemoryUserQueryRepoImpl:
    repo = InMemoryUserQueryRepoImpl()
    repo.add(UserRecord(id=USER_ID, name='Alex', email='alex@example.com'))
    return repo


@pytest.fixture
def mail_sender() -> MockMailSenderImpl:
    return MockMailSenderImpl(debug=False)


@pytest.fixture
def artifact_generator(
    ticket_facade: TicketDataAccessFacade, event_query_repo: InMemoryEventQueryRepoImpl
) -> GenerateTicketArtifactUseCase:
    return GenerateTicketArtifactUseCase(
        ticket_facade=ticket_facade, event_query_repo=event_query_repo
    )


@pytest.fixture
def make_record():
    """Factory for flat tickets of event E1; keyword overrides replace defaults."""
    return build_record
