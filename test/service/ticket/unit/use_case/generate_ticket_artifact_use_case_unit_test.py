from datetime import datetime, timezone
from unittest.mock import AsyncMock

import pytest

from src.platform.exception.exceptions import ValidationError
from src.service.ticket.app.command.generate_ticket_artifact_use_case import (
    GenerateTicketArtifactUseCase,
)
from src.service.ticket.app.dto.lookup_record import EventRecord


pytestmark = pytest.mark.unit


class TestGenerateTicketArtifactUseCase:
    def setup_method(self):
        self.ticket_facade = AsyncMock()
        self.event_query_repo = AsyncMock()
        self.use_case = GenerateTicketArtifactUseCase(
            ticket_facade=self.ticket_facade, event_query_repo=self.event_query_repo
        )

    @pytest.mark.asyncio
    async def test_renders_ticket_and_event_details(self, make_record):
        # Given
        self.ticket_facade.find_by_id.return_value = make_record(
            id='T1', code='TKT-ABC', seat='12', section='B'
        )
        self.event_query_repo.find_by_id.return_value = EventRecord(
            id='E1',
            name='Summer Fest',
            start_date=datetime(2026, 7, 4, 20, 30, tzinfo=timezone.utc),
            location='Main Arena',
        )

        # When
        artifact = await self.use_case.execute(ticket_id='T1')

        # Then
        text = artifact.content.decode('utf-8')
        assert artifact.filename == 'ticket_TKT-ABC.txt'
        assert artifact.media_type == 'text/plain'
        for expected in (
            'TICKET: TKT-ABC',
            'EVENT: Summer Fest',
            'DATE: 2026-07-04',
            'TIME: 20:30',
            'LOCATION: Main Arena',
            'TYPE: vip',
            'SECTION: B',
            'SEAT: 12',
            'PRICE: 50.00 USD',
        ):
            assert expected in text
        self.event_query_repo.find_by_id.assert_awaited_once_with(event_id='E1')

    @pytest.mark.asyncio
    async def test_missing_optional_details_use_placeholders(self, make_record):
        self.ticket_facade.find_by_id.return_value = make_record(id='T1')
        self.event_query_repo.find_by_id.return_value = EventRecord(id='E1', name='Gig')

        text = (await self.use_case.execute(ticket_id='T1')).content.decode('utf-8')

        assert 'DATE: TBD' in text
        assert 'LOCATION: TBD' in text
        assert 'SECTION: General' in text
        assert 'SEAT: Unassigned' in text

    @pytest.mark.asyncio
    async def test_missing_ticket_is_rejected(self):
        self.ticket_facade.find_by_id.return_value = None

        with pytest.raises(ValidationError, match='Ticket does not exist'):
            await self.use_case.execute(ticket_id='ghost')

        self.event_query_repo.find_by_id.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_missing_event_is_rejected(self, make_record):
        self.ticket_facade.find_by_id.return_value = make_record(id='T1')
        self.event_query_repo.find_by_id.return_value = None

        with pytest.raises(ValidationError) as exc_info:
            await self.use_case.execute(ticket_id='T1')

        assert exc_info.value.field == 'event_id'
