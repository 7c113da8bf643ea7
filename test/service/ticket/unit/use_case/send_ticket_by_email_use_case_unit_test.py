"""
Unit tests for SendTicketByEmailUseCase

Test Coverage:
1. Recipient resolution (owner email, override, missing owner, missing address)
2. Message composition with the rendered artifact attached
3. Transport failure is re-raised as a generic DispatchError
"""

from datetime import datetime, timezone
from unittest.mock import AsyncMock

import pytest

from src.platform.exception.exceptions import DispatchError, ValidationError
from src.service.ticket.app.command.send_ticket_by_email_use_case import (
    SendTicketByEmailUseCase,
)
from src.service.ticket.app.dto.lookup_record import EventRecord, UserRecord
from src.service.ticket.app.dto.ticket_artifact import TicketArtifact


pytestmark = pytest.mark.unit


class TestSendTicketByEmailUseCase:
    @pytest.fixture(autouse=True)
    def _setup(self, make_record):
        self.ticket = make_record(id='T1', code='TKT-ABC', user_id='U1')
        self.ticket_facade = AsyncMock()
        self.ticket_facade.find_by_id.return_value = self.ticket
        self.event_query_repo = AsyncMock()
        self.event_query_repo.find_by_id.return_value = EventRecord(
            id='E1', name='Summer Fest', start_date=datetime(2026, 7, 4, tzinfo=timezone.utc)
        )
        self.user_query_repo = AsyncMock()
        self.user_query_repo.find_by_id.return_value = UserRecord(
            id='U1', name='Alex', email='alex@example.com'
        )
        self.mail_sender = AsyncMock()
        self.artifact_generator = AsyncMock()
        self.artifact_generator.execute.return_value = TicketArtifact(
            content=b'TICKET: TKT-ABC', filename='ticket_TKT-ABC.txt'
        )
        self.use_case = SendTicketByEmailUseCase(
            ticket_facade=self.ticket_facade,
            event_query_repo=self.event_query_repo,
            user_query_repo=self.user_query_repo,
            mail_sender=self.mail_sender,
            artifact_generator=self.artifact_generator,
        )

    def _sent_message(self):
        return self.mail_sender.send.await_args.kwargs['message']

    # ==================== Success ====================

    @pytest.mark.asyncio
    async def test_sends_to_ticket_owner_with_attachment(self):
        # When
        assert await self.use_case.execute(ticket_id='T1') is True

        # Then
        message = self._sent_message()
        assert message.to == 'alex@example.com'
        assert message.subject == 'Your ticket for Summer Fest'
        assert '2026-07-04' in message.text
        assert 'TKT-ABC' in message.html
        assert [(a.filename, a.content) for a in message.attachments] == [
            ('ticket_TKT-ABC.txt', b'TICKET: TKT-ABC')
        ]
        self.artifact_generator.execute.assert_awaited_once_with(ticket_id='T1')

    @pytest.mark.asyncio
    async def test_override_address_wins_over_owner(self):
        await self.use_case.execute(ticket_id='T1', email='gift@example.com')

        assert self._sent_message().to == 'gift@example.com'

    @pytest.mark.asyncio
    async def test_override_address_covers_missing_owner(self):
        self.user_query_repo.find_by_id.return_value = None

        await self.use_case.execute(ticket_id='T1', email='gift@example.com')

        assert self._sent_message().to == 'gift@example.com'

    @pytest.mark.asyncio
    async def test_unowned_ticket_skips_user_lookup(self, make_record):
        self.ticket_facade.find_by_id.return_value = make_record(id='T1', user_id=None)

        await self.use_case.execute(ticket_id='T1', email='door@example.com')

        self.user_query_repo.find_by_id.assert_not_awaited()

    # ==================== Validation ====================

    @pytest.mark.asyncio
    async def test_missing_ticket_is_rejected(self):
        self.ticket_facade.find_by_id.return_value = None

        with pytest.raises(ValidationError, match='Ticket does not exist'):
            await self.use_case.execute(ticket_id='T1')

    @pytest.mark.asyncio
    async def test_missing_event_is_rejected(self):
        self.event_query_repo.find_by_id.return_value = None

        with pytest.raises(ValidationError) as exc_info:
            await self.use_case.execute(ticket_id='T1')

        assert exc_info.value.field == 'event_id'

    @pytest.mark.asyncio
    async def test_missing_owner_without_override_is_rejected(self):
        self.user_query_repo.find_by_id.return_value = None

        with pytest.raises(ValidationError) as exc_info:
            await self.use_case.execute(ticket_id='T1')

        assert exc_info.value.field == 'user_id'
        self.mail_sender.send.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_owner_without_address_is_rejected(self):
        self.user_query_repo.find_by_id.return_value = UserRecord(id='U1', name='Alex')

        with pytest.raises(ValidationError) as exc_info:
            await self.use_case.execute(ticket_id='T1')

        assert exc_info.value.field == 'email'
        self.artifact_generator.execute.assert_not_awaited()

    # ==================== Dispatch failure ====================

    @pytest.mark.asyncio
    async def test_transport_failure_becomes_generic_dispatch_error(self):
        # Given: Transport blows up with internal details
        self.mail_sender.send.side_effect = ConnectionError('smtp.internal:25 refused')

        # When
        with pytest.raises(DispatchError) as exc_info:
            await self.use_case.execute(ticket_id='T1')

        # Then: Caller sees a generic message, cause stays chained
        assert str(exc_info.value) == 'Could not send the ticket by email'
        assert 'smtp.internal' not in str(exc_info.value)
        assert isinstance(exc_info.value.__cause__, ConnectionError)
        assert exc_info.value.status_code == 502
