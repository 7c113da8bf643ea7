from unittest.mock import AsyncMock

import pytest

from src.platform.exception.exceptions import NotFoundError
from src.service.ticket.app.command.delete_ticket_use_case import DeleteTicketUseCase


pytestmark = pytest.mark.unit


class TestDeleteTicketUseCase:
    def setup_method(self):
        self.ticket_facade = AsyncMock()
        self.use_case = DeleteTicketUseCase(ticket_facade=self.ticket_facade)

    @pytest.mark.asyncio
    async def test_deletes_existing_ticket(self, make_record):
        ticket = make_record(id='T1')
        self.ticket_facade.find_by_id.return_value = ticket

        await self.use_case.execute(ticket_id='T1')

        self.ticket_facade.delete.assert_awaited_once_with(ticket)

    @pytest.mark.asyncio
    async def test_missing_ticket_fails_before_delete(self):
        self.ticket_facade.find_by_id.return_value = None

        with pytest.raises(NotFoundError) as exc_info:
            await self.use_case.execute(ticket_id='ghost')

        assert exc_info.value.resource_id == 'ghost'
        self.ticket_facade.delete.assert_not_awaited()
