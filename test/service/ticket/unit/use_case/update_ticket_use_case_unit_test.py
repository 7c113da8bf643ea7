from decimal import Decimal
from unittest.mock import AsyncMock

import pytest

from src.platform.exception.exceptions import NotFoundError, ValidationError
from src.service.ticket.app.command.update_ticket_use_case import UpdateTicketUseCase
from src.service.ticket.app.dto.ticket_patch import TicketPatch


pytestmark = pytest.mark.unit


class TestUpdateTicketUseCase:
    @pytest.fixture(autouse=True)
    def _setup(self, make_record):
        self.existing = make_record(id='T1', seat='1', section='A')
        self.ticket_facade = AsyncMock()
        self.ticket_facade.find_by_id.return_value = self.existing
        self.ticket_facade.save.side_effect = lambda record: record
        self.use_case = UpdateTicketUseCase(ticket_facade=self.ticket_facade)

    @pytest.mark.asyncio
    async def test_merges_only_supplied_fields(self):
        # When: Only price and seat are patched
        updated = await self.use_case.execute(
            ticket_id='T1', patch=TicketPatch(price='75.25 EUR', seat='14')
        )

        # Then: Other fields are untouched
        assert (updated.price, updated.currency, updated.seat) == (Decimal('75.25'), 'EUR', '14')
        assert updated.description == self.existing.description
        assert updated.section == 'A'
        assert updated.type == 'vip'
        assert updated.id == 'T1'

    @pytest.mark.asyncio
    async def test_empty_patch_saves_unchanged_record(self):
        updated = await self.use_case.execute(ticket_id='T1', patch=TicketPatch())

        assert updated == self.existing

    @pytest.mark.asyncio
    async def test_missing_ticket_raises_not_found_with_id(self):
        self.ticket_facade.find_by_id.return_value = None

        with pytest.raises(NotFoundError) as exc_info:
            await self.use_case.execute(ticket_id='nope', patch=TicketPatch(seat='1'))

        assert exc_info.value.resource_id == 'nope'
        self.ticket_facade.save.assert_not_awaited()

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        'patch,field',
        [
            (TicketPatch(price='10,50 EUR'), 'price'),
            (TicketPatch(quantity=0), 'quantity'),
            (TicketPatch(description='  '), 'description'),
            (TicketPatch(type=''), 'type'),
        ],
    )
    async def test_rejects_invalid_patch_field(self, patch, field):
        with pytest.raises(ValidationError) as exc_info:
            await self.use_case.execute(ticket_id='T1', patch=patch)

        assert exc_info.value.field == field
        self.ticket_facade.save.assert_not_awaited()
