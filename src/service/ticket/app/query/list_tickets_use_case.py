from typing import List

from src.platform.logging.loguru_io import Logger
from src.service.ticket.app.dto.ticket_record import TicketRecord
from src.service.ticket.app.service.ticket_data_access_facade import TicketDataAccessFacade


class ListTicketsUseCase:
    def __init__(self, *, ticket_facade: TicketDataAccessFacade) -> None:
        self.ticket_facade = ticket_facade

    @Logger.io
    async def list_all(self) -> List[TicketRecord]:
        tickets = await self.ticket_facade.find_all()
        Logger.base.info(f'📋 [LIST_TICKETS] Found {len(tickets)} tickets')
        return tickets

    @Logger.io
    async def list_available(self) -> List[TicketRecord]:
        """Tickets still on sale"""
        tickets = await self.ticket_facade.find_available_tickets()
        Logger.base.info(f'🌟 [LIST_AVAILABLE] Found {len(tickets)} available tickets')
        return tickets

    @Logger.io
    async def list_sold(self) -> List[TicketRecord]:
        tickets = await self.ticket_facade.find_sold_tickets()
        Logger.base.info(f'💰 [LIST_SOLD] Found {len(tickets)} sold tickets')
        return tickets

    @Logger.io
    async def list_active(self) -> List[TicketRecord]:
        tickets = await self.ticket_facade.find_active_tickets()
        Logger.base.info(f'✅ [LIST_ACTIVE] Found {len(tickets)} active tickets')
        return tickets

    @Logger.io
    async def list_inactive(self) -> List[TicketRecord]:
        tickets = await self.ticket_facade.find_inactive_tickets()
        Logger.base.info(f'💤 [LIST_INACTIVE] Found {len(tickets)} inactive tickets')
        return tickets
