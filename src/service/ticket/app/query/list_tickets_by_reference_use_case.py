"""
Lookups by a single reference (event, user, status, type).

Each accepts either the bare key or its resolved reference object. An empty
list means nothing matched; these lookups never raise for a miss.
"""

from typing import List

from src.platform.logging.loguru_io import Logger
from src.service.ticket.app.dto.ticket_record import TicketRecord
from src.service.ticket.app.service.ticket_data_access_facade import TicketDataAccessFacade
from src.service.ticket.domain.value_object import EventKey, StatusKey, TypeKey, UserKey


class ListTicketsByEventUseCase:
    def __init__(self, *, ticket_facade: TicketDataAccessFacade) -> None:
        self.ticket_facade = ticket_facade

    @Logger.io
    async def execute(self, *, event: EventKey) -> List[TicketRecord]:
        tickets = await self.ticket_facade.find_by_event(event)
        Logger.base.info(f'📋 [LIST_BY_EVENT] Found {len(tickets)} tickets')
        return tickets


class ListTicketsByUserUseCase:
    def __init__(self, *, ticket_facade: TicketDataAccessFacade) -> None:
        self.ticket_facade = ticket_facade

    @Logger.io
    async def execute(self, *, user: UserKey) -> List[TicketRecord]:
        tickets = await self.ticket_facade.find_by_user(user)
        Logger.base.info(f'📋 [LIST_BY_USER] Found {len(tickets)} tickets')
        return tickets


class ListTicketsByStatusUseCase:
    def __init__(self, *, ticket_facade: TicketDataAccessFacade) -> None:
        self.ticket_facade = ticket_facade

    @Logger.io
    async def execute(self, *, status: StatusKey) -> List[TicketRecord]:
        tickets = await self.ticket_facade.find_by_status(status)
        Logger.base.info(f'📋 [LIST_BY_STATUS] Found {len(tickets)} tickets')
        return tickets


class ListTicketsByTypeUseCase:
    def __init__(self, *, ticket_facade: TicketDataAccessFacade) -> None:
        self.ticket_facade = ticket_facade

    @Logger.io
    async def execute(self, *, ticket_type: TypeKey) -> List[TicketRecord]:
        tickets = await self.ticket_facade.find_by_type(ticket_type)
        Logger.base.info(f'📋 [LIST_BY_TYPE] Found {len(tickets)} tickets')
        return tickets
