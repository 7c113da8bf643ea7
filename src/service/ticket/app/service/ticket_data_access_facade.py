"""
Ticket Data Access Facade

Thin layer between the use cases and the ticket persistence port. Every
ticket leaving the facade is a flat TicketRecord; every ticket entering the
port is a rich TicketEntity. Business rules live in the use cases, the
facade only translates and delegates.
"""

from datetime import datetime, timezone
from typing import List, Optional, Union

import attrs

from src.platform.logging.loguru_io import Logger
from src.service.ticket.app.dto.paging import PaginatedResult, Pagination, TicketFilter
from src.service.ticket.app.dto.ticket_record import TicketRecord
from src.service.ticket.app.interface.i_ticket_repo import ITicketRepo
from src.service.ticket.app.mapper.ticket_record_mapper import TicketRecordMapper
from src.service.ticket.app.service.pagination_aggregator import PaginationAggregator
from src.service.ticket.domain.entity.ticket_entity import TicketEntity
from src.service.ticket.domain.enum.ticket_status import TicketStatus
from src.service.ticket.domain.value_object import (
    EventKey,
    EventRef,
    StatusKey,
    TicketStatusValue,
    TicketTypeValue,
    TypeKey,
    UserKey,
    UserRef,
    as_reference,
)


TicketKey = Union[str, TicketRecord, TicketEntity]


def resolve_ticket_id(ticket: TicketKey) -> str:
    if isinstance(ticket, str):
        return ticket
    if ticket.id is None:
        raise ValueError('Ticket has no id')
    return ticket.id


class TicketDataAccessFacade:
    def __init__(
        self,
        *,
        ticket_repo: ITicketRepo,
        mapper: TicketRecordMapper,
        pagination_aggregator: PaginationAggregator,
    ) -> None:
        self.ticket_repo = ticket_repo
        self.mapper = mapper
        self.pagination_aggregator = pagination_aggregator

    def _to_records(self, tickets: List[TicketEntity]) -> List[TicketRecord]:
        return [self.mapper.to_application(ticket) for ticket in tickets]  # type: ignore[misc]

    @Logger.io
    async def find_by_id(self, ticket_id: str) -> Optional[TicketRecord]:
        ticket = await self.ticket_repo.find_by_id(ticket_id=ticket_id)
        return self.mapper.to_application(ticket)

    @Logger.io
    async def find_by_event(self, event: EventKey) -> List[TicketRecord]:
        tickets = await self.ticket_repo.find_by_event(event=as_reference(event, EventRef))
        return self._to_records(tickets)

    @Logger.io
    async def find_by_user(self, user: UserKey) -> List[TicketRecord]:
        tickets = await self.ticket_repo.find_by_user(user=as_reference(user, UserRef))
        return self._to_records(tickets)

    @Logger.io
    async def find_by_status(self, status: StatusKey) -> List[TicketRecord]:
        tickets = await self.ticket_repo.find_by_status(
            status=as_reference(status, TicketStatusValue)
        )
        return self._to_records(tickets)

    @Logger.io
    async def find_by_type(self, ticket_type: TypeKey) -> List[TicketRecord]:
        tickets = await self.ticket_repo.find_by_type(
            ticket_type=as_reference(ticket_type, TicketTypeValue)
        )
        return self._to_records(tickets)

    @Logger.io
    async def find_all(self) -> List[TicketRecord]:
        return self._to_records(await self.ticket_repo.find_all())

    @Logger.io
    async def find_available_tickets(self) -> List[TicketRecord]:
        return self._to_records(await self.ticket_repo.find_available_tickets())

    @Logger.io
    async def find_sold_tickets(self) -> List[TicketRecord]:
        return self._to_records(await self.ticket_repo.find_sold_tickets())

    @Logger.io
    async def find_active_tickets(self) -> List[TicketRecord]:
        return self._to_records(await self.ticket_repo.find_active_tickets())

    @Logger.io
    async def find_inactive_tickets(self) -> List[TicketRecord]:
        return self._to_records(await self.ticket_repo.find_inactive_tickets())

    @Logger.io
    async def search_by_text(self, query: str) -> List[TicketRecord]:
        return self._to_records(await self.ticket_repo.search_by_text(query=query))

    @Logger.io
    async def find_with_filters(
        self,
        filters: Optional[TicketFilter] = None,
        pagination: Optional[Pagination] = None,
    ) -> PaginatedResult[TicketRecord]:
        result = await self.ticket_repo.find_with_filters(
            filters=filters,
            pagination=self.pagination_aggregator.resolve(pagination),
        )
        return self.pagination_aggregator.aggregate(
            result=result,
            requested=pagination,
            convert=self.mapper.to_application,  # type: ignore[arg-type]
        )

    @Logger.io
    async def save(self, ticket: TicketRecord) -> TicketRecord:
        saved = await self.ticket_repo.save(ticket=self.mapper.to_domain(ticket))  # type: ignore[arg-type]
        return self.mapper.to_application(saved)  # type: ignore[return-value]

    @Logger.io
    async def delete(self, ticket: TicketKey) -> bool:
        return await self.ticket_repo.delete(ticket_id=resolve_ticket_id(ticket))

    @Logger.io
    async def validate_ticket(self, ticket_id: str) -> bool:
        """Mark the ticket as redeemed. ``False`` when the ticket does not exist."""
        ticket = await self.find_by_id(ticket_id)
        if ticket is None:
            return False

        ticket = attrs.evolve(ticket, validated=True, validated_at=datetime.now(timezone.utc))
        await self.save(ticket)
        return True

    @Logger.io
    async def cancel_ticket(self, ticket_id: str, reason: Optional[str] = None) -> bool:
        """Cancel the ticket. ``False`` when the ticket does not exist."""
        ticket = await self.find_by_id(ticket_id)
        if ticket is None:
            return False

        ticket = attrs.evolve(
            ticket,
            status=TicketStatus.CANCELED.value,
            cancellation_reason=reason,
            canceled_at=datetime.now(timezone.utc),
        )
        await self.save(ticket)
        return True
