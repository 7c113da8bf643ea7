"""
In-memory ticket repository.

Stores detached copies of rich tickets keyed by id. ``save`` is a
compare-and-swap on ``updated_at``: an update whose ``updated_at`` differs
from the stored one was built from a stale read and is rejected. A ticket
that carries ``updated_at`` but is no longer stored was deleted after it was
read and is rejected too.
"""

from datetime import datetime, timedelta, timezone
import math
from typing import Any, Callable, Dict, List, Optional

import attrs
import uuid_utils

from src.platform.exception.exceptions import ConflictError, ValidationError
from src.platform.logging.loguru_io import Logger
from src.service.ticket.app.dto.paging import Pagination, TicketEntityPage, TicketFilter
from src.service.ticket.app.interface.i_ticket_repo import ITicketRepo
from src.service.ticket.app.service.pagination_aggregator import PaginationDefaults
from src.service.ticket.domain.entity.ticket_entity import TicketEntity
from src.service.ticket.domain.enum.ticket_status import TicketStatus
from src.service.ticket.domain.value_object import (
    EventRef,
    TicketStatusValue,
    TicketTypeValue,
    UserRef,
)


SORTABLE_FIELDS = frozenset({'created_at', 'updated_at', 'price', 'code', 'type', 'status'})
SEARCHABLE_FIELDS = ('code', 'description', 'section', 'seat')


def _label(value: Optional[TicketStatusValue | TicketTypeValue]) -> Optional[str]:
    return value.value if value is not None else None


def _sort_value(ticket: TicketEntity, order_by: str) -> Any:
    if order_by == 'price':
        return ticket.price.amount if ticket.price else None
    if order_by in ('status', 'type'):
        return _label(getattr(ticket, order_by))
    return getattr(ticket, order_by)


def _matches_text(ticket: TicketEntity, needle: str) -> bool:
    haystack = [getattr(ticket, name) for name in SEARCHABLE_FIELDS]
    haystack.append(_label(ticket.type))
    return any(needle in value.lower() for value in haystack if value)


class InMemoryTicketRepoImpl(ITicketRepo):
    def __init__(self, *, pagination_defaults: Optional[PaginationDefaults] = None) -> None:
        self._tickets: Dict[str, TicketEntity] = {}
        self._last_write: Optional[datetime] = None
        self.pagination_defaults = pagination_defaults or PaginationDefaults()

    def _select(self, predicate: Callable[[TicketEntity], bool]) -> List[TicketEntity]:
        return [attrs.evolve(t) for t in self._tickets.values() if predicate(t)]

    def _next_timestamp(self) -> datetime:
        # Strictly increasing across writes so every save changes the CAS token
        now = datetime.now(timezone.utc)
        if self._last_write is not None and now <= self._last_write:
            now = self._last_write + timedelta(microseconds=1)
        self._last_write = now
        return now

    @Logger.io
    async def find_by_id(self, *, ticket_id: str) -> Optional[TicketEntity]:
        ticket = self._tickets.get(ticket_id)
        return attrs.evolve(ticket) if ticket is not None else None

    @Logger.io
    async def find_by_event(self, *, event: EventRef) -> List[TicketEntity]:
        return self._select(lambda t: t.event_id == event.id)

    @Logger.io
    async def find_by_user(self, *, user: UserRef) -> List[TicketEntity]:
        return self._select(lambda t: t.user_id == user.id)

    @Logger.io
    async def find_by_status(self, *, status: TicketStatusValue) -> List[TicketEntity]:
        return self._select(lambda t: t.status == status)

    @Logger.io
    async def find_by_type(self, *, ticket_type: TicketTypeValue) -> List[TicketEntity]:
        return self._select(lambda t: t.type == ticket_type)

    @Logger.io
    async def find_all(self) -> List[TicketEntity]:
        return self._select(lambda t: True)

    @Logger.io
    async def find_available_tickets(self) -> List[TicketEntity]:
        return self._select(lambda t: _label(t.status) == TicketStatus.AVAILABLE)

    @Logger.io
    async def find_sold_tickets(self) -> List[TicketEntity]:
        return self._select(lambda t: _label(t.status) == TicketStatus.SOLD)

    @Logger.io
    async def find_active_tickets(self) -> List[TicketEntity]:
        return self._select(lambda t: t.is_active)

    @Logger.io
    async def find_inactive_tickets(self) -> List[TicketEntity]:
        return self._select(lambda t: not t.is_active)

    @Logger.io
    async def search_by_text(self, *, query: str) -> List[TicketEntity]:
        needle = query.strip().lower()
        if not needle:
            return []
        return self._select(lambda t: _matches_text(t, needle))

    @staticmethod
    def _matches_filter(ticket: TicketEntity, filters: TicketFilter) -> bool:
        amount = ticket.price.amount if ticket.price else None
        checks = (
            filters.event_id is None or ticket.event_id == filters.event_id,
            filters.user_id is None or ticket.user_id == filters.user_id,
            filters.status is None or _label(ticket.status) == filters.status,
            filters.type is None or _label(ticket.type) == filters.type,
            filters.is_active is None or ticket.is_active == filters.is_active,
            filters.min_price is None or (amount is not None and amount >= filters.min_price),
            filters.max_price is None or (amount is not None and amount <= filters.max_price),
            not filters.query or _matches_text(ticket, filters.query.strip().lower()),
        )
        return all(checks)

    @Logger.io
    async def find_with_filters(
        self, *, filters: Optional[TicketFilter], pagination: Optional[Pagination]
    ) -> TicketEntityPage:
        filters = filters or TicketFilter()
        pagination = pagination or Pagination()

        order_by = pagination.order_by or 'created_at'
        if order_by not in SORTABLE_FIELDS:
            raise ValidationError(f'Cannot order tickets by "{order_by}"', field='order_by')

        matched = self._select(lambda t: self._matches_filter(t, filters))
        matched.sort(
            key=lambda t: (_sort_value(t, order_by) is None, _sort_value(t, order_by)),
            reverse=pagination.order_direction == 'desc',
        )

        page = self.pagination_defaults.page_or_default(pagination.page)
        limit = self.pagination_defaults.limit_or_default(pagination.limit)
        offset = (page - 1) * limit
        return TicketEntityPage(
            tickets=matched[offset : offset + limit],
            total=len(matched),
            page=page,
            limit=limit,
            total_pages=math.ceil(len(matched) / limit),
        )

    @Logger.io
    async def save(self, *, ticket: TicketEntity) -> TicketEntity:
        stored = self._tickets.get(ticket.id) if ticket.id is not None else None

        if stored is None and ticket.updated_at is not None:
            # Read before a delete; writing it back would bring the ticket back
            raise ConflictError(f'Ticket {ticket.id} was deleted concurrently')

        if stored is None:
            now = self._next_timestamp()
            saved = attrs.evolve(
                ticket,
                id=ticket.id or str(uuid_utils.uuid7()),
                created_at=ticket.created_at or now,
                updated_at=now,
            )
        else:
            if ticket.updated_at != stored.updated_at:
                raise ConflictError(f'Ticket {ticket.id} was modified concurrently, reload and retry')
            saved = attrs.evolve(ticket, updated_at=self._next_timestamp())

        self._tickets[saved.id] = saved  # type: ignore[index]
        return attrs.evolve(saved)

    @Logger.io
    async def delete(self, *, ticket_id: str) -> bool:
        return self._tickets.pop(ticket_id, None) is not None
