from decimal import Decimal
from typing import Generic, List, Literal, Optional, TypeVar

import attrs

from src.service.ticket.domain.entity.ticket_entity import TicketEntity


_T = TypeVar('_T')


@attrs.define(frozen=True)
class TicketFilter:
    event_id: Optional[str] = None
    user_id: Optional[str] = None
    status: Optional[str] = None
    type: Optional[str] = None
    query: Optional[str] = None
    min_price: Optional[Decimal] = None
    max_price: Optional[Decimal] = None
    is_active: Optional[bool] = None


@attrs.define(frozen=True)
class Pagination:
    page: Optional[int] = None
    limit: Optional[int] = None
    order_by: Optional[str] = None
    order_direction: Literal['asc', 'desc'] = 'desc'


@attrs.define
class TicketEntityPage:
    """Page of rich tickets as returned by the persistence port."""

    tickets: List[TicketEntity]
    total: int
    page: Optional[int] = None
    limit: Optional[int] = None
    total_pages: Optional[int] = None


@attrs.define
class PaginatedResult(Generic[_T]):
    items: List[_T]
    total: int
    page: int
    limit: int
    total_pages: int
