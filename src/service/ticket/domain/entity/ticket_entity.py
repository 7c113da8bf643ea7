from datetime import datetime
from typing import Optional

import attrs

from src.service.ticket.domain.value_object.money import Money
from src.service.ticket.domain.value_object.ticket_label import (
    TicketStatusValue,
    TicketTypeValue,
)


@attrs.define
class TicketEntity:
    """Rich ticket as stored by the persistence port: price/status/type are nested values."""

    event_id: str
    price: Optional[Money] = None
    status: Optional[TicketStatusValue] = None
    type: Optional[TicketTypeValue] = None
    id: Optional[str] = None  # Only None before the first save
    code: Optional[str] = None
    user_id: Optional[str] = None
    description: Optional[str] = None
    quantity: Optional[int] = None
    seat: Optional[str] = None
    section: Optional[str] = None
    is_reserved: bool = False
    reserved_until: Optional[datetime] = None
    validated: bool = False
    is_active: bool = True
    purchased_at: Optional[datetime] = None
    validated_at: Optional[datetime] = None
    canceled_at: Optional[datetime] = None
    cancellation_reason: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
