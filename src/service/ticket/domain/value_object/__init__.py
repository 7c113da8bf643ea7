"""Ticket Domain Value Objects"""

from src.service.ticket.domain.value_object.money import Money, parse_price
from src.service.ticket.domain.value_object.reference import (
    EventKey,
    EventRef,
    StatusKey,
    TypeKey,
    UserKey,
    UserRef,
    as_reference,
)
from src.service.ticket.domain.value_object.ticket_label import (
    TicketStatusValue,
    TicketTypeValue,
)

__all__ = [
    'EventKey',
    'EventRef',
    'Money',
    'StatusKey',
    'TicketStatusValue',
    'TicketTypeValue',
    'TypeKey',
    'UserKey',
    'UserRef',
    'as_reference',
    'parse_price',
]
