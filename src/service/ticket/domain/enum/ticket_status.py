from enum import StrEnum


class TicketStatus(StrEnum):
    AVAILABLE = 'available'
    SOLD = 'sold'
    CANCELED = 'canceled'
