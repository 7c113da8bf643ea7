"""Ticket Domain Enums"""

from src.service.ticket.domain.enum.ticket_status import TicketStatus

__all__ = ['TicketStatus']
