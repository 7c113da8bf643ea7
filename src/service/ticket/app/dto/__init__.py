"""Application layer DTOs"""

from src.service.ticket.app.dto.lookup_record import EventRecord, UserRecord
from src.service.ticket.app.dto.mail_message import MailAttachment, MailMessage
from src.service.ticket.app.dto.paging import (
    PaginatedResult,
    Pagination,
    TicketEntityPage,
    TicketFilter,
)
from src.service.ticket.app.dto.ticket_artifact import TicketArtifact
from src.service.ticket.app.dto.ticket_patch import TicketPatch
from src.service.ticket.app.dto.ticket_record import TicketRecord

__all__ = [
    'EventRecord',
    'MailAttachment',
    'MailMessage',
    'PaginatedResult',
    'Pagination',
    'TicketArtifact',
    'TicketEntityPage',
    'TicketFilter',
    'TicketPatch',
    'TicketRecord',
    'UserRecord',
]
