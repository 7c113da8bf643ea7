from opentelemetry import trace

from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.ticket.app.service.ticket_data_access_facade import TicketDataAccessFacade


class DeleteTicketUseCase:
    def __init__(self, *, ticket_facade: TicketDataAccessFacade) -> None:
        self.ticket_facade = ticket_facade
        self.tracer = trace.get_tracer(__name__)

    @Logger.io
    async def execute(self, *, ticket_id: str) -> None:
        """Permanently remove a ticket. There is no soft delete."""
        with self.tracer.start_as_current_span(
            'use_case.delete_ticket',
            attributes={'ticket.id': ticket_id},
        ):
            ticket = await self.ticket_facade.find_by_id(ticket_id)
            if ticket is None:
                raise NotFoundError(f'Ticket {ticket_id} not found', resource_id=ticket_id)

            await self.ticket_facade.delete(ticket)
            Logger.base.info(f'🗑️ [DELETE_TICKET] Deleted ticket {ticket_id}')
