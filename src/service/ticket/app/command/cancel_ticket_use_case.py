from typing import Optional

from opentelemetry import trace

from src.platform.exception.exceptions import ValidationError
from src.platform.logging.loguru_io import Logger
from src.service.ticket.app.service.ticket_data_access_facade import TicketDataAccessFacade
from src.service.ticket.domain.ticket_state_machine import TicketStateMachine


class CancelTicketUseCase:
    def __init__(self, *, ticket_facade: TicketDataAccessFacade) -> None:
        self.ticket_facade = ticket_facade
        self.tracer = trace.get_tracer(__name__)

    @Logger.io
    async def execute(self, *, ticket_id: str, reason: Optional[str] = None) -> bool:
        with self.tracer.start_as_current_span(
            'use_case.cancel_ticket',
            attributes={'ticket.id': ticket_id},
        ):
            ticket = await self.ticket_facade.find_by_id(ticket_id)
            if ticket is None:
                raise ValidationError('Ticket does not exist', field='ticket_id')

            TicketStateMachine.assert_can_cancel(status=ticket.status, validated=ticket.validated)

            Logger.base.info(f'🚫 [CANCEL_TICKET] Canceling ticket {ticket_id} reason={reason!r}')
            return await self.ticket_facade.cancel_ticket(ticket_id, reason)
