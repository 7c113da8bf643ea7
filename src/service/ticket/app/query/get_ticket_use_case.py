from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.ticket.app.dto.ticket_record import TicketRecord
from src.service.ticket.app.service.ticket_data_access_facade import TicketDataAccessFacade


class GetTicketUseCase:
    def __init__(self, *, ticket_facade: TicketDataAccessFacade) -> None:
        self.ticket_facade = ticket_facade

    @Logger.io
    async def execute(self, *, ticket_id: str) -> TicketRecord:
        Logger.base.info(f'🎫 [GET_TICKET] Loading ticket {ticket_id}')

        ticket = await self.ticket_facade.find_by_id(ticket_id)
        if ticket is None:
            Logger.base.warning(f'⚠️ [GET_TICKET] Ticket {ticket_id} not found')
            raise NotFoundError(f'Ticket {ticket_id} not found', resource_id=ticket_id)

        return ticket
