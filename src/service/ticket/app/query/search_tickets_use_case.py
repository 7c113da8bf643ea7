from typing import List, Optional

from src.platform.logging.loguru_io import Logger
from src.service.ticket.app.dto.paging import PaginatedResult, Pagination, TicketFilter
from src.service.ticket.app.dto.ticket_record import TicketRecord
from src.service.ticket.app.service.ticket_data_access_facade import TicketDataAccessFacade


class SearchTicketsUseCase:
    """Filtered, paginated ticket search. Missing page/limit fall back to 1/10."""

    def __init__(self, *, ticket_facade: TicketDataAccessFacade) -> None:
        self.ticket_facade = ticket_facade

    @Logger.io
    async def execute(
        self,
        *,
        filters: Optional[TicketFilter] = None,
        pagination: Optional[Pagination] = None,
    ) -> PaginatedResult[TicketRecord]:
        result = await self.ticket_facade.find_with_filters(filters, pagination)
        Logger.base.info(
            f'🔍 [SEARCH_TICKETS] page {result.page}/{result.total_pages}, total={result.total}'
        )
        return result


class SearchTicketsByTextUseCase:
    def __init__(self, *, ticket_facade: TicketDataAccessFacade) -> None:
        self.ticket_facade = ticket_facade

    @Logger.io
    async def execute(self, *, query: str) -> List[TicketRecord]:
        tickets = await self.ticket_facade.search_by_text(query)
        Logger.base.info(f'🔍 [SEARCH_TEXT] "{query}" matched {len(tickets)} tickets')
        return tickets
