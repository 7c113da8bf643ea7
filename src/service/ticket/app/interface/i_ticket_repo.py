"""
Ticket Repository Interface

Persistence port for rich tickets. Implementations are assumed durable and
consistent per call; ``save`` rejects stale writes with ConflictError.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from src.service.ticket.app.dto.paging import Pagination, TicketEntityPage, TicketFilter
from src.service.ticket.domain.entity.ticket_entity import TicketEntity
from src.service.ticket.domain.value_object import (
    EventRef,
    TicketStatusValue,
    TicketTypeValue,
    UserRef,
)


class ITicketRepo(ABC):
    @abstractmethod
    async def find_by_id(self, *, ticket_id: str) -> Optional[TicketEntity]:
        pass

    @abstractmethod
    async def find_by_event(self, *, event: EventRef) -> List[TicketEntity]:
        pass

    @abstractmethod
    async def find_by_user(self, *, user: UserRef) -> List[TicketEntity]:
        pass

    @abstractmethod
    async def find_by_status(self, *, status: TicketStatusValue) -> List[TicketEntity]:
        pass

    @abstractmethod
    async def find_by_type(self, *, ticket_type: TicketTypeValue) -> List[TicketEntity]:
        pass

    @abstractmethod
    async def find_all(self) -> List[TicketEntity]:
        pass

    @abstractmethod
    async def find_with_filters(
        self, *, filters: Optional[TicketFilter], pagination: Optional[Pagination]
    ) -> TicketEntityPage:
        """Filtered search; pagination page/limit default to 1/10 when unset."""
        pass

    @abstractmethod
    async def find_available_tickets(self) -> List[TicketEntity]:
        pass

    @abstractmethod
    async def find_sold_tickets(self) -> List[TicketEntity]:
        pass

    @abstractmethod
    async def find_active_tickets(self) -> List[TicketEntity]:
        pass

    @abstractmethod
    async def find_inactive_tickets(self) -> List[TicketEntity]:
        pass

    @abstractmethod
    async def search_by_text(self, *, query: str) -> List[TicketEntity]:
        pass

    @abstractmethod
    async def save(self, *, ticket: TicketEntity) -> TicketEntity:
        """Insert when ``ticket.id`` is None, update otherwise. Returns the stored ticket."""
        pass

    @abstractmethod
    async def delete(self, *, ticket_id: str) -> bool:
        pass
