from abc import ABC, abstractmethod
from typing import Optional

from src.service.ticket.app.dto.lookup_record import EventRecord


class IEventQueryRepo(ABC):
    @abstractmethod
    async def find_by_id(self, *, event_id: str) -> Optional[EventRecord]:
        pass
