from abc import ABC, abstractmethod
from typing import Optional

from src.service.ticket.app.dto.lookup_record import UserRecord


class IUserQueryRepo(ABC):
    @abstractmethod
    async def find_by_id(self, *, user_id: str) -> Optional[UserRecord]:
        pass
