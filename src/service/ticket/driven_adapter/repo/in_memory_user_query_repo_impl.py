from typing import Dict, Optional

from src.platform.logging.loguru_io import Logger
from src.service.ticket.app.dto.lookup_record import UserRecord
from src.service.ticket.app.interface.i_user_query_repo import IUserQueryRepo


class InMemoryUserQueryRepoImpl(IUserQueryRepo):
    def __init__(self) -> None:
        self._users: Dict[str, UserRecord] = {}

    def add(self, user: UserRecord) -> None:
        self._users[user.id] = user

    @Logger.io
    async def find_by_id(self, *, user_id: str) -> Optional[UserRecord]:
        return self._users.get(user_id)
